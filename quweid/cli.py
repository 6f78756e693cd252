"""
quweid.cli
==========
Command-line entry point.
Registered as the ``quweid`` console script in pyproject.toml.

Usage:
    quweid                        # use config.json in cwd or package default
    quweid --config /my/path.json # explicit config file
    quweid --page 160             # print the ten candidates of page 160 and exit
    quweid --lookup 1601          # show how a single sub-code is decoded and exit
"""

from __future__ import annotations

import argparse
import sys

from .buffer import MAX_CODE
from .codemap import (
    SUB_CODE_MAX,
    SUB_CODE_MIN,
    CodeMapper,
    ConverterError,
    quwei_bytes,
    quwei_pair,
)
from .paging import CandidatePage


def _print_page(mapper: CodeMapper, page_code: int) -> None:
    page = CandidatePage.build(page_code, mapper)
    print(f"Page {page_code:03d}  (sub-codes {page[0].sub_code:04d}-{page[-1].sub_code:04d})\n")
    for slot in page.slots:
        print(f"  {slot.label}. {slot.sub_code:04d}  {slot.text or '-'}")
    print()


def _print_lookup(mapper: CodeMapper, sub_code: int) -> None:
    qu, wei = quwei_pair(sub_code)
    raw = quwei_bytes(sub_code)
    text = mapper.map(sub_code)
    print(f"  sub-code : {sub_code:04d}")
    print(f"  qu / wei : {qu} / {wei}")
    print(f"  bytes    : {raw.hex(' ').upper()}")
    print(f"  char     : {text if text else '(none)'}")
    if text:
        print(f"  unicode  : U+{ord(text[0]):04X}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="quweid",
        description="System-wide quwei (区位码) character input via the number keys.",
    )
    parser.add_argument(
        "--config", "-c",
        metavar="PATH",
        help="Path to a custom config.json (overrides default resolution order).",
    )
    parser.add_argument(
        "--page", "-p",
        metavar="CODE",
        type=int,
        help=f"Print the candidates of a page code (0-{MAX_CODE}) and exit.",
    )
    parser.add_argument(
        "--lookup", "-l",
        metavar="SUBCODE",
        type=int,
        help=f"Decode a single sub-code ({SUB_CODE_MIN}-{SUB_CODE_MAX}) and exit.",
    )
    args = parser.parse_args(argv)

    if args.page is not None and not 0 <= args.page <= MAX_CODE:
        parser.error(f"--page must be between 0 and {MAX_CODE}")
    if args.lookup is not None and not SUB_CODE_MIN <= args.lookup <= SUB_CODE_MAX:
        parser.error(f"--lookup must be between {SUB_CODE_MIN} and {SUB_CODE_MAX}")

    try:
        mapper = CodeMapper()
    except ConverterError as e:
        print(f"[quwei] Fatal: {e}")
        sys.exit(1)

    if args.page is not None or args.lookup is not None:
        if args.page is not None:
            _print_page(mapper, args.page)
        if args.lookup is not None:
            _print_lookup(mapper, args.lookup)
        sys.exit(0)

    from .config import load_config

    config = load_config(args.config)

    # Print startup banner
    print("=" * 54)
    print("  quweid — active")
    print("=" * 54)
    print(f"  Locale    : {config.get('locale')}")
    print(f"  Converter : {mapper.encoding}")
    print("-" * 54)
    print("  0-9   : type code / pick candidate (1..9, 0)")
    print("  -     : previous page     =     : next page")
    print("  [ / ] : move highlight    Space : pick highlighted")
    print("  Bksp  : delete digit      Ent   : commit digits")
    print("  Esc   : cancel")
    print("=" * 54)
    print("  Press Ctrl+C to quit\n")

    # Import here so --page/--lookup work even if pynput isn't installed yet
    from .app import QuweiApp
    app = QuweiApp(config)
    app.run()


if __name__ == "__main__":
    main()
