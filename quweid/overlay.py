"""
quweid.overlay
==============
Frameless floating overlay window (tkinter).
Displays the typed code and the ten candidates of the open page.
"""

from __future__ import annotations

import tkinter as tk

from .engine import UpdatePanel

BG = "#1a1a2e"


class OverlayWindow:
    """
    A small, always-on-top, frameless window showing the typed digits and,
    once three digits are in, the labelled candidates in a grid.
    Repositions itself near the system cursor on every update.
    """

    def __init__(self, root: tk.Tk, overlay_cfg: dict) -> None:
        self.root = root
        self.cfg = overlay_cfg
        self._candidate_labels: list[tk.Label] = []
        self._build()

    # ── Construction ─────────────────────────────────────────────────────────

    def _build(self) -> None:
        self.win = tk.Toplevel(self.root)
        self.win.withdraw()
        self.win.overrideredirect(True)         # no title bar / border
        self.win.attributes("-topmost", True)
        self.win.attributes("-alpha", self.cfg.get("opacity", 0.93))

        self.frame = tk.Frame(self.win, bg=BG, padx=14, pady=8)
        self.frame.pack(fill="both", expand=True)

        # Row 1 — typed code
        self.code_label = tk.Label(
            self.frame,
            text="",
            bg=BG,
            fg="#4a9eff",
            font=("Courier New", 10, "bold"),
            anchor="w",
        )
        self.code_label.pack(fill="x")

        # Row 2+ — candidate grid
        self.cand_frame = tk.Frame(self.frame, bg=BG)
        self.cand_frame.pack(fill="x", pady=(4, 0))

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _cursor_pos(self) -> tuple[int, int]:
        try:
            return self.root.winfo_pointerx(), self.root.winfo_pointery()
        except tk.TclError:
            return 100, 100

    def _reposition(self) -> None:
        cx, cy = self._cursor_pos()
        ox = self.cfg.get("offset_x", 16)
        oy = self.cfg.get("offset_y", 24)
        self.win.geometry(f"+{cx + ox}+{cy + oy}")

    def _clear_candidates(self) -> None:
        for lbl in self._candidate_labels:
            lbl.destroy()
        self._candidate_labels.clear()

    # ── Public API ────────────────────────────────────────────────────────────

    def update(self, panel: UpdatePanel) -> None:
        """Refresh content and show the overlay near the cursor."""
        if not panel.visible:
            self.hide()
            return

        header = "  ".join(panel.preedit)
        if panel.page_code is not None:
            header += f"   ▸ {panel.page_code * 10 + 1:04d}-{panel.page_code * 10 + 10:04d}"
        self.code_label.config(text=header)
        self._clear_candidates()

        columns = max(1, self.cfg.get("columns", 5))
        for i, (label, text) in enumerate(panel.candidates):
            is_sel = i == panel.cursor
            lbl = tk.Label(
                self.cand_frame,
                text=f"{label}. {text or '　'}",
                bg="#e94560" if is_sel else BG,
                fg="#ffffff" if is_sel else "#a0a0c0",
                font=("Noto Sans CJK SC", 13, "bold" if is_sel else "normal"),
                anchor="w",
                padx=6,
            )
            lbl.grid(row=i // columns, column=i % columns, sticky="w", padx=1, pady=1)
            self._candidate_labels.append(lbl)

        self._reposition()
        self.win.deiconify()
        self.win.lift()

    def hide(self) -> None:
        if self.win:
            self.win.withdraw()
