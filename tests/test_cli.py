import pytest

from quweid.cli import main


def test_page(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--page", "160"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "Page 160" in out
    assert "1. 1601  啊" in out
    assert "0. 1610" in out


def test_lookup(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--lookup", "1601"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "16 / 1" in out
    assert "B0 A1" in out
    assert "啊" in out


@pytest.mark.parametrize("argv", [["--page", "1000"], ["--lookup", "0"], ["--page", "x"]])
def test_rejects_bad_codes(argv):
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 2


def test_app_class_lives_in_app_module():
    pytest.importorskip("tkinter")
    pytest.importorskip("pynput")
    import quweid
    from quweid.app import QuweiApp

    assert not hasattr(quweid, "QuweiApp")
    assert "from quweid.app import QuweiApp" in QuweiApp.__doc__
