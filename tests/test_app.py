import io
import sys

import pytest

from quickfind.app import WINDOW_HEIGHT, WINDOW_WIDTH, Launcher, main


@pytest.fixture
def root(tmp_path):
    for name in ("Report.txt", "readme.md", "photo.png"):
        (tmp_path / name).write_text("x")
    return tmp_path


def _launcher(root, lines="", opened=None):
    out = io.StringIO()
    opener = (lambda f: opened.append(f)) if opened is not None else (lambda f: None)
    return Launcher(root, stdin=io.StringIO(lines), stdout=out, opener=opener), out


def _lines(out):
    return out.getvalue().splitlines()


def test_query_reports_created_results(root):
    launcher, out = _launcher(root)
    assert launcher.handle("re") is True
    assert set(_lines(out)) == {"+ report.txt", "+ readme.md"}


def test_narrowing_query_reports_deleted_results(root):
    launcher, out = _launcher(root)
    launcher.handle("re")
    launcher.handle("rep")
    assert _lines(out)[-1] == "- readme.md"
    assert [f.name for f in launcher.session.results] == ["report.txt"]


def test_empty_query_clears_all_results(root):
    launcher, out = _launcher(root)
    launcher.handle("p")
    before = {f.name for f in launcher.session.results}
    launcher.handle("   ")
    assert launcher.session.results == []
    deleted = {line[2:] for line in _lines(out) if line.startswith("- ")}
    assert deleted == before


def test_open_command_opens_matching_result(root):
    opened = []
    launcher, _ = _launcher(root, opened=opened)
    launcher.handle("photo")
    launcher.handle(":open photo.png")
    assert [f.name for f in opened] == ["photo.png"]
    assert opened[0].path == str(root / "photo.png")


def test_open_unknown_result_reports_it(root):
    opened = []
    launcher, out = _launcher(root, opened=opened)
    launcher.handle(":open missing.txt")
    assert opened == []
    assert _lines(out) == ["no such result: missing.txt"]


def test_toggle_hides_and_restores_size(root):
    launcher, _ = _launcher(root)
    assert launcher.size == (WINDOW_WIDTH, WINDOW_HEIGHT)
    launcher.handle("re")
    shown = launcher.size
    launcher.handle(":toggle")
    assert launcher.size == (0, 0)
    assert launcher.visible is False
    launcher.handle(":toggle")
    assert launcher.size == shown


def test_height_grows_with_results_and_stays_capped(root):
    launcher, _ = _launcher(root)
    launcher.handle("zzz")
    empty_height = launcher.size[1]
    launcher.handle("e")
    assert launcher.size[1] >= empty_height
    assert launcher.size[1] <= 600


def test_quit_returns_false(root):
    launcher, _ = _launcher(root)
    assert launcher.handle(":quit") is False


def test_unknown_command_raises(root):
    launcher, _ = _launcher(root)
    with pytest.raises(ValueError):
        launcher.handle(":bogus")


def test_run_stops_at_quit(root):
    launcher, out = _launcher(root, lines="photo\n:quit\nre\n")
    launcher.run()
    assert _lines(out) == ["+ photo.png"]


def test_main_reads_standard_input(root, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("readme\n"))
    assert main(["--root", str(root)]) == 0
    assert capsys.readouterr().out.splitlines() == ["+ readme.md"]