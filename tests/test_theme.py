import importlib
import io
import sys

import pytest

import theme
import tracker
from models import Status, Task


class _FakeTTY:
    def isatty(self) -> bool:
        return True

    def write(self, text: str) -> int:
        return len(text)

    def flush(self) -> None:
        pass


@pytest.fixture()
def reload_theme(monkeypatch):
    """Re-evaluate the color switches under a patched environment."""
    for name in ("FORCE_COLOR", "NO_COLOR", "COLORTERM"):
        monkeypatch.delenv(name, raising=False)

    def _reload(**env: str) -> None:
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        importlib.reload(theme)
        importlib.reload(tracker)

    yield _reload
    monkeypatch.undo()
    importlib.reload(theme)
    importlib.reload(tracker)


def _line() -> str:
    return tracker.TaskList.format_task(Task(id=3, description="a", status=Status.DONE))


def test_force_color_adds_ansi_codes(reload_theme):
    reload_theme(FORCE_COLOR="1")
    line = _line()
    assert "\033[38;5;" in line
    assert line.endswith(theme.RESET)


def test_truecolor_when_terminal_supports_it(reload_theme):
    reload_theme(FORCE_COLOR="yes", COLORTERM="truecolor")
    assert "\033[38;2;" in _line()


def test_no_color_wins_over_force_color(reload_theme):
    reload_theme(FORCE_COLOR="1", NO_COLOR="")
    assert _line() == 'ID: 3, Desc: "a", Status: DONE'


def test_plain_when_not_a_tty(reload_theme, monkeypatch):
    monkeypatch.setattr(sys, "stdout", io.StringIO())
    reload_theme()
    assert not theme._ENABLE
    assert "\033[" not in _line()


def test_tty_enables_color(reload_theme, monkeypatch):
    monkeypatch.setattr(sys, "stdout", _FakeTTY())
    reload_theme()
    assert theme._ENABLE
    assert theme.STATUS_COLOR[Status.DONE] in _line()
