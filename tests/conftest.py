from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Callable

import pytest

import theme
from main import main


@pytest.fixture(autouse=True)
def _plain_output(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep list output free of ANSI codes regardless of FORCE_COLOR."""
    monkeypatch.setattr(theme, "_ENABLE", False)
    monkeypatch.delenv("TODO_LOG_LEVEL", raising=False)


@pytest.fixture(autouse=True)
def _restore_root_logger():
    """main() reconfigures the root logger; put pytest's handlers back."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture()
def store(tmp_path: Path) -> Path:
    return tmp_path / "tasks.json"


@pytest.fixture()
def write_store(store: Path) -> Callable[[Any], Path]:
    def _write(data: Any) -> Path:
        store.write_text(json.dumps(data, indent=2), encoding="utf-8")
        return store
    return _write


@pytest.fixture()
def read_store(store: Path) -> Callable[[], Any]:
    def _read() -> Any:
        return json.loads(store.read_text(encoding="utf-8"))
    return _read


@pytest.fixture()
def todo(store: Path) -> Callable[..., int]:
    """Run the entry point as `todo <args...>` against the temp store."""
    def _run(*args: str) -> int:
        return main(["todo", *args], path=store)
    return _run
