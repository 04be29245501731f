from __future__ import annotations

from pathlib import Path

import pytest

from lib_safe_fs.adapters.filesystem.working_dir import WorkingDirectory


@pytest.fixture(autouse=True)
def _restore_cwd(monkeypatch: pytest.MonkeyPatch) -> None:
    # monkeypatch restores the original working directory after each test
    monkeypatch.chdir(Path.cwd())


def test_context_manager_restores_directory(tmp_path: Path) -> None:
    original = Path.cwd()
    assert tmp_path.resolve() != original.resolve()

    with WorkingDirectory.change(tmp_path) as guard:
        assert guard.active
        assert Path.cwd().resolve() == tmp_path.resolve()

    assert not guard.active
    assert Path.cwd() == original


def test_restores_directory_on_exception(tmp_path: Path) -> None:
    original = Path.cwd()

    with pytest.raises(RuntimeError):
        with WorkingDirectory.change(tmp_path):
            raise RuntimeError("boom")

    assert Path.cwd() == original


def test_close_then_exit(tmp_path: Path) -> None:
    original = Path.cwd()
    guard = WorkingDirectory.change(tmp_path)
    assert Path.cwd().resolve() == tmp_path.resolve()

    guard.close()
    assert Path.cwd() == original

    other = tmp_path / "other"
    other.mkdir()
    with WorkingDirectory.change(other):
        guard.close()
        assert Path.cwd().resolve() == other.resolve()
    assert Path.cwd() == original


def test_change_to_missing_directory_raises(tmp_path: Path) -> None:
    original = Path.cwd()

    with pytest.raises(FileNotFoundError):
        WorkingDirectory.change(tmp_path / "missing")

    assert Path.cwd() == original
