import os
from collections.abc import Callable
from pathlib import Path

import pytest
from loguru import logger

DEFAULT_MTIME = 1_000_000_000

TreeSpec = dict[str, tuple[int, int] | None]


def write_file(path: Path, size: int, mtime: int = DEFAULT_MTIME) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    os.utime(path, (mtime, mtime))


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[[str, TreeSpec], Path]:
    """Create a directory tree from {relative_path: (size, mtime)}.

    A value of None makes an empty directory.
    """

    def _make(name: str, entries: TreeSpec) -> Path:
        root = tmp_path / name
        root.mkdir(parents=True, exist_ok=True)
        for rel, spec in entries.items():
            path = root / rel
            if spec is None:
                path.mkdir(parents=True, exist_ok=True)
            else:
                size, mtime = spec
                write_file(path, size, mtime)
        return root

    return _make


@pytest.fixture
def in_tmp_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture(autouse=True)
def _reset_loguru():
    yield
    # The CLI binds a sink to the test runner's stderr; drop it after each test.
    logger.remove()
