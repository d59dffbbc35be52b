import typing as ty
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> ty.Callable[..., Path]:
    """Create files (and their parent directories) under a fresh temp directory.

    Names ending in '/' become empty directories.
    """

    def _make(*relpaths: str) -> Path:
        for relpath in relpaths:
            p = tmp_path / relpath
            if relpath.endswith("/"):
                p.mkdir(parents=True, exist_ok=True)
            else:
                p.parent.mkdir(parents=True, exist_ok=True)
                p.write_text("")
        return tmp_path

    return _make
