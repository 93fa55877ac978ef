"""Shared pytest fixtures for pathedit tests."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user configuration and colour settings out of every test."""

    config_dir = tmp_path_factory.mktemp("config")
    monkeypatch.setenv("PATHEDIT_CONFIG", str(config_dir / "missing.toml"))
    for name in ("FORCE_COLOR", "TTY_COMPATIBLE", "TTY_INTERACTIVE"):
        monkeypatch.delenv(name, raising=False)


@dataclass(frozen=True)
class PathTree:
    """Directory fixture with real directories, symlinks and shadowing files.

    Layout::

        a/keepme.txt
        b/keepme.txt  b/x  b/bb/
        c/keepme.txt  c/x
        la -> a       laa -> la
        broken -> missing      broken2 -> broken
        loop1 -> loop2         loop2 -> loop1
    """

    root: Path

    def dir(self, name: str) -> str:
        """Return the non-canonical path string for ``name`` below the root."""

        return str(self.root / name)

    def canonical(self, name: str) -> str:
        """Return the canonical form of ``name`` below the root."""

        return os.path.realpath(self.root / name)

    def join(self, *names: str) -> str:
        return ":".join(self.dir(name) for name in names)


@pytest.fixture
def path_tree(tmp_path: Path) -> PathTree:
    """Create the shared directory layout below ``tmp_path``."""

    root = tmp_path / "test_dirs"
    for name in ("a", "b", "b/bb", "c"):
        (root / name).mkdir(parents=True)

    _ = (root / "a" / "keepme.txt").write_text("a\n")
    _ = (root / "b" / "keepme.txt").write_text("b\n")
    _ = (root / "b" / "x").write_text("b\n")
    _ = (root / "c" / "keepme.txt").write_text("c\n")
    _ = (root / "c" / "x").write_text("c\n")

    links: dict[str, str] = {
        "la": "a",
        "laa": "la",
        "broken": "missing",
        "broken2": "broken",
        "loop1": "loop2",
        "loop2": "loop1",
    }
    for name, target in links.items():
        (root / name).symlink_to(target)

    return PathTree(root=root)
