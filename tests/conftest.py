"""Shared fixtures for the cryptonotes test suite."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

# ── Reusable constants ───────────────────────────────────────────────────────

PASSWORD = "mypass123"
UNICODE_PASSWORD = "пароль_密码_κωδ_🔑"  # Cyrillic + CJK + Greek + emoji


# ── Directory tree fixtures ──────────────────────────────────────────────────

@pytest.fixture()
def private_dir(tmp_path: Path) -> Path:
    """Layout::

        private/
        └── MySecrets/
            └── README.MD
    """
    root = tmp_path / "private"
    secrets = root / "MySecrets"
    secrets.mkdir(parents=True)
    (secrets / "README.MD").write_text("# My secrets\n\nnothing to see here\n")
    return root


@pytest.fixture()
def sample_tree(tmp_path: Path) -> Path:
    """Create a non-trivial directory tree for round-trip tests.

    Layout::

        source/
        ├── hello.txt          (text, ~1.4 KiB)
        ├── empty.txt          (0 bytes)
        ├── binary.bin         (random 4 KiB)
        ├── A/
        │   ├── a.txt
        │   └── B/
        │       ├── file.txt
        │       └── data.bin   (random 4 KiB)
        └── empty_dir/
    """
    root = tmp_path / "source"
    root.mkdir()
    (root / "hello.txt").write_text("Hello, World!\n" * 100)
    (root / "empty.txt").write_bytes(b"")
    (root / "binary.bin").write_bytes(os.urandom(4096))
    b = root / "A" / "B"
    b.mkdir(parents=True)
    (root / "A" / "a.txt").write_text("aaa")
    (b / "file.txt").write_text("deep file\n")
    (b / "data.bin").write_bytes(os.urandom(4096))
    (root / "empty_dir").mkdir()
    return root


@pytest.fixture()
def unicode_tree(tmp_path: Path) -> Path:
    """Directory tree with unicode names and content."""
    root = tmp_path / "юнікод_源"
    root.mkdir()
    (root / "файл_文件.txt").write_text("Привіт 你好 🌍\n" * 50, encoding="utf-8")
    sub = root / "підкаталог_子目录"
    sub.mkdir()
    (sub / "δεδομένα.bin").write_bytes(os.urandom(1024))
    return root


@pytest.fixture()
def large_file(tmp_path: Path) -> Path:
    """A ~1 MiB file spanning many streaming chunks."""
    p = tmp_path / "large.bin"
    p.write_bytes(os.urandom(2**20 + 7))
    return p


def snapshot(root: Path) -> dict[str, bytes | None]:
    """Map every path under *root* to its bytes (``None`` for directories)."""
    result: dict[str, bytes | None] = {}
    for p in sorted(root.rglob("*")):
        rel = p.relative_to(root).as_posix()
        result[rel] = p.read_bytes() if p.is_file() else None
    return result
