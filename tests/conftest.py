"""Shared fixtures for treefind tests."""

from __future__ import annotations

import os
import stat
from pathlib import Path

import pytest


@pytest.fixture
def size_tree(tmp_path: Path) -> Path:
    """Create a small tree with files of known sizes.

    Structure::

        root/
        ├── a.txt        (10 bytes)
        ├── b.txt        (200 bytes)
        └── sub/
            └── c.txt    (10 bytes)
    """
    (tmp_path / "a.txt").write_bytes(b"a" * 10)
    (tmp_path / "b.txt").write_bytes(b"b" * 200)
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "c.txt").write_bytes(b"c" * 10)
    return tmp_path


@pytest.fixture
def mixed_tree(tmp_path: Path) -> Path:
    """Tree mixing regular files with entries the walker must skip.

    Structure::

        root/
        ├── docs/
        │   ├── guide.md
        │   └── empty/
        ├── src/
        │   ├── app.py
        │   └── app.pyc
        ├── link.md      -> docs/guide.md   (symlink, when supported)
        ├── linkdir      -> src/            (symlink, when supported)
        └── README.md
    """
    (tmp_path / "docs" / "empty").mkdir(parents=True)
    (tmp_path / "docs" / "guide.md").write_text("guide")
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "app.py").write_text("app")
    (tmp_path / "src" / "app.pyc").write_bytes(b"\x00")
    (tmp_path / "README.md").write_text("readme")
    try:
        (tmp_path / "link.md").symlink_to(tmp_path / "docs" / "guide.md")
        (tmp_path / "linkdir").symlink_to(tmp_path / "src", target_is_directory=True)
    except (OSError, NotImplementedError):
        pass
    return tmp_path


@pytest.fixture
def recorder_script(tmp_path_factory: pytest.TempPathFactory) -> tuple[Path, Path]:
    """Executable shell script appending its first argument to a log file.

    Returns:
        tuple[Path, Path]: Script path and log path.
    """
    if os.name == "nt":
        pytest.skip("shell scripts are POSIX only")
    tools = tmp_path_factory.mktemp("tools")
    log = tools / "calls.log"
    script = tools / "record.sh"
    script.write_text(f'#!/bin/sh\nprintf "%s\\n" "$1" >> "{log}"\nexit 3\n')
    script.chmod(script.stat().st_mode | stat.S_IXUSR)
    return script, log
