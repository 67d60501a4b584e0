from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates path normalization, cross-platform data directory resolution,
and the whole-file text I/O used by the persisted namespace.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from treeshell.infra.fs import (
    get_user_data_dir,
    normalize_path,
    read_text_lines,
    safe_mkdir,
    write_text_file,
)

# -----------------------------------------------------------------------------
# PATH RESOLUTION TESTS
# -----------------------------------------------------------------------------

def test_get_user_data_dir_windows() -> None:
    """TC-01: Verify resolution of %LOCALAPPDATA% on Windows systems."""
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "TreeShell" in path
                assert path.lower().startswith(os.path.abspath(mock_appdata).lower())


def test_get_user_data_dir_unix() -> None:
    """TC-01: Verify resolution of ~/.treeshell on Unix-like systems."""
    mock_home = "/home/testuser"
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value=mock_home):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                normalized_path = path.replace("\\", "/")
                assert normalized_path.endswith("/home/testuser/.treeshell")


def test_normalize_path_expansion() -> None:
    """TC-02: Verify expansion of environment variables and fallback."""
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        path = normalize_path(os.path.join("$TEST_VAR", "fs.txt"), "unused")
        assert "my_folder" in path
        assert os.path.isabs(path)

    assert normalize_path("   ", "fallback.txt") == os.path.abspath("fallback.txt")
    assert normalize_path(None, "fallback.txt") == os.path.abspath("fallback.txt")

# -----------------------------------------------------------------------------
# TEXT I/O TESTS
# -----------------------------------------------------------------------------

def test_write_then_read_text(tmp_path: Path) -> None:
    """TC-03: Written documents read back line by line without terminators."""
    target = tmp_path / "deep" / "state.txt"

    written = write_text_file(str(target), "DIR\t/a\nREG\t/a/b\n")

    assert written == str(target)
    assert read_text_lines(str(target)) == ["DIR\t/a", "REG\t/a/b"]


def test_write_uses_unix_newlines(tmp_path: Path) -> None:
    target = tmp_path / "state.txt"
    write_text_file(str(target), "DIR\t/a\n")

    assert target.read_bytes() == b"DIR\t/a\n"


def test_read_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_text_lines(str(tmp_path / "nope.txt"))


def test_safe_mkdir(tmp_path: Path) -> None:
    """TC-04: Directory creation reports failure instead of raising."""
    ok, err = safe_mkdir(str(tmp_path / "a" / "b"))
    assert ok is True and err is None

    blocker = tmp_path / "file"
    blocker.write_text("", encoding="utf-8")
    ok, err = safe_mkdir(str(blocker / "child"))
    assert ok is False
    assert err
