from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared namespace fixtures used across unit and integration tests.
"""

import os
import sys

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from treeshell.core.namespace.tree import NamespaceTree  # noqa: E402
from treeshell.interface.cli.dispatcher import ShellSession  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def tree() -> NamespaceTree:
    """Return an empty namespace (root only)."""
    return NamespaceTree()


@pytest.fixture
def populated_tree() -> NamespaceTree:
    """
    Return a namespace with a small, known structure.

    Structure (creation order):
    /
      docs/
        readme
        guides/
          intro
      src/
        main
      notes
    """
    t = NamespaceTree()
    t.make_directory("/docs")
    t.create_file("/docs/readme")
    t.make_directory("/docs/guides")
    t.create_file("/docs/guides/intro")
    t.make_directory("/src")
    t.create_file("/src/main")
    t.create_file("/notes")
    return t


@pytest.fixture
def session(tmp_path) -> ShellSession:
    """Return a shell session whose default state file lives in tmp_path."""
    return ShellSession(state_file=str(tmp_path / "FileSystemDefault.txt"))
