from __future__ import annotations

"""
Namespace Persistence Service.

Bridges the serializer with host file I/O. Saving writes the whole document
in one pass; reloading reads the whole file before touching the tree, so a
missing or unreadable file leaves the in-memory namespace unchanged.
"""

import logging

from treeshell.core.namespace.serializer import (
    LoadReport,
    load_tree,
    render_document,
    serialize_tree,
)
from treeshell.core.namespace.tree import NamespaceTree
from treeshell.domain.errors import PersistenceError
from treeshell.infra.fs import read_text_lines, write_text_file

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def save_namespace(tree: NamespaceTree, path: str) -> str:
    """
    Persist the namespace to 'path'.

    Args:
        tree: Namespace to save.
        path: Host file path of the persisted document.

    Returns:
        str: Absolute path of the written file.

    Raises:
        PersistenceError: If the file cannot be written.
    """
    if not path:
        raise PersistenceError("No file name given!")

    records = serialize_tree(tree)
    try:
        target = write_text_file(path, render_document(records))
    except OSError as e:
        logger.error(f"Failed to save namespace to '{path}': {e}")
        raise PersistenceError(f"Cannot write '{path}': {e.strerror or e}") from e

    logger.info(f"Namespace saved to {target} ({len(records)} records)")
    return target


def reload_namespace(tree: NamespaceTree, path: str) -> LoadReport:
    """
    Replace the namespace with the content persisted at 'path'.

    Args:
        tree: Namespace to rebuild in place.
        path: Host file path of the persisted document.

    Returns:
        LoadReport: Count of replayed records and details of skipped ones.

    Raises:
        PersistenceError: If the file is missing or unreadable. The tree is
                          not modified in that case.
    """
    if not path:
        raise PersistenceError("No file name given!")

    try:
        lines = read_text_lines(path)
    except FileNotFoundError as e:
        logger.error(f"No saved namespace at '{path}'")
        raise PersistenceError(f"No saved filesystem at '{path}'!") from e
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to read namespace from '{path}': {e}")
        raise PersistenceError(f"Cannot read '{path}': {e}") from e

    report = load_tree(tree, lines)
    if report.skipped:
        logger.warning(f"Reloaded '{path}' with {len(report.skipped)} skipped records")
    else:
        logger.info(f"Namespace reloaded from '{path}' ({report.loaded} records)")
    return report
