from __future__ import annotations

"""
Path Resolver.

Parses slash-delimited pathnames and resolves them to node handles by
walking the child chains of the namespace tree, either from the root
(absolute paths) or from the cursor (relative paths).
"""

import logging
from typing import TYPE_CHECKING, Iterator, List, Optional, Tuple

from treeshell.domain.constants import PATH_SEPARATOR
from treeshell.domain.errors import ErrorKind, NamespaceError
from treeshell.domain.tree_models import NodeHandle

if TYPE_CHECKING:
    from treeshell.core.namespace.tree import NamespaceTree

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_segments(path: str) -> List[str]:
    """Split a pathname on '/' discarding empty segments."""
    return [part for part in path.split(PATH_SEPARATOR) if part]


def split_path(path: str) -> Tuple[str, str]:
    """
    Split a pathname into its parent path and leaf name.

    Empty segments are dropped, so trailing and doubled separators are
    tolerated. The parent path is always rendered absolute.

    Args:
        path: Raw pathname (e.g. '/docs/readme', 'a/b/').

    Returns:
        Tuple[str, str]: (parent_path, leaf_name), e.g. ('/docs', 'readme').

    Raises:
        NamespaceError: INVALID_PATHNAME if the path has no non-empty segment.
    """
    segments = split_segments(path or "")
    if not segments:
        raise NamespaceError(ErrorKind.INVALID_PATHNAME, "Invalid pathname!")

    leaf = segments.pop()
    parent = PATH_SEPARATOR + PATH_SEPARATOR.join(segments)
    return parent, leaf


def resolve(tree: NamespaceTree, path: str) -> Optional[NodeHandle]:
    """
    Resolve a pathname to a node handle.

    Rules, in order: '' and '.' are the cursor, '/' is the root, anything
    else is walked segment by segment from the root (leading '/') or from
    the cursor. A failing segment yields None; there is no partial result.

    Args:
        tree: Namespace tree to search.
        path: Pathname to resolve.

    Returns:
        Optional[NodeHandle]: Handle of the target node, None if not found.
    """
    if not path or path == ".":
        return tree.cursor
    if path == PATH_SEPARATOR:
        return tree.root

    current: Optional[NodeHandle] = tree.root if path.startswith(PATH_SEPARATOR) else tree.cursor
    for segment in split_segments(path):
        current = search_in_directory(tree, current, segment)
        if current is None:
            logger.debug(f"Resolution of '{path}' failed at segment '{segment}'")
            return None
    return current


def search_in_directory(tree: NamespaceTree, directory: NodeHandle, name: str) -> Optional[NodeHandle]:
    """
    Find a direct child of 'directory' by exact, case-sensitive name.

    Args:
        tree: Namespace tree owning the directory.
        directory: Handle of the directory to scan.
        name: Child name to look for.

    Returns:
        Optional[NodeHandle]: First matching child, None if absent.
    """
    for handle in iter_chain(tree, tree.node(directory).first_child):
        if tree.node(handle).name == name:
            return handle
    return None


def iter_chain(tree: NamespaceTree, head: Optional[NodeHandle]) -> Iterator[NodeHandle]:
    """Yield every handle of a sibling chain starting at 'head'."""
    current = head
    while current is not None:
        # Read the link before yielding so callers may unlink the current node
        following = tree.node(current).next_sibling
        yield current
        current = following
