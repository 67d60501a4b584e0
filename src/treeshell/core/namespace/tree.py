from __future__ import annotations

"""
Namespace Tree.

Owns the node arena, the root directory and the cursor (current working
directory). Exposes the structural mutations used by the shell commands
(mkdir, rmdir, creat, rm, cd) and the read operations (ls, pwd, preorder
traversal) used by the listing and the serializer.

Nodes are addressed by integer handles. Child chains are singly linked
through 'first_child' and 'next_sibling'; insertion always appends, so a
chain keeps creation order.
"""

import logging
from typing import Dict, Iterator, List, Optional, Tuple

from treeshell.core.namespace.path_resolver import (
    iter_chain,
    resolve,
    search_in_directory,
    split_path,
)
from treeshell.domain.constants import FORBIDDEN_NAME_CHARS, PATH_SEPARATOR, RESERVED_NAMES
from treeshell.domain.errors import ErrorKind, NamespaceError
from treeshell.domain.tree_models import ListingEntry, Node, NodeHandle, NodeKind

logger = logging.getLogger(__name__)


class NamespaceTree:
    """
    In-memory hierarchy of directories and empty files.

    Attributes:
        root: Handle of the root directory (empty name, no parent).
        cursor: Handle of the current working directory.
    """

    def __init__(self) -> None:
        self._nodes: Dict[NodeHandle, Node] = {}
        self._next_handle: NodeHandle = 0
        self.root: NodeHandle = self._allocate(Node(name="", kind=NodeKind.DIR))
        self.cursor: NodeHandle = self.root

    # -------------------------------------------------------------------------
    # ARENA
    # -------------------------------------------------------------------------

    def node(self, handle: NodeHandle) -> Node:
        """Return the live node stored at 'handle'."""
        return self._nodes[handle]

    def reset(self) -> None:
        """Discard every node and start over with a fresh root."""
        self._nodes.clear()
        self.root = self._allocate(Node(name="", kind=NodeKind.DIR))
        self.cursor = self.root
        logger.debug("Namespace reset to an empty root")

    def __len__(self) -> int:
        return len(self._nodes) - 1

    def __contains__(self, path: object) -> bool:
        return isinstance(path, str) and resolve(self, path) is not None

    def _allocate(self, node: Node) -> NodeHandle:
        handle = self._next_handle
        self._next_handle += 1
        self._nodes[handle] = node
        return handle

    # -------------------------------------------------------------------------
    # STRUCTURAL PRIMITIVES
    # -------------------------------------------------------------------------

    def insert(self, parent: NodeHandle, handle: NodeHandle) -> None:
        """
        Append 'handle' at the tail of the child chain of 'parent'.

        Raises:
            NamespaceError: TYPE_MISMATCH if 'parent' is not a directory.
        """
        parent_node = self.node(parent)
        if not parent_node.is_dir:
            raise NamespaceError(ErrorKind.TYPE_MISMATCH, "Not a directory!")

        new_node = self.node(handle)
        new_node.next_sibling = None
        new_node.parent = parent

        tail: Optional[NodeHandle] = None
        for tail in iter_chain(self, parent_node.first_child):
            pass
        if tail is None:
            parent_node.first_child = handle
        else:
            self.node(tail).next_sibling = handle

    def remove(self, parent: NodeHandle, handle: NodeHandle) -> None:
        """
        Unlink 'handle' from the child chain of 'parent' and evict it.

        Raises:
            NamespaceError: NOT_FOUND if 'handle' is not a child of 'parent'.
        """
        parent_node = self.node(parent)
        target = self.node(handle)

        if parent_node.first_child == handle:
            parent_node.first_child = target.next_sibling
        else:
            for current in iter_chain(self, parent_node.first_child):
                current_node = self.node(current)
                if current_node.next_sibling == handle:
                    current_node.next_sibling = target.next_sibling
                    break
            else:
                raise NamespaceError(ErrorKind.NOT_FOUND, "Entry not found!")

        del self._nodes[handle]

    # -------------------------------------------------------------------------
    # SHELL OPERATIONS
    # -------------------------------------------------------------------------

    def make_directory(self, path: str) -> NodeHandle:
        """Create an empty directory at 'path' and return its handle."""
        return self._create_entry(path, NodeKind.DIR)

    def create_file(self, path: str) -> NodeHandle:
        """Create an empty regular file at 'path' and return its handle."""
        return self._create_entry(path, NodeKind.REG)

    def remove_directory(self, path: str) -> None:
        """Remove the empty directory at 'path'."""
        self._remove_entry(path, NodeKind.DIR)

    def remove_file(self, path: str) -> None:
        """Remove the regular file at 'path'."""
        self._remove_entry(path, NodeKind.REG)

    def change_directory(self, path: str) -> NodeHandle:
        """
        Move the cursor to the directory at 'path'.

        Raises:
            NamespaceError: INVALID_DIRECTORY if the path is missing or a file.
        """
        target = self._resolve_directory(path)
        self.cursor = target
        logger.debug(f"Cursor moved to {self.absolute_path(target)}")
        return target

    def list_directory(self, path: str = "") -> List[ListingEntry]:
        """
        List the children of the directory at 'path' (cursor if empty).

        Returns:
            List[ListingEntry]: Entries in creation order.

        Raises:
            NamespaceError: INVALID_DIRECTORY if the path is missing or a file.
        """
        target = self._resolve_directory(path)
        return [
            ListingEntry(name=child.name, kind=child.kind)
            for child in (self.node(h) for h in self.children(target))
        ]

    def working_path(self) -> str:
        """Render the absolute path of the cursor ('/' for the root)."""
        return self.absolute_path(self.cursor)

    # -------------------------------------------------------------------------
    # TRAVERSAL
    # -------------------------------------------------------------------------

    def resolve(self, path: str) -> Optional[NodeHandle]:
        """Resolve 'path' against this tree. See path_resolver.resolve."""
        return resolve(self, path)

    def children(self, handle: NodeHandle) -> List[NodeHandle]:
        """Return the handles of the direct children of 'handle'."""
        return list(iter_chain(self, self.node(handle).first_child))

    def absolute_path(self, handle: NodeHandle) -> str:
        """Walk parent links up to the root and render the absolute path."""
        names: List[str] = []
        current: Optional[NodeHandle] = handle
        while current is not None and current != self.root:
            node = self.node(current)
            names.append(node.name)
            current = node.parent
        names.reverse()
        return PATH_SEPARATOR + PATH_SEPARATOR.join(names)

    def walk_preorder(self) -> Iterator[Tuple[NodeHandle, str]]:
        """
        Yield (handle, absolute_path) for every node except the root.

        Depth-first preorder: a directory is yielded before its descendants
        and its whole subtree before its next sibling.
        """
        first = self.node(self.root).first_child
        stack: List[Tuple[NodeHandle, str]] = []
        if first is not None:
            stack.append((first, ""))

        while stack:
            handle, prefix = stack.pop()
            node = self.node(handle)
            path = f"{prefix}{PATH_SEPARATOR}{node.name}"
            yield handle, path

            if node.next_sibling is not None:
                stack.append((node.next_sibling, prefix))
            if node.first_child is not None:
                stack.append((node.first_child, path))

    # -------------------------------------------------------------------------
    # PRIVATE HELPERS
    # -------------------------------------------------------------------------

    def _create_entry(self, path: str, kind: NodeKind) -> NodeHandle:
        """Shared body of make_directory and create_file."""
        parent_path, name = split_path(path)
        _validate_name(name)

        parent = resolve(self, parent_path)
        if parent is None or not self.node(parent).is_dir:
            raise NamespaceError(ErrorKind.NOT_A_DIRECTORY, "Not a directory!")

        if search_in_directory(self, parent, name) is not None:
            label = "Directory" if kind is NodeKind.DIR else "File"
            raise NamespaceError(ErrorKind.ALREADY_EXISTS, f"{label} already exists!")

        handle = self._allocate(Node(name=name, kind=kind))
        self.insert(parent, handle)
        logger.debug(f"Created {kind.value} {self.absolute_path(handle)}")
        return handle

    def _remove_entry(self, path: str, kind: NodeKind) -> None:
        """Shared body of remove_directory and remove_file."""
        parent_path, name = split_path(path)

        parent = resolve(self, parent_path)
        if parent is None:
            raise NamespaceError(ErrorKind.NOT_FOUND, "Invalid pathname!")

        target = search_in_directory(self, parent, name)
        if target is None:
            label = "Directory" if kind is NodeKind.DIR else "File"
            raise NamespaceError(ErrorKind.NOT_FOUND, f"{label} not found!")

        target_node = self.node(target)
        if target_node.kind is not kind:
            message = "Not a directory!" if kind is NodeKind.DIR else "Not a regular file!"
            raise NamespaceError(ErrorKind.TYPE_MISMATCH, message)

        if target_node.first_child is not None:
            raise NamespaceError(ErrorKind.NOT_EMPTY, "Directory not empty!")

        removed_path = self.absolute_path(target)
        self.remove(parent, target)
        if self.cursor == target:
            self.cursor = parent
            logger.debug(f"Cursor directory removed, cursor moved to {self.absolute_path(parent)}")
        logger.debug(f"Removed {kind.value} {removed_path}")

    def _resolve_directory(self, path: str) -> NodeHandle:
        target = resolve(self, path)
        if target is None or not self.node(target).is_dir:
            raise NamespaceError(ErrorKind.INVALID_DIRECTORY, "Invalid directory!")
        return target


def _validate_name(name: str) -> None:
    """Reject leaf names that could not be resolved or persisted back."""
    if name in RESERVED_NAMES or any(ch in name for ch in FORBIDDEN_NAME_CHARS):
        raise NamespaceError(ErrorKind.INVALID_PATHNAME, f"Invalid name: {name!r}")
