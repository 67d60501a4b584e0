from __future__ import annotations

"""
Namespace Tree Data Models.

Defines the node record stored in the tree arena and the read-only entries
returned by directory listings. Structural links are integer handles into
the owning tree's arena: 'first_child' and 'next_sibling' are owning edges,
'parent' is a plain back-reference.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

# Arena address of a node. Stable for the node's lifetime, never reused.
NodeHandle = int

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Node type tag. Values double as the persisted record tokens."""
    DIR = "DIR"
    REG = "REG"

    @classmethod
    def from_token(cls, token: str) -> Optional[NodeKind]:
        """Map a persisted record token to a kind, or None if unknown."""
        try:
            return cls(token)
        except ValueError:
            return None


@dataclass
class Node:
    """
    A named, typed entry in the hierarchy.

    Attributes:
        name: Entry name, unique among the children of one directory.
        kind: Directory or regular (empty placeholder) file.
        first_child: Head of the child chain (directories only).
        next_sibling: Next entry in the parent's child chain.
        parent: Directory containing this entry; None only for the root.
    """
    name: str
    kind: NodeKind
    first_child: Optional[NodeHandle] = None
    next_sibling: Optional[NodeHandle] = None
    parent: Optional[NodeHandle] = None

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIR


@dataclass(frozen=True)
class ListingEntry:
    """One row of a directory listing."""
    name: str
    kind: NodeKind

    def render(self) -> str:
        return f"{self.name}\t{self.kind.value}"
