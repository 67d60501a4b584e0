from __future__ import annotations

"""
Namespace Serializer and Loader.

Converts the tree into line-oriented records ('KIND<TAB>ABSOLUTE_PATH') in
depth-first preorder, and rebuilds a tree by replaying those records through
the regular creation routines. Records whose path cannot be created (for
instance a child listed before its parent) are logged and skipped.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from treeshell.core.namespace.tree import NamespaceTree
from treeshell.domain.constants import RECORD_SEPARATOR
from treeshell.domain.errors import ErrorKind, NamespaceError
from treeshell.domain.tree_models import NodeKind

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class SkippedRecord:
    """
    A persisted record that could not be replayed.

    Attributes:
        line_number: 1-based position in the source document.
        line: Raw record text.
        reason: Error message explaining the rejection.
    """
    line_number: int
    line: str
    reason: str


@dataclass(frozen=True)
class LoadReport:
    """Outcome of a reload: number of replayed records and the skipped ones."""
    loaded: int = 0
    skipped: List[SkippedRecord] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.skipped

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def serialize_tree(tree: NamespaceTree) -> List[str]:
    """
    Produce one record per node (the root excluded) in preorder.

    Args:
        tree: Namespace to serialize.

    Returns:
        List[str]: Records such as 'DIR\\t/docs' and 'REG\\t/docs/readme'.
    """
    return [
        f"{tree.node(handle).kind.value}{RECORD_SEPARATOR}{path}"
        for handle, path in tree.walk_preorder()
    ]


def render_document(records: List[str]) -> str:
    """Join records into the persisted text (one record per line)."""
    if not records:
        return ""
    return "\n".join(records) + "\n"


def parse_record(line: str) -> Tuple[NodeKind, str]:
    """
    Split a record on its first tab into (kind, absolute_path).

    Whitespace around the kind token and the path is ignored.

    Raises:
        NamespaceError: INVALID_RECORD on a missing separator or unknown kind.
    """
    token, sep, path = line.partition(RECORD_SEPARATOR)
    if not sep:
        raise NamespaceError(ErrorKind.INVALID_RECORD, "Missing record separator")

    kind = NodeKind.from_token(token.strip())
    if kind is None:
        raise NamespaceError(ErrorKind.INVALID_RECORD, f"Unknown node kind '{token.strip()}'")
    return kind, path.strip()


def load_tree(tree: NamespaceTree, lines: Iterable[str]) -> LoadReport:
    """
    Rebuild 'tree' from persisted records.

    The tree is reset first; each record is then replayed in order through
    make_directory or create_file. Blank lines are ignored. A record that
    fails is skipped and loading continues with the next one.

    Args:
        tree: Tree to rebuild in place.
        lines: Persisted records in file order.

    Returns:
        LoadReport: Count of replayed records and details of skipped ones.
    """
    tree.reset()
    loaded = 0
    skipped: List[SkippedRecord] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line.strip():
            continue

        try:
            kind, path = parse_record(line)
            if kind is NodeKind.DIR:
                tree.make_directory(path)
            else:
                tree.create_file(path)
            loaded += 1
        except NamespaceError as e:
            logger.warning(f"Skipping record {line_number} ({line!r}): {e.message}")
            skipped.append(SkippedRecord(line_number=line_number, line=line, reason=e.message))

    logger.debug(f"Replayed {loaded} records, skipped {len(skipped)}")
    return LoadReport(loaded=loaded, skipped=skipped)
