from __future__ import annotations

"""
Forest Structure Data Models.

A forest is stored as an adjacency mapping from parent id to its children.
Children are keyed by id (the deduplication key) and carry the label as
display payload, so duplicate edges collapse to a single entry.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator

# Conventional parent id for top-level nodes
ROOT_ID: int = 0

# child_id -> label
Children = Dict[int, str]

# parent_id -> children
Tree = Dict[int, Children]


# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Node:
    """
    A labeled forest node. Equality and hashing use the id only.

    Attributes:
        id: Forest-wide unique identifier.
        label: Display string, not required to be unique.
    """
    id: int
    label: str = field(compare=False)


@dataclass(frozen=True)
class Record:
    """
    One parsed input line: ``ID,LABEL,PARENT_ID``.

    Attributes:
        id: Node identifier.
        label: Node label, verbatim.
        parent_id: Parent identifier, ROOT_ID for top-level nodes.
    """
    id: int
    label: str
    parent_id: int = ROOT_ID

    @property
    def node(self) -> Node:
        return Node(id=self.id, label=self.label)


# -----------------------------------------------------------------------------
# READ HELPERS
# -----------------------------------------------------------------------------

def iter_children(tree: Tree, parent_id: int) -> Iterator[Node]:
    """Yield the children of ``parent_id`` as Node values, in insertion order."""
    for child_id, label in tree.get(parent_id, {}).items():
        yield Node(id=child_id, label=label)


def is_leaf(tree: Tree, node_id: int) -> bool:
    """A node is a leaf when it has no entry as a parent key."""
    return node_id not in tree
