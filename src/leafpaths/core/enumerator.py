from __future__ import annotations

"""
Leaf Path Enumeration.

Walks the adjacency mapping and emits one ``/label/.../label`` string per
leaf. Two interchangeable traversals are provided: a recursive one that
can start anywhere, and an iterative one with an explicit LIFO work list
that always starts at the root. Both produce the same set of paths.
"""

from typing import FrozenSet, List, NamedTuple, Optional, Set

from leafpaths.domain.config import STRATEGIES, STRATEGY_ITERATIVE
from leafpaths.domain.errors import CycleDetectedError, RootNotFoundError, TraversalDepthError
from leafpaths.domain.forest_models import ROOT_ID, Tree, is_leaf, iter_children

PATH_SEPARATOR = "/"


class _PendingPath(NamedTuple):
    path: str
    node_id: int
    ancestors: FrozenSet[int]


# -----------------------------------------------------------------------------
# RECURSIVE TRAVERSAL
# -----------------------------------------------------------------------------

def compute_paths_recursive(
        tree: Tree,
        root_id: int = ROOT_ID,
        prefix: str = "",
        *,
        detect_cycles: bool = True,
) -> List[str]:
    """
    Enumerate leaf paths below ``root_id`` recursively.

    Internal nodes never appear on their own; only complete paths ending
    at a leaf are returned. A ``root_id`` absent from the tree yields [].

    Args:
        tree: Adjacency mapping produced by the builder.
        root_id: Node to start from.
        prefix: Path prepended to every result.
        detect_cycles: Raise CycleDetectedError instead of recursing forever.

    Returns:
        List[str]: Leaf paths in child insertion order.

    Raises:
        CycleDetectedError: If a node is reached again below itself.
        TraversalDepthError: If the tree is deeper than the interpreter
            recursion limit allows.
    """
    ancestors: Optional[Set[int]] = {root_id} if detect_cycles else None
    try:
        return _collect_paths(tree, root_id, prefix, ancestors)
    except RecursionError as e:
        raise TraversalDepthError(root_id) from e


def _collect_paths(
        tree: Tree,
        node_id: int,
        prefix: str,
        ancestors: Optional[Set[int]],
) -> List[str]:
    paths: List[str] = []

    for child in iter_children(tree, node_id):
        child_path = f"{prefix}{PATH_SEPARATOR}{child.label}"

        if is_leaf(tree, child.id):
            paths.append(child_path)
            continue

        if ancestors is None:
            paths.extend(_collect_paths(tree, child.id, child_path, None))
            continue

        if child.id in ancestors:
            raise CycleDetectedError(child.id, child_path)
        ancestors.add(child.id)
        paths.extend(_collect_paths(tree, child.id, child_path, ancestors))
        ancestors.discard(child.id)

    return paths


# -----------------------------------------------------------------------------
# ITERATIVE TRAVERSAL
# -----------------------------------------------------------------------------

def compute_paths_iterative(tree: Tree, *, detect_cycles: bool = True) -> List[str]:
    """
    Enumerate leaf paths from the root with an explicit work list.

    Entries are popped last-in-first-out, so the walk is depth-first but
    the emission order differs from the recursive variant.

    Args:
        tree: Adjacency mapping produced by the builder.
        detect_cycles: Raise CycleDetectedError instead of growing the
            work list forever.

    Returns:
        List[str]: Leaf paths.

    Raises:
        RootNotFoundError: If the tree has no entry for ROOT_ID.
    """
    if ROOT_ID not in tree:
        raise RootNotFoundError(ROOT_ID)

    paths: List[str] = []
    seed_lineage = frozenset({ROOT_ID}) if detect_cycles else frozenset()
    pending: List[_PendingPath] = [
        _PendingPath(f"{PATH_SEPARATOR}{child.label}", child.id, seed_lineage)
        for child in iter_children(tree, ROOT_ID)
    ]

    while pending:
        entry = pending.pop()

        if is_leaf(tree, entry.node_id):
            paths.append(entry.path)
            continue

        lineage = entry.ancestors
        if detect_cycles:
            if entry.node_id in lineage:
                raise CycleDetectedError(entry.node_id, entry.path)
            lineage = lineage | {entry.node_id}

        for child in iter_children(tree, entry.node_id):
            pending.append(
                _PendingPath(f"{entry.path}{PATH_SEPARATOR}{child.label}", child.id, lineage)
            )

    return paths


# -----------------------------------------------------------------------------
# DISPATCH
# -----------------------------------------------------------------------------

def enumerate_paths(
        tree: Tree,
        strategy: str,
        root_id: int = ROOT_ID,
        *,
        detect_cycles: bool = True,
) -> List[str]:
    """
    Run the traversal named by ``strategy``.

    Raises:
        ValueError: On an unknown strategy, or an iterative walk from a
            node other than ROOT_ID.
    """
    if strategy not in STRATEGIES:
        raise ValueError(f"Unknown strategy '{strategy}'. Expected one of {STRATEGIES}.")

    if strategy == STRATEGY_ITERATIVE:
        if root_id != ROOT_ID:
            raise ValueError(f"Iterative traversal always starts at {ROOT_ID}, got {root_id}.")
        return compute_paths_iterative(tree, detect_cycles=detect_cycles)

    return compute_paths_recursive(tree, root_id, "", detect_cycles=detect_cycles)
