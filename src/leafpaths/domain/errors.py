from __future__ import annotations

"""
Forest Processing Error Hierarchy.

Every failure raised by the builder, the enumerators or the record reader
derives from LeafPathsError so interface layers can trap library errors
without swallowing unrelated exceptions.
"""

from typing import Optional


class LeafPathsError(Exception):
    """Base class for all fatal forest processing errors."""


class SourceUnavailableError(LeafPathsError):
    """
    The record source could not be opened or read.

    Attributes:
        source: Identifier of the source (path, '-' or URL).
        reason: Human readable description of the underlying failure.
    """

    def __init__(self, source: str, reason: str) -> None:
        self.source = source
        self.reason = reason
        super().__init__(f"Record source unavailable '{source}': {reason}")


class MalformedRecordError(LeafPathsError):
    """
    A record has a missing or non-integer id field.

    Attributes:
        line_no: 1-based line number of the offending record (0 if unknown).
        line: Raw text of the record.
    """

    def __init__(self, line: str, line_no: int = 0, reason: str = "invalid id") -> None:
        self.line = line
        self.line_no = line_no
        self.reason = reason
        location = f"line {line_no}" if line_no else "record"
        super().__init__(f"Malformed {location} ({reason}): {line!r}")


class RootNotFoundError(LeafPathsError):
    """The tree has no entry for the root id."""

    def __init__(self, root_id: int) -> None:
        self.root_id = root_id
        super().__init__(f"Root node not found: no record has parent id {root_id}")


class CycleDetectedError(LeafPathsError):
    """
    Traversal reached a node that is already one of its own ancestors.

    Attributes:
        node_id: Id of the node closing the cycle.
        path: Accumulated path at the moment the cycle was found.
    """

    def __init__(self, node_id: int, path: Optional[str] = None) -> None:
        self.node_id = node_id
        self.path = path
        detail = f" at '{path}'" if path else ""
        super().__init__(f"Cycle detected through node {node_id}{detail}")


class TraversalDepthError(LeafPathsError):
    """
    The recursive traversal ran out of interpreter stack.

    Attributes:
        root_id: Id the traversal started from.
    """

    def __init__(self, root_id: int) -> None:
        self.root_id = root_id
        super().__init__(
            f"Tree below node {root_id} is too deep for the recursive strategy; "
            f"use the iterative strategy"
        )
