from __future__ import annotations

"""
Unit tests for the forest domain models.

Verifies:
1. Node identity is defined by id only.
2. Child iteration and leaf detection helpers.
3. Error types carry their diagnostic attributes.
"""

import dataclasses

import pytest

from leafpaths.domain.errors import (
    CycleDetectedError,
    LeafPathsError,
    MalformedRecordError,
    RootNotFoundError,
    SourceUnavailableError,
)
from leafpaths.domain.forest_models import ROOT_ID, Node, Record, is_leaf, iter_children


def test_node_equality_ignores_label() -> None:
    """Two nodes with the same id are equal and hash alike."""
    first = Node(id=7, label="alpha")
    second = Node(id=7, label="beta")

    assert first == second
    assert len({first, second}) == 1
    assert Node(id=8, label="alpha") != first


def test_node_is_immutable() -> None:
    node = Node(id=1, label="a")
    with pytest.raises(dataclasses.FrozenInstanceError):
        node.label = "b"  # type: ignore[misc]


def test_record_defaults_to_root_parent() -> None:
    record = Record(id=3, label="c")
    assert record.parent_id == ROOT_ID
    assert record.node == Node(id=3, label="c")


def test_iter_children_and_is_leaf() -> None:
    tree = {0: {1: "a"}, 1: {2: "b", 3: "c"}}

    children = list(iter_children(tree, 1))

    assert [c.label for c in children] == ["b", "c"]
    assert list(iter_children(tree, 99)) == []
    assert is_leaf(tree, 2) is True
    assert is_leaf(tree, 1) is False


def test_errors_share_base_class_and_attributes() -> None:
    malformed = MalformedRecordError("x,a,0", line_no=4, reason="invalid id")
    assert isinstance(malformed, LeafPathsError)
    assert malformed.line_no == 4
    assert "line 4" in str(malformed)

    unavailable = SourceUnavailableError("/missing", "No such file or directory")
    assert unavailable.source == "/missing"
    assert "/missing" in str(unavailable)

    assert RootNotFoundError(0).root_id == 0

    cycle = CycleDetectedError(5, "/a/b")
    assert cycle.node_id == 5
    assert "/a/b" in str(cycle)
