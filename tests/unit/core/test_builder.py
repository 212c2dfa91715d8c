from __future__ import annotations

"""
Unit tests for the Tree Builder.

Verifies:
1. Strict id parsing and lenient parent parsing.
2. Blank line skipping and duplicate edge absorption.
3. Reading from a file source.
"""

from pathlib import Path
from typing import List

import pytest

from leafpaths.core.builder import build_tree, build_tree_from_source, parse_record
from leafpaths.domain.errors import MalformedRecordError, SourceUnavailableError
from leafpaths.domain.forest_models import Record


# -----------------------------------------------------------------------------
# RECORD PARSING
# -----------------------------------------------------------------------------

def test_parse_record_basic() -> None:
    assert parse_record("4,d,2\n") == Record(id=4, label="d", parent_id=2)


def test_parse_record_strips_crlf_keeps_label_verbatim() -> None:
    record = parse_record("12, Label With Spaces ,3\r\n")

    assert record is not None
    assert record.id == 12
    assert record.label == " Label With Spaces "
    assert record.parent_id == 3


def test_parse_record_accepts_signed_ids() -> None:
    assert parse_record("-4,neg,+2") == Record(id=-4, label="neg", parent_id=2)


@pytest.mark.parametrize("line", [" 12,a,0", "12 ,a,0", "1_0,a,0", "١,a,0", "99999999999999999999,a,0"])
def test_parse_record_rejects_non_decimal_ids(line: str) -> None:
    with pytest.raises(MalformedRecordError):
        parse_record(line)


@pytest.mark.parametrize("parent", [" 3", "3 ", "1_0", "٣", "99999999999999999999"])
def test_parse_record_non_decimal_parent_defaults_to_root(parent: str) -> None:
    record = parse_record(f"5,a,{parent}")
    assert record is not None
    assert record.parent_id == 0


@pytest.mark.parametrize("line", ["", "\n", "   \r\n"])
def test_parse_record_blank_lines_return_none(line: str) -> None:
    assert parse_record(line) is None


@pytest.mark.parametrize("parent", ["abc", "", "1.5"])
def test_parse_record_unparsable_parent_defaults_to_root(parent: str) -> None:
    record = parse_record(f"7,tmp,{parent}")
    assert record is not None
    assert record.parent_id == 0


def test_parse_record_missing_parent_defaults_to_root() -> None:
    record = parse_record("7,tmp")
    assert record is not None
    assert record.parent_id == 0


def test_parse_record_missing_label_is_empty() -> None:
    assert parse_record("7") == Record(id=7, label="", parent_id=0)


@pytest.mark.parametrize("line", ["x,a,0", ",a,0", "1.0,a,0"])
def test_parse_record_bad_id_raises(line: str) -> None:
    with pytest.raises(MalformedRecordError) as exc_info:
        parse_record(line, line_no=3)
    assert exc_info.value.line_no == 3


def test_parse_record_extra_fields_shift_alignment() -> None:
    """A comma inside a label is not escaped: the third field is read as parent."""
    record = parse_record("9,last,first,5")
    assert record == Record(id=9, label="last", parent_id=0)


# -----------------------------------------------------------------------------
# TREE CONSTRUCTION
# -----------------------------------------------------------------------------

def test_build_tree_concrete_scenario(sample_lines: List[str]) -> None:
    tree = build_tree(sample_lines)

    assert {k: set(v) for k, v in tree.items()} == {0: {1}, 1: {2, 3}, 2: {4}}
    assert tree[1] == {2: "b", 3: "c"}


def test_build_tree_empty_input() -> None:
    assert build_tree([]) == {}
    assert build_tree(["", "\n"]) == {}


def test_build_tree_deduplicates_keeping_first_label() -> None:
    tree = build_tree(["1,first,0", "1,second,0"])

    assert tree == {0: {1: "first"}}


def test_build_tree_lenient_parent(forest_lines: List[str]) -> None:
    tree = build_tree(forest_lines)

    assert tree[0] == {1: "usr", 5: "etc", 7: "tmp"}
    assert tree[5] == {6: "hosts"}


def test_build_tree_malformed_aborts_whole_build() -> None:
    lines = ["1,a,0", "2,b,1", "oops,c,1", "4,d,2"]

    with pytest.raises(MalformedRecordError) as exc_info:
        build_tree(lines)

    assert exc_info.value.line_no == 3
    assert "oops" in exc_info.value.line


def test_build_tree_is_repeatable(forest_lines: List[str]) -> None:
    assert build_tree(forest_lines) == build_tree(forest_lines)


def test_build_tree_from_file_source(records_file: Path) -> None:
    tree = build_tree_from_source(str(records_file))
    assert tree == {0: {1: "a"}, 1: {2: "b", 3: "c"}, 2: {4: "d"}}


def test_build_tree_from_missing_source(tmp_path: Path) -> None:
    with pytest.raises(SourceUnavailableError):
        build_tree_from_source(str(tmp_path / "missing.csv"))
