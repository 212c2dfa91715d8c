from __future__ import annotations

"""
Forest Tree Builder.

Turns ``ID,LABEL,PARENT_ID`` text records into the parent -> children
adjacency mapping. The id field is strict (a bad id aborts the build)
while the parent field is lenient (a bad parent means the root).
"""

import logging
import re
from typing import Iterable, Optional

from leafpaths.domain.config import DEFAULT_REQUEST_TIMEOUT
from leafpaths.domain.errors import MalformedRecordError
from leafpaths.domain.forest_models import ROOT_ID, Record, Tree
from leafpaths.infra.reader import stream_record_lines

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","

# ASCII digits with an optional sign; no whitespace, underscores or other scripts
_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2 ** 63)
_INT64_MAX = 2 ** 63 - 1

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_record(line: str, line_no: int = 0) -> Optional[Record]:
    """
    Parse one raw input line.

    Extra fields are ignored, so a label containing the separator shifts
    the remaining fields instead of raising. A missing label becomes "".

    Args:
        line: Raw text line, with or without its terminator.
        line_no: 1-based position in the source, used in error messages.

    Returns:
        Optional[Record]: The parsed record, or None for blank lines.

    Raises:
        MalformedRecordError: If the id field is missing or not a plain decimal
            integer (ASCII digits, optional sign, no surrounding whitespace).
    """
    text = line.rstrip("\r\n")
    if not text.strip():
        return None

    fields = text.split(FIELD_SEPARATOR)

    node_id = _parse_int(fields[0])
    if node_id is None:
        reason = "missing id" if not fields[0].strip() else "invalid id"
        raise MalformedRecordError(text, line_no, reason)

    label = fields[1] if len(fields) > 1 else ""

    parent_id = _parse_int(fields[2]) if len(fields) > 2 else None
    if parent_id is None:
        parent_id = ROOT_ID

    return Record(id=node_id, label=label, parent_id=parent_id)


def build_tree(lines: Iterable[str]) -> Tree:
    """
    Build the adjacency mapping from raw record lines.

    A child already present under the same parent keeps its first label;
    later duplicates are absorbed silently.

    Args:
        lines: Raw text records.

    Returns:
        Tree: Mapping of parent id to ``{child_id: label}``.

    Raises:
        MalformedRecordError: On the first record with a bad id.
    """
    tree: Tree = {}
    records = 0
    blanks = 0
    duplicates = 0

    for line_no, line in enumerate(lines, start=1):
        record = parse_record(line, line_no)
        if record is None:
            blanks += 1
            continue

        records += 1
        children = tree.setdefault(record.parent_id, {})
        if record.id in children:
            duplicates += 1
            if children[record.id] != record.label:
                logger.debug(
                    f"Duplicate node {record.id} under parent {record.parent_id}: "
                    f"keeping label '{children[record.id]}', dropping '{record.label}'"
                )
            continue
        children[record.id] = record.label

    logger.debug(
        f"Tree built: {records} records, {len(tree)} parents, "
        f"{duplicates} duplicates absorbed, {blanks} blank lines skipped."
    )
    return tree


def build_tree_from_source(source: str, timeout: float = DEFAULT_REQUEST_TIMEOUT) -> Tree:
    """
    Read records from ``source`` and build the tree.

    Raises:
        SourceUnavailableError: If the source cannot be read.
        MalformedRecordError: On the first record with a bad id.
    """
    logger.info(f"Building tree from source: {source}")
    return build_tree(stream_record_lines(source, timeout=timeout))

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _parse_int(value: str) -> Optional[int]:
    """Parse a signed 64-bit decimal integer, or return None."""
    if not _INT_RE.fullmatch(value):
        return None
    parsed = int(value)
    if not _INT64_MIN <= parsed <= _INT64_MAX:
        return None
    return parsed
