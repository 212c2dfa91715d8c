from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Puts the 'src' directory on sys.path so the package imports without
   being installed.
2. Provides shared record fixtures used across unit and integration tests.
"""

import logging
import os
import sys
from pathlib import Path
from typing import List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_lines() -> List[str]:
    """
    Four records forming a single tree:

    a (1)
    ├── b (2)
    │   └── d (4)
    └── c (3)
    """
    return ["1,a,0\n", "2,b,1\n", "3,c,1\n", "4,d,2\n"]


@pytest.fixture
def forest_lines() -> List[str]:
    """Two top-level trees, a duplicate edge, a blank line and a bad parent."""
    return [
        "1,usr,0",
        "2,bin,1",
        "3,lib,1",
        "4,python3,3",
        "",
        "5,etc,0",
        "6,hosts,5",
        "6,hosts-copy,5",
        "7,tmp,not-a-number",
        "8,local,1",
        "9,share,8",
    ]


@pytest.fixture
def records_file(tmp_path: Path, sample_lines: List[str]) -> Path:
    """Write the sample records to a file on disk."""
    f = tmp_path / "records.csv"
    f.write_text("".join(sample_lines), encoding="utf-8")
    return f


@pytest.fixture
def reset_logging():
    """Detach the package's logging handlers and listener around a test."""
    from logging.handlers import QueueListener

    from leafpaths.infra.logging import (
        _CONFIGURED_FLAG_ATTR,
        _HANDLER_TAG_ATTR,
        _QUEUE_LISTENER_ATTR,
    )

    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if isinstance(listener, QueueListener) and listener._thread is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

        for h in list(root.handlers):
            if getattr(h, _HANDLER_TAG_ATTR, False):
                root.removeHandler(h)
                h.close()

        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
