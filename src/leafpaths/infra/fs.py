from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Path normalization and safe output persistence shared by the service
and the logging subsystem.
"""

import os
from typing import Iterable, Optional

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def normalize_path(path: Optional[str], fallback: str = "") -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path, or "" when both inputs are empty.
    """
    p = (path or "").strip() or fallback
    if not p:
        return ""
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))


def ensure_parent_dir(path: str) -> None:
    """Create the parent directory hierarchy for a target file."""
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)

# -----------------------------------------------------------------------------
# OUTPUT PERSISTENCE API
# -----------------------------------------------------------------------------

def write_lines(path: str, lines: Iterable[str]) -> None:
    """
    Write text lines to ``path`` (UTF-8, newline terminated).

    Raises:
        OSError: If the directory cannot be created or the file written.
    """
    ensure_parent_dir(path)
    with open(path, "w", encoding="utf-8") as f:
        for line in lines:
            f.write(line + "\n")
