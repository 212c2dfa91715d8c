from __future__ import annotations

"""
Result Domain Data Models.

Defines the immutable result object returned by the service facade to the
interface layer, plus factory functions for success and failure cases.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ForestResult:
    """
    Outcome of a complete build-and-enumerate run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        source: Record source identifier that was processed.
        strategy: Traversal strategy used.
        root_id: Id the enumeration started from.
        paths: Leaf paths, one string per leaf.
        output_path: File the paths were saved to, if any.
        summary: Tree statistics (nodes, parents, leaves, paths).
    """
    ok: bool
    error: str

    source: str
    strategy: str
    root_id: int

    paths: List[str] = field(default_factory=list)
    output_path: str = ""

    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> ForestResult:
    """
    Create a failed result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        ForestResult: An immutable error result object.
    """
    return ForestResult(
        ok=False,
        error=error,
        source=cfg.get("source", ""),
        strategy=cfg.get("strategy", ""),
        root_id=cfg.get("root_id", 0),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        paths: List[str],
        summary: Dict[str, Any],
        output_path: str = "",
) -> ForestResult:
    """Create a successful result instance."""
    return ForestResult(
        ok=True,
        error="",
        source=cfg.get("source", ""),
        strategy=cfg.get("strategy", ""),
        root_id=cfg.get("root_id", 0),
        paths=list(paths),
        output_path=output_path,
        summary=summary,
    )
