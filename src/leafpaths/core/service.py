from __future__ import annotations

"""
Leaf Path Service.

Facade used by the interface layer: reads the record source, builds the
tree, enumerates leaf paths with the configured strategy and persists
them. Library failures are returned as error results.
"""

import logging
from typing import Any, Dict, List, Optional

from leafpaths.core.builder import build_tree_from_source
from leafpaths.core.enumerator import compute_paths_iterative, enumerate_paths
from leafpaths.core.validator import validate_config
from leafpaths.domain.config import STRATEGY_RECURSIVE, STRATEGY_ITERATIVE
from leafpaths.domain.errors import LeafPathsError, TraversalDepthError
from leafpaths.domain.forest_models import ROOT_ID, Tree
from leafpaths.domain.result_models import (
    ForestResult,
    create_error_result,
    create_success_result,
)
from leafpaths.infra.fs import normalize_path, write_lines
from leafpaths.infra.reader import STDIN_SOURCE, is_remote_source

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def generate_leaf_paths(config: Optional[Dict[str, Any]]) -> ForestResult:
    """
    Execute the full build-and-enumerate workflow.

    Args:
        config: The configuration dictionary (raw or partial).

    Returns:
        ForestResult: Paths and statistics, or the error that stopped the run.
    """
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    source = _resolve_source(cfg["source"])
    cfg["source"] = source

    # 1. Build
    try:
        tree = build_tree_from_source(source, timeout=cfg["request_timeout"])
    except LeafPathsError as e:
        logger.debug(f"Tree construction failed: {e}")
        return create_error_result(str(e), cfg)

    summary = summarize_tree(tree)

    # 2. Enumerate
    try:
        paths = _enumerate_with_fallback(tree, cfg)
    except LeafPathsError as e:
        logger.debug(f"Path enumeration failed: {e}")
        return create_error_result(str(e), cfg, summary)

    if cfg["sort_output"]:
        paths.sort()

    summary["paths"] = len(paths)
    logger.info(
        f"Enumerated {len(paths)} leaf paths ({cfg['strategy']}) from "
        f"{summary['nodes']} nodes under {summary['parents']} parents."
    )

    if cfg["print_paths"]:
        logger.debug("Paths Preview:\n" + "\n".join(paths[:20]))

    # 3. Persist
    output_path = ""
    if cfg["output_path"]:
        output_path = normalize_path(cfg["output_path"])
        try:
            write_lines(output_path, paths)
        except OSError as e:
            msg = f"Failed to save paths to '{output_path}': {e}"
            logger.debug(msg)
            return create_error_result(msg, cfg, summary)
        logger.info(f"Paths saved to file: {output_path}")

    return create_success_result(cfg, paths, summary, output_path)


def summarize_tree(tree: Tree) -> Dict[str, int]:
    """
    Compute structural statistics for a built tree.

    ``leaves`` counts distinct node ids that never appear as a parent key.

    Returns:
        Dict[str, int]: nodes, parents and leaves counts.
    """
    node_ids = {child_id for children in tree.values() for child_id in children}
    leaves = [node_id for node_id in node_ids if node_id not in tree]
    return {
        "nodes": len(node_ids),
        "parents": len(tree),
        "leaves": len(leaves),
    }


# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _resolve_source(source: str) -> str:
    if not source or source == STDIN_SOURCE or is_remote_source(source):
        return source
    return normalize_path(source)


def _enumerate_with_fallback(tree: Tree, cfg: Dict[str, Any]) -> List[str]:
    """
    Run the configured traversal, switching to the iterative walk when a
    recursive walk from the root exceeds the interpreter stack.

    Without the cycle guard the iterative walk would never end on cyclic
    input, so the switch only happens while the guard is on.
    """
    try:
        return enumerate_paths(
            tree,
            cfg["strategy"],
            cfg["root_id"],
            detect_cycles=cfg["detect_cycles"],
        )
    except TraversalDepthError:
        can_switch = (
            cfg["strategy"] == STRATEGY_RECURSIVE
            and cfg["root_id"] == ROOT_ID
            and cfg["detect_cycles"]
        )
        if not can_switch:
            raise
        logger.warning("Tree too deep for the recursive strategy; switching to iterative.")
        cfg["strategy"] = STRATEGY_ITERATIVE
        return compute_paths_iterative(tree, detect_cycles=True)
