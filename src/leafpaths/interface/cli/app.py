from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: logging bootstrap, configuration merge
(defaults, optional JSON file, command-line overrides), service execution
and result rendering.
"""

import json
import sys
from dataclasses import asdict
from typing import Any, Dict, List, Optional

from leafpaths.core.service import generate_leaf_paths
from leafpaths.core.validator import validate_config
from leafpaths.domain.config import load_config
from leafpaths.domain.result_models import ForestResult
from leafpaths.infra.logging import LoggingConfig, configure_logging, get_logger
from leafpaths.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 bad input, 130 interrupted).
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    log_level = "DEBUG" if args.debug else "WARNING"
    configure_logging(LoggingConfig(level=log_level, console=True, log_file=args.log_file))

    logger.debug("CLI execution initiated. Resolving configuration...")

    base_conf = load_config(args.config_path)
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(base_conf, overrides)

    clean_conf, warnings = validate_config(raw_conf, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    if args.dump_config:
        print(json.dumps(clean_conf, ensure_ascii=False, indent=2))
        return 0

    if not clean_conf["source"]:
        print("ERROR: no record source given (use -i/--input or 'source' in --config).", file=sys.stderr)
        return 2

    try:
        result = generate_leaf_paths(clean_conf)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    if args.json_output:
        print(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    else:
        _print_paths(result, clean_conf["print_paths"])

    return 0 if result.ok else 1

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of the non-None override values into the base config."""
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_paths(result: ForestResult, print_paths: bool) -> None:
    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return

    if print_paths:
        for path in result.paths:
            print(path)

    if result.output_path:
        logger.info(f"{len(result.paths)} paths written to {result.output_path}")


if __name__ == "__main__":
    sys.exit(main())
