from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates parsed argparse
namespaces into configuration overrides.
"""

import argparse
from typing import Any, Dict

from leafpaths import __version__
from leafpaths.domain.config import STRATEGIES

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the leafpaths CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="leafpaths",
        description="Rebuild a forest from ID,LABEL,PARENT_ID records and list every root-to-leaf path.",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="source",
        default=None,
        help="Record source: file path, '-' for stdin, or an http(s) URL.",
    )
    p.add_argument(
        "--config",
        dest="config_path",
        default=None,
        help="JSON configuration file merged over the defaults.",
    )
    p.add_argument(
        "--timeout",
        dest="request_timeout",
        type=int,
        default=None,
        help="Network timeout in seconds for remote sources.",
    )

    # --- Traversal ---
    p.add_argument(
        "--strategy",
        choices=STRATEGIES,
        default=None,
        help="Traversal used to enumerate paths.",
    )
    p.add_argument(
        "--root-id",
        dest="root_id",
        type=int,
        default=None,
        help="Node id to start from (recursive strategy only).",
    )
    p.add_argument(
        "--no-cycle-check",
        action="store_true",
        help="Disable cycle detection for trusted input.",
    )
    p.add_argument(
        "--sort",
        action="store_true",
        help="Sort paths lexicographically.",
    )

    # --- Output ---
    p.add_argument(
        "-o", "--output",
        dest="output_path",
        default=None,
        help="Also save the paths to this file.",
    )
    p.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Do not print the paths to stdout.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full result as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Write diagnostic logs to this rotating file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Options left unset map to None so they do not mask file values.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["source"] = args.source
    overrides["output_path"] = args.output_path
    overrides["strategy"] = args.strategy
    overrides["root_id"] = args.root_id
    overrides["request_timeout"] = args.request_timeout

    if args.no_cycle_check:
        overrides["detect_cycles"] = False
    if args.sort:
        overrides["sort_output"] = True
    if args.quiet or args.json_output:
        overrides["print_paths"] = False

    return overrides
