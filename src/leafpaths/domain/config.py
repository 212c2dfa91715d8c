from __future__ import annotations

"""
Configuration Domain Management.

Provides the default session configuration and loads optional JSON
configuration files. Values are merged over the defaults so partial
files remain valid.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from leafpaths.domain.forest_models import ROOT_ID

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
STRATEGY_RECURSIVE = "recursive"
STRATEGY_ITERATIVE = "iterative"
STRATEGIES = (STRATEGY_RECURSIVE, STRATEGY_ITERATIVE)

DEFAULT_REQUEST_TIMEOUT = 10


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "source": "",
        "request_timeout": DEFAULT_REQUEST_TIMEOUT,

        # Traversal
        "root_id": ROOT_ID,
        "strategy": STRATEGY_RECURSIVE,
        "detect_cycles": True,
        "sort_output": False,

        # Output
        "output_path": "",
        "print_paths": True,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a JSON configuration file merged over the defaults.

    A missing path or file yields the defaults. A corrupted file is
    reported and ignored.

    Args:
        config_path: Optional path to a JSON object file.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()

    if not config_path:
        return config

    if not os.path.exists(config_path):
        logger.debug(f"Config file not found: {config_path}. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted config file '{config_path}': root is not an object. Using defaults.")
        return config

    config.update(data)
    logger.debug(f"Configuration loaded from {config_path}")
    return config
