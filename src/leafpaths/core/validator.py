from __future__ import annotations

"""
Configuration Validation Service.

Normalizes configuration dictionaries coming from JSON files or the CLI:
coerces types, fills missing keys with defaults and enforces the
combinations the traversal supports.
"""

import logging
from typing import Any, Dict, List, Tuple

from leafpaths.domain.config import STRATEGIES, STRATEGY_ITERATIVE, get_default_config
from leafpaths.domain.forest_models import ROOT_ID

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an unsupported value.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    string_fields = ["source", "strategy", "output_path"]
    bool_fields = ["detect_cycles", "sort_output", "print_paths"]
    int_fields = ["root_id", "request_timeout"]

    for field in string_fields:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in bool_fields:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in int_fields:
        merged[field] = _as_int(merged.get(field), defaults[field], field, warnings, strict)

    _normalize_strategy(merged, defaults, warnings, strict)

    if merged["request_timeout"] <= 0:
        msg = f"Field 'request_timeout' must be positive, received {merged['request_timeout']}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["request_timeout"] = defaults["request_timeout"]

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce numeric strings into integers; bools are rejected."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict and isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            pass
        else:
            warnings.append(f"Field '{field}' converted from '{value}' to {parsed}.")
            return parsed

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_strategy(
        merged: Dict[str, Any],
        defaults: Dict[str, Any],
        warnings: List[str],
        strict: bool,
) -> None:
    """Enforce a known strategy and the iterative root constraint."""
    strategy = merged["strategy"].lower()
    if strategy not in STRATEGIES:
        msg = f"Unknown strategy '{merged['strategy']}': expected one of {', '.join(STRATEGIES)}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{defaults['strategy']}'.")
        strategy = defaults["strategy"]
    merged["strategy"] = strategy

    if strategy == STRATEGY_ITERATIVE and merged["root_id"] != ROOT_ID:
        msg = f"Iterative traversal always starts at {ROOT_ID}; root_id {merged['root_id']} ignored."
        if strict:
            raise ValueError(msg)
        warnings.append(msg)
        merged["root_id"] = ROOT_ID
