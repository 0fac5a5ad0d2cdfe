from __future__ import annotations

"""
Configuration Validation Service.

Acts as the gatekeeper between raw option sources (config file, CLI) and the
run: coerces types, injects defaults, and rejects option combinations that
cannot work before any directory is traversed.
"""

import logging
from typing import Any, Dict, List, Tuple

from dirstat.domain.config import get_default_config
from dirstat.domain.errors import ConfigurationError

logger = logging.getLogger(__name__)

STRING_FIELDS = ["output_file", "log_file"]

BOOL_FIELDS = [
    "continuous", "linear", "csv", "quiet",
    "recurse", "skip_dot_entries",
]

# Continuous updates print one refresh per directory
MIN_CONTINUOUS_PATHS = 2


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

    Converts untrusted inputs (config file, CLI) into strictly typed
    options. Fills missing keys with defaults and drops unknown ones.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    # 1. Base Type Validation
    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    unknown = sorted(k for k in config if k not in defaults)
    for key in unknown:
        msg = f"Unknown config key '{key}'."
        if strict:
            raise KeyError(msg)
        warnings.append(f"{msg} Ignored.")

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if k in defaults})

    # 2. Field Processing & Normalization
    for field in STRING_FIELDS:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    for field in BOOL_FIELDS:
        merged[field] = _as_bool(
            merged.get(field), defaults.get(field, False), field, warnings, strict
        )

    return merged, warnings


def check_run_options(config: Dict[str, Any], path_count: int) -> List[str]:
    """
    Reject option combinations that cannot run against the registered paths.

    Args:
        config: Normalized configuration.
        path_count: Number of registered directories.

    Returns:
        List[str]: Non-fatal notices about the option set.

    Raises:
        ConfigurationError: If continuous mode is requested with fewer than
                            two directories, or no directory is registered.
    """
    notices: List[str] = []

    if path_count < 1:
        raise ConfigurationError("No valid directories to scan.")

    if config.get("continuous") and path_count < MIN_CONTINUOUS_PATHS:
        raise ConfigurationError("Continuous update requires multiple directories.")

    if config.get("recurse"):
        notices.append("Recursion is not supported; only immediate entries are counted.")

    return notices


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate string inputs. Values are path names and are kept verbatim."""
    if value is None:
        return fallback
    if isinstance(value, str):
        return value if value else fallback

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
        # Support numeric coercion (0/1)
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        # Support string coercion (human-friendly keywords)
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
