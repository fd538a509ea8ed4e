"""
Environment-based configuration loading with validation.

This module provides:
- Environment variable parsing with defaults
- Configuration value clamping for safety
- RunConfig construction from environment
"""

from __future__ import annotations

import os
from typing import get_args

from selector_extractor.config.constants import (
    DEFAULT_ENCODING,
    DEFAULT_MAX_FILE_BYTES,
    MAX_MAX_FILE_BYTES,
    MIN_MAX_FILE_BYTES,
    RunMode,
)
from selector_extractor.core.models import RunConfig

# ==== ENVIRONMENT VARIABLE HELPERS ==== #

def _env_int(name: str, default: int) -> int:
    """
    Read integer from environment variable with fallback.

    Args:
        name: Environment variable name
        default: Default value if variable not set

    Returns:
        Integer value from environment or default

    Note:
        Raises ValueError if environment value cannot be parsed as int.
    """
    value = os.getenv(name)

    if value is None:
        return default

    return int(value)




def _clamp(value: int, lower: int, upper: int) -> int:
    """
    Clamp integer value to safe range.

    Example:
        _clamp(150, 1, 128) -> 128
        _clamp(5, 10, 100) -> 10
    """
    return max(lower, min(upper, value))




def _env_mode(name: str, default: RunMode) -> RunMode:
    """Read a run mode, falling back to default for unknown values."""
    value = (os.getenv(name) or "").strip().lower()

    if value in get_args(RunMode):
        return value  # type: ignore[return-value]

    return default




# ==== CONFIGURATION LOADERS ==== #

def load_run_config() -> RunConfig:
    """
    Load runtime configuration from environment variables.

    Environment Variables:
        SELECTOR_EXTRACTOR_MODE: auto/markup/component (default auto)
        SELECTOR_EXTRACTOR_MAX_FILE_BYTES: File size limit (clamped 1 KiB-64 MiB)
        SELECTOR_EXTRACTOR_ENCODING: Source file encoding (default utf-8)
        SELECTOR_EXTRACTOR_LOG_LEVEL: Logging level name (default INFO)

    Returns:
        RunConfig with validated configuration values
    """
    # --► MODE
    mode = _env_mode("SELECTOR_EXTRACTOR_MODE", "auto")

    # --► FILE SIZE LIMIT
    max_file_bytes_raw = _env_int(
        "SELECTOR_EXTRACTOR_MAX_FILE_BYTES",
        DEFAULT_MAX_FILE_BYTES,
    )
    # Keep the limit away from zero and from sizes that exhaust memory
    max_file_bytes = _clamp(max_file_bytes_raw, MIN_MAX_FILE_BYTES, MAX_MAX_FILE_BYTES)

    # --► CONSTRUCT RUNCONFIG
    return RunConfig(
        mode=mode,
        max_file_bytes=max_file_bytes,
        encoding=os.getenv("SELECTOR_EXTRACTOR_ENCODING", DEFAULT_ENCODING),
        log_level=os.getenv("SELECTOR_EXTRACTOR_LOG_LEVEL", "INFO").upper(),
    )
