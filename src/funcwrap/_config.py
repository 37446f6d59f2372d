"""Package configuration: FuncConfig and initialization."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from funcwrap._logging import configure_logging

__all__ = [
    'FuncConfig',
    'get_config',
    'init',
]


@dataclass(frozen=True)
class FuncConfig:
    """Configuration for funcwrap.

    Attributes:
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
        json_output: Render log events as JSON (True) or for the console (False).
    """

    log_level: str | None = None
    json_output: bool = True


# Global configuration (set by init())
_config: FuncConfig | None = None


def _detect_log_level() -> str | None:
    """Read the log level from FUNCWRAP_LOG_LEVEL, if set."""
    level = os.environ.get('FUNCWRAP_LOG_LEVEL', '').strip()
    return level.upper() or None


def _detect_json_output() -> bool:
    """Read the log format from FUNCWRAP_LOG_FORMAT ("json" or "console").

    Defaults to JSON.
    """
    fmt = os.environ.get('FUNCWRAP_LOG_FORMAT', '').lower()
    if fmt == 'console':
        return False
    if fmt and fmt != 'json':
        logging.warning("Unknown FUNCWRAP_LOG_FORMAT value '%s', defaulting to json", fmt)
    return True


def init(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> FuncConfig:
    """Initialize funcwrap with the specified configuration.

    Args:
        log_level: Logging level ("DEBUG", "INFO", etc.). Read from
            FUNCWRAP_LOG_LEVEL if None; None there too means silent.
        json_output: JSON or console log rendering. Read from
            FUNCWRAP_LOG_FORMAT if None.

    Returns:
        The FuncConfig that was set.

    Example:
        ```python
        import funcwrap

        funcwrap.init(log_level="DEBUG", json_output=False)
        ```
    """
    global _config  # noqa: PLW0603

    resolved_level = log_level if log_level is not None else _detect_log_level()
    resolved_json = json_output if json_output is not None else _detect_json_output()

    _config = FuncConfig(log_level=resolved_level, json_output=resolved_json)

    if resolved_level is not None:
        configure_logging(resolved_level, json_output=resolved_json)

    return _config


def get_config() -> FuncConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'funcwrap not initialized. Call funcwrap.init() first.'
        raise RuntimeError(msg)
    return _config
