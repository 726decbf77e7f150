"""
Logging utilities for the Report UI.

Provides a logger factory that creates configured Python loggers with
consistent formatting across services, queries and Reflex states.
"""

import logging
import os
from pathlib import Path

_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level() -> int:
    return getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)


def logger(name: str) -> logging.Logger:
    """
    Create and configure a logger for the given name.

    Module files are reduced to their dotted package path below
    ``report_ui`` (``report_ui/services/http.py`` becomes
    ``report_ui.services.http``) so log lines stay readable.

    Args:
        name: Logger name or __file__ path.

    Returns:
        Configured logging.Logger instance.
    """
    if "/" in name or "\\" in name:
        name = _module_name(Path(name))

    log = logging.getLogger(name)

    if not log.handlers:
        log.setLevel(_level())
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
        log.addHandler(handler)
        log.propagate = False

    return log


def _module_name(path: Path) -> str:
    parts = list(path.with_suffix("").parts)
    if "report_ui" in parts:
        parts = parts[parts.index("report_ui") :]
    else:
        parts = parts[-1:]
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)
