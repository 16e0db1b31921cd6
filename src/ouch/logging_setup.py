"""Logging configuration for the ouch CLI."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from .conversions import from_os_error

_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(log_file: str | None = None, *, verbose: bool = False) -> None:
    """Send logs to ``log_file``, or to stderr with ``verbose``, or nowhere.

    Log output never replaces the rendered error message on stdout.
    """
    level = logging.DEBUG if verbose else logging.INFO

    if log_file:
        log_path = Path(log_file)
        try:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = logging.FileHandler(str(log_path), encoding="utf-8")
        except OSError as exc:
            raise from_os_error(exc) from exc
    elif verbose:
        handler = logging.StreamHandler(sys.stderr)
    else:
        logging.disable(logging.CRITICAL)
        return

    logging.disable(logging.NOTSET)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    logging.basicConfig(level=level, handlers=[handler], force=True)
