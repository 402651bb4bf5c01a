#!/usr/bin/env python
"""
logging_helper.py – one-call setup: file + stdout.

Usage:
    from rankforge.utils.logging_helper import get_logger
    log = get_logger()                  # derives name from caller's module
    log.debug("ranked 12 rows")
"""

from __future__ import annotations
import inspect, logging, sys, os
from pathlib import Path

from rankforge.utils.paths import LOG_DIR

DEF_FMT  = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DEF_DATE = "%Y-%m-%d %H:%M:%S"
ENV_LEVEL = "RANKFORGE_LOG_LEVEL"


class _LazyFileHandler(logging.FileHandler):
    """FileHandler that creates its folder when the first record is written."""

    def _open(self):
        Path(self.baseFilename).parent.mkdir(parents=True, exist_ok=True)
        return super()._open()


def get_logger(level: int | None = None,
               log_dir: str | Path | None = None) -> logging.Logger:
    """
    Create (or return existing) logger whose name is the caller's module
    (e.g. 'engine'). Writes to <log_dir>/<name>.log and echoes to stdout.

    The level defaults to $RANKFORGE_LOG_LEVEL, or INFO when unset.
    """
    # ── derive name from caller ───────────────────────────────────────────
    caller = inspect.stack()[1]
    module = inspect.getmodule(caller[0])
    if module and module.__name__ != "__main__":
        name = module.__name__.split(".")[-1]
    else:
        # called as a script: use the file-stem (e.g., rank_table)
        name = os.path.splitext(os.path.basename(caller.filename))[0]

    logger = logging.getLogger(f"rankforge.{name}")
    if logger.handlers:                 # already initialised
        return logger

    if level is None:
        level = logging.getLevelName(os.environ.get(ENV_LEVEL, "INFO").upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)

    log_dir = Path(log_dir) if log_dir is not None else LOG_DIR
    log_path = log_dir / f"{name}.log"

    # file handler
    fh = _LazyFileHandler(log_path, encoding="utf-8", delay=True)
    fh.setFormatter(logging.Formatter(DEF_FMT, DEF_DATE))
    fh.setLevel(level)

    # console handler
    ch = logging.StreamHandler(sys.stdout)
    ch.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
    ch.setLevel(level)

    logger.addHandler(fh)
    logger.addHandler(ch)
    logger.propagate = False
    return logger
