"""
logging_setup.py — Logging Bootstrap
=====================================
Root-logger configuration for the server process.  Library modules only
ever call `logging.getLogger(__name__)`; this is the one place handlers
are attached.  Safe to call more than once.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(threadName)s] %(name)s: %(message)s"


def init_logging(level: str = "INFO", log_file: Optional[str] = None) -> Optional[Path]:
    """Attach a console handler (and optionally a rotating file handler)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        numeric = logging.INFO

    root = logging.getLogger()
    root.setLevel(numeric)
    formatter = logging.Formatter(LOG_FORMAT)

    if not any(
        isinstance(h, logging.StreamHandler) and not isinstance(h, logging.FileHandler)
        for h in root.handlers
    ):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(numeric)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    log_path: Optional[Path] = None
    if log_file:
        log_path = Path(log_file)
        if not any(isinstance(h, RotatingFileHandler) for h in root.handlers):
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_path,
                maxBytes=2_000_000,
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(numeric)
            file_handler.setFormatter(formatter)
            root.addHandler(file_handler)

    logging.getLogger("algotrace").info(
        "Logging initialised at %s%s", level.upper(), f" ({log_path})" if log_path else ""
    )
    return log_path
