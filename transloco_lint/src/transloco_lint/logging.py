from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from pathlib import Path


@dataclass
class LogConfig:
    log_file: Path | str | None = None
    log_level: int = logging.WARNING
    console_level: int = logging.WARNING
    file_level: int = logging.DEBUG
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: LogConfig | None = None) -> logging.Logger:
    """
    Attach handlers to the package logger. Hosts call this once; the library
    itself never configures logging on import.
    """
    if config is None:
        config = LogConfig()

    logger = logging.getLogger("transloco_lint")
    logger.setLevel(config.log_level)

    # Clear any existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(config.console_level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)

    if config.log_file is not None:
        fh = logging.FileHandler(config.log_file)
        fh.setLevel(config.file_level)
        fh.setFormatter(formatter)
        logger.addHandler(fh)

    return logger
