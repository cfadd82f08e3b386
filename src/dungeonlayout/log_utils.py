from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER = "dungeonlayout"


class LayoutLogFormatter(logging.Formatter):
    """``LEVEL:topic   : message`` lines, optionally coloured per level."""

    COLORS = {
        logging.DEBUG: "\033[38;5;252m",
        logging.INFO: "\033[38;5;111m",
        logging.WARNING: "\033[38;5;229m",
        logging.ERROR: "\033[38;5;210m",
        logging.CRITICAL: "\033[38;5;217m",
    }
    RESET = "\033[0m"

    def __init__(self, use_color: bool = False) -> None:
        super().__init__()
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        topic = record.name.split(".")[-1][:12]
        level = record.levelname[:5]
        if self.use_color:
            level = f"{self.COLORS.get(record.levelno, '')}{level:<5}{self.RESET}"
        else:
            level = f"{level:<5}"
        prefix = f"{level}:{topic:<12}: "
        message = super().format(record)
        return "\n".join(f"{prefix}{line}" for line in message.split("\n"))


def setup_logging(level: int | str = logging.INFO, color: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    root_logger = logging.getLogger(ROOT_LOGGER)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(LayoutLogFormatter(use_color=color))
    root_logger.addHandler(console_handler)
    if isinstance(level, str):
        level = level.upper()
    root_logger.setLevel(level)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        except OSError as exc:
            root_logger.error("Could not open log file %s: %s", log_file, exc)
        else:
            file_handler.setFormatter(LayoutLogFormatter(use_color=False))
            root_logger.addHandler(file_handler)
            root_logger.info("Logging to file: %s", log_file)
    return root_logger
