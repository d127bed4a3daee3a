r"""
Logging configuration module for dccli.

Provides a colorlog based console setup and structured error logging.
"""

import logging
import os
import sys
from typing import Any

import colorlog


def debug_from_env() -> bool:
    """Return True when the ``DEBUG`` environment variable requests debug output."""
    return os.environ.get("DEBUG", "").lower() in ("true", "1", "yes")


def log_structured_error(
    error_type: str,
    message: str,
    exception: BaseException | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context.

    Args:
        error_type: Category of the error (e.g., 'network', 'parsing', 'config')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.getLogger("dccli").log(level, structured_message)


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Verbose mode (or the ``DEBUG`` environment variable) selects DEBUG level,
    which also turns on the timestamped IRC SEND/RECV echo.
    """

    def __init__(self, verbose: bool = False, stream=None):
        self.verbose = verbose or debug_from_env()
        self.stream = stream or sys.stderr

    @property
    def level(self) -> int:
        return logging.DEBUG if self.verbose else logging.INFO

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s.%(msecs)03d %(log_color)s%(levelname)-8s%(reset)s "
            "%(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self) -> None:
        """Install the colored stream handler on the root logger, replacing a previous one."""
        handler = logging.StreamHandler(self.stream)
        handler.setFormatter(self.build_formatter())

        handler._dccli_console = True  # type: ignore[attr-defined]

        root_logger = logging.getLogger()
        for existing in list(root_logger.handlers):
            if getattr(existing, "_dccli_console", False):
                root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(self.level)

        # asyncio debug chatter is not useful on the console
        logging.getLogger("asyncio").setLevel(logging.WARNING)
