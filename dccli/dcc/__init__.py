"""DCC file transfer."""

from .progress import ProgressReporter, TransferProgress  # noqa: F401
from .transfer import DccDownload  # noqa: F401

__all__ = ["DccDownload", "ProgressReporter", "TransferProgress"]
