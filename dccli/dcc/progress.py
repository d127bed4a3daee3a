"""Transfer progress and its logging observer."""

from __future__ import annotations

from dataclasses import dataclass

from ..constants import PROGRESS_LOG_STEP
from ..logs.logger import logger


@dataclass(slots=True)
class TransferProgress:
    """Bytes received so far; only ever increases, never exceeds ``size``."""

    size: int
    received: int = 0

    def advance(self, count: int) -> None:
        if count < 0:
            raise ValueError("progress cannot go backwards")
        self.received = min(self.size, self.received + count)

    @property
    def remaining(self) -> int:
        return self.size - self.received

    @property
    def done(self) -> bool:
        return self.received >= self.size

    @property
    def percent(self) -> int:
        if self.size == 0:
            return 100
        return self.received * 100 // self.size


class ProgressReporter:
    """Logs a line each time a transfer crosses another ``step`` percent.

    Passed to :meth:`DccDownload.run` as ``on_progress``; it reads the
    progress but never changes it.
    """

    def __init__(self, filename: str, step: int = PROGRESS_LOG_STEP) -> None:
        self.filename = filename
        self.step = max(1, step)
        self._last_logged = -1

    def __call__(self, progress: TransferProgress) -> None:
        if progress.done:
            logger.log_event(
                "dcc", "complete", filename=self.filename, size=progress.size
            )
            return
        bucket = progress.percent // self.step * self.step
        if bucket > self._last_logged:
            self._last_logged = bucket
            logger.log_event(
                "dcc",
                "progress",
                filename=self.filename,
                percent=bucket,
                received=progress.received,
                size=progress.size,
            )
