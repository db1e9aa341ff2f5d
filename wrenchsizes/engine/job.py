"""
ConversionJob: run the engine on a worker thread and stream lines to a sink.

The sink is owned by the caller and only ever appended to, one complete line
at a time, from the worker thread. cancel() may be called from any thread;
the worker notices it before the next row and stops.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from enum import Enum

from wrenchsizes.engine.sweep import ConversionEngine
from wrenchsizes.schemas.request import ConversionRequest

logger = logging.getLogger(__name__)

LineSink = Callable[[str], None]


class JobStatus(str, Enum):
    PENDING = "pending"
    RUNNING = "running"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class ConversionJob:
    """
    One conversion run on a dedicated daemon thread.

    A job runs at most once. Create a new job for each request.
    """

    def __init__(
        self,
        request: ConversionRequest,
        sink: LineSink,
        engine: ConversionEngine | None = None,
    ) -> None:
        self._request = request
        self._sink = sink
        self._engine = engine or ConversionEngine()
        self._cancel_event = threading.Event()
        self._thread: threading.Thread | None = None
        self._error: BaseException | None = None
        self.status = JobStatus.PENDING
        self.lines_emitted = 0

    @property
    def cancel_requested(self) -> bool:
        return self._cancel_event.is_set()

    def start(self) -> None:
        """Start the worker thread.

        Raises:
            RuntimeError: If the job was already started.
        """
        if self._thread is not None:
            raise RuntimeError("ConversionJob can only be started once")
        self.status = JobStatus.RUNNING
        self._thread = threading.Thread(target=self._run, name="conversion-job", daemon=True)
        self._thread.start()

    def cancel(self) -> None:
        """Ask the worker to stop before its next row. Safe to call repeatedly."""
        if not self._cancel_event.is_set():
            logger.info("Conversion cancellation requested")
        self._cancel_event.set()

    def wait(self, timeout: float | None = None) -> bool:
        """
        Block until the worker finishes or ``timeout`` seconds pass.

        Returns:
            True if the worker has finished.

        Raises:
            RuntimeError: If the job was never started.
            Exception: Whatever the worker raised, re-raised here.
        """
        if self._thread is None:
            raise RuntimeError("ConversionJob has not been started")
        self._thread.join(timeout)
        if self._thread.is_alive():
            return False
        if self._error is not None:
            raise self._error
        return True

    def _run(self) -> None:
        logger.debug("Conversion started: %s", self._request)
        try:
            for line in self._engine.run(self._request, self._cancel_event):
                self._sink(line)
                self.lines_emitted += 1
        except Exception as exc:
            logger.exception("Conversion failed after %d lines", self.lines_emitted)
            self._error = exc
            self.status = JobStatus.FAILED
            return
        if self._cancel_event.is_set():
            logger.info("Conversion cancelled after %d lines", self.lines_emitted)
            self.status = JobStatus.CANCELLED
        else:
            logger.debug("Conversion completed: %d lines", self.lines_emitted)
            self.status = JobStatus.COMPLETED
