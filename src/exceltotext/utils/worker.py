"""Background worker for running conversions outside the Flet UI thread."""

import logging
import threading
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class BackgroundWorker:
    """Runs one callable at a time in a background thread."""

    def __init__(self) -> None:
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run(
        self,
        fn: Callable[[], Any],
        on_complete: Callable[[Any], None] | None = None,
        on_error: Callable[[Exception], None] | None = None,
    ) -> bool:
        """Execute fn in a background thread. Returns False if a task is still running."""
        if self.is_running:
            logger.warning("Worker is already running, ignoring new request")
            return False

        def _target() -> None:
            try:
                result = fn()
            except Exception as e:
                logger.error("Background task failed: %s", e)
                if on_error:
                    on_error(e)
                return
            if on_complete:
                on_complete(result)

        self._thread = threading.Thread(target=_target, daemon=True)
        self._thread.start()
        return True

    def wait(self, timeout: float | None = None) -> None:
        """Wait for the background thread to complete."""
        if self._thread is not None:
            self._thread.join(timeout=timeout)
