"""Wall clock timing and UTC time stamps."""

from __future__ import annotations

import time
from datetime import datetime, timezone


class Timer:
    """Stop watch measuring seconds between ``tic`` and ``toc``."""

    def __init__(self) -> None:
        self._tic = time.perf_counter()
        self._toc = self._tic

    def tic(self) -> None:
        """Start the timer."""
        self._tic = time.perf_counter()

    def toc(self) -> float:
        """Stop the timer and return the elapsed seconds."""
        self._toc = time.perf_counter()
        return self.elapsed()

    def elapsed(self) -> float:
        """Seconds between the last ``tic`` and the last ``toc``."""
        return self._toc - self._tic


def current_iso8601_time_utc() -> str:
    """Current UTC time as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")