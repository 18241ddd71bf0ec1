"""Text streams that copy their output to the console and a log file."""

from __future__ import annotations

import io
import os
import sys
import threading
from typing import Any, Optional, TextIO


class ComposeStream(io.TextIOBase):
    """A text stream that writes everything to each linked stream."""

    def __init__(self) -> None:
        super().__init__()
        self._streams: list[TextIO] = []

    def writable(self) -> bool:
        return True

    def link_stream(self, out: TextIO) -> None:
        """Add ``out`` to the streams that receive output."""
        out.flush()
        self._streams.append(out)

    def write(self, text: str) -> int:
        """Write ``text`` to every linked stream."""
        for stream in self._streams:
            stream.write(text)
        return len(text)

    def flush(self) -> None:
        """Flush every linked stream."""
        for stream in self._streams:
            stream.flush()


class ThreadSafeStdout:
    """Writes values to standard output, one writer at a time."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def write(self, value: Any) -> None:
        """Write ``str(value)`` to standard output."""
        with self._lock:
            sys.stdout.write(str(value))


class LogPlusCout(ComposeStream):
    """Output to standard output, a log file, or both."""

    def __init__(self, do_cout: bool, logfn: Optional[str | os.PathLike] = None) -> None:
        super().__init__()
        self._log: Optional[TextIO] = None
        if do_cout:
            self.link_stream(sys.stdout)
        if logfn:
            try:
                self._log = open(logfn, "w", encoding="utf-8")
            except OSError:
                sys.stdout.write(
                    f"warning: cannot open log file {os.fspath(logfn)} for writing\n"
                )
                self._log = None
        if self._log is not None:
            self.link_stream(self._log)

    def close(self) -> None:
        """Flush all output and close the log file."""
        if self.closed:
            return
        self.flush()
        if self._log is not None:
            self._streams.remove(self._log)
            self._log.close()
            self._log = None
        super().close()

    def __enter__(self) -> "LogPlusCout":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()