"""Message logging to the console and an optional output file."""

from __future__ import annotations

import sys
from typing import IO, Optional


class Reporter:
    """Writes each message to a console stream and, when open, to a file."""

    def __init__(self, path: Optional[str] = None, stream: Optional[IO[str]] = None) -> None:
        self._stream = stream
        self._file: Optional[IO[str]] = None
        if path is not None:
            self.open(path)

    @property
    def is_open(self) -> bool:
        """Whether an output file is currently open."""
        return self._file is not None

    def open(self, path: str) -> None:
        """Close any current output file and open ``path`` for writing."""
        self.close()
        self._file = open(path, "w", encoding="utf-8")

    def log(self, message: str) -> None:
        """Write ``message`` and a newline to the stream and the output file."""
        stream = self._stream if self._stream is not None else sys.stdout
        print(message, file=stream)
        if self._file is not None:
            print(message, file=self._file)

    def close(self) -> None:
        """Close the output file; further messages go to the stream only."""
        if self._file is not None:
            self._file.close()
            self._file = None

    def __enter__(self) -> "Reporter":
        return self

    def __exit__(self, *args: object) -> None:
        self.close()