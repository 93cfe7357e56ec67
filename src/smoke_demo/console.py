"""Console — line-oriented writer that also records what it wrote."""

from __future__ import annotations

import sys
from typing import IO, Any


class Console:
    """Write space-joined lines to a text stream and keep the transcript.

    The stream defaults to ``sys.stdout`` looked up at write time, so
    redirection done after construction (pytest ``capsys``, the CLI's
    UTF-8 reconfigure) is honoured.
    """

    def __init__(self, stream: IO[str] | None = None, *, echo: bool = True) -> None:
        self._stream = stream
        self._echo = echo
        self.lines: list[str] = []

    @property
    def stream(self) -> IO[str]:
        return self._stream if self._stream is not None else sys.stdout

    def log(self, *parts: Any) -> str:
        """Render *parts* with ``str()``, join with single spaces, emit one line."""
        line = " ".join(str(p) for p in parts)
        self.lines.append(line)
        if self._echo:
            self.stream.write(line + "\n")
        return line

    def transcript(self) -> str:
        """Everything logged so far, newline-terminated."""
        return "".join(line + "\n" for line in self.lines)
