from __future__ import annotations

import sys
from typing import Protocol, TextIO

# Erase the whole line, then move the cursor back to column 1.
CLEAR_LINE = "\x1b[2K\x1b[1G"


class DisplaySink(Protocol):
    def write(self, text: str) -> None:
        ...

    def clear_line(self) -> None:
        ...


class TerminalSink:
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def clear_line(self) -> None:
        self.stream.write(CLEAR_LINE)
        self.stream.flush()
