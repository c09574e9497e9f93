"""
Host I/O ports

The interpreter never touches stdin/stdout itself. It asks an input port
for one symbol per ',' and hands one value per '.' to an output port.
Both are passed in when the interpreter is built.
"""

import sys
from typing import List, Optional, Protocol

from .errors import EndOfInputError


class InputPort(Protocol):
    def next_symbol(self) -> str:
        ...


class OutputPort(Protocol):
    def emit(self, value: int) -> None:
        ...


def to_char(value: int) -> str:
    """Cells are shown as single-byte character codes."""
    return chr(value % 256)


class ConsoleInput:
    """Reads symbols from a text stream, one line per request.

    Only the first non-blank character of a line is used, whatever else
    was typed. Blank lines are skipped.
    """

    def __init__(self, stream=None, eof_value: Optional[int] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.eof_value = eof_value

    def next_symbol(self) -> str:
        while True:
            line = self.stream.readline()
            if not line:
                if self.eof_value is None:
                    raise EndOfInputError()
                return chr(self.eof_value)
            line = line.strip()
            if line:
                return line[0]


class ConsoleOutput:
    def __init__(self, stream=None):
        self.stream = stream if stream is not None else sys.stdout

    def emit(self, value: int) -> None:
        self.stream.write(to_char(value))
        self.stream.flush()


class BufferedInput:
    """Feeds symbols from a preloaded string."""

    def __init__(self, data: str = "", eof_value: Optional[int] = None):
        self.data = data
        self.index = 0
        self.eof_value = eof_value

    def feed(self, data: str):
        self.data += data

    @property
    def remaining(self) -> int:
        return len(self.data) - self.index

    def next_symbol(self) -> str:
        if self.index >= len(self.data):
            if self.eof_value is None:
                raise EndOfInputError()
            return chr(self.eof_value)
        symbol = self.data[self.index]
        self.index += 1
        return symbol


class BufferedOutput:
    """Collects emitted cell values."""

    def __init__(self):
        self.values: List[int] = []

    def emit(self, value: int) -> None:
        self.values.append(value)

    @property
    def text(self) -> str:
        return ''.join(to_char(v) for v in self.values)

    def clear(self):
        self.values = []
