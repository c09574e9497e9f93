"""
Memory tape

An unbounded-to-the-right row of integer cells with a single cursor.
The tape starts as one zero cell and only ever grows by appending zero
cells at the high end. Cells hold plain Python integers and never wrap.
"""

from typing import List, Tuple

from .errors import CursorUnderflowError


class Tape:
    def __init__(self):
        self._cells: List[int] = [0]
        self.cursor = 0

    def reset(self):
        """Back to a single zero cell with the cursor on it."""
        self._cells = [0]
        self.cursor = 0

    def read(self) -> int:
        return self._cells[self.cursor]

    def write(self, value: int):
        self._cells[self.cursor] = value

    def increment(self):
        self._cells[self.cursor] += 1

    def decrement(self):
        self._cells[self.cursor] -= 1

    def advance(self):
        """Move the cursor right, growing the tape so it always covers the cursor."""
        self.cursor += 1
        while len(self._cells) <= self.cursor:
            self._cells.append(0)

    def retreat(self):
        """Move the cursor left.

        Raises CursorUnderflowError, leaving the cursor where it was, if
        the cursor is already on cell 0.
        """
        if self.cursor == 0:
            raise CursorUnderflowError()
        self.cursor -= 1

    @property
    def cells(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    def window(self, radius: int) -> Tuple[int, List[int]]:
        """Return (first address, values) for the cells around the cursor."""
        start = max(0, self.cursor - radius)
        end = min(len(self._cells), self.cursor + radius + 1)
        return start, self._cells[start:end]

    def __len__(self):
        return len(self._cells)

    def __repr__(self):
        return f"Tape(cursor={self.cursor}, cells={self._cells!r})"
