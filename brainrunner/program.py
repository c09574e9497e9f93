"""
Program buffer and bracket validation

A program is an ordered, append-only sequence of source symbols. Only the
eight commands below mean anything; every other character is a comment
that still occupies a position.
"""

from typing import List

from .errors import BracketMismatchError, MismatchKind

COMMANDS = '+-<>.,[]'


def validate(symbols) -> None:
    """Check that every ']' closes an earlier '[' and every '[' is closed.

    Raises BracketMismatchError at the first ']' that has nothing to
    close, or after the scan if some '[' was left open.
    """
    depth = 0
    for i, symbol in enumerate(symbols):
        if symbol == '[':
            depth += 1
        elif symbol == ']':
            depth -= 1
            if depth < 0:
                raise BracketMismatchError(MismatchKind.UNMATCHED_CLOSE, i)
    if depth != 0:
        raise BracketMismatchError(MismatchKind.UNMATCHED_OPEN)


class Program:
    def __init__(self, source: str = ""):
        self._symbols: List[str] = list(source)

    def append(self, source: str):
        """Add symbols to the end without touching what is already there."""
        self._symbols.extend(source)

    def replace(self, source: str):
        self._symbols = list(source)

    def clear(self):
        self._symbols = []

    def validate(self):
        validate(self._symbols)

    def matching_close(self, index: int) -> int:
        """Index of the ']' that closes the '[' at index.

        The program must already be validated.
        """
        depth = 0
        i = index
        while True:
            i += 1
            symbol = self._symbols[i]
            if symbol == '[':
                depth += 1
            elif symbol == ']':
                if depth == 0:
                    return i
                depth -= 1

    @property
    def source(self) -> str:
        return ''.join(self._symbols)

    def __getitem__(self, index):
        return self._symbols[index]

    def __len__(self):
        return len(self._symbols)

    def __iter__(self):
        return iter(self._symbols)

    def __repr__(self):
        return f"Program({self.source!r})"
