"""
Interpreter errors

Every failure the interpreter can report derives from InterpreterError.
Any of them aborts the current run and resets the interpreter.
"""

import enum
from typing import Optional


class MismatchKind(enum.Enum):
    UNMATCHED_CLOSE = enum.auto()
    UNMATCHED_OPEN = enum.auto()


class InterpreterError(Exception):
    """Base class for errors raised by the interpreter."""


class BracketMismatchError(InterpreterError):
    """Raised when the program's brackets do not balance.

    Attributes:
        kind -- MismatchKind.UNMATCHED_CLOSE or MismatchKind.UNMATCHED_OPEN.
        position -- 0-based index of the offending ']' (None for an unclosed '[').
    """

    def __init__(self, kind: MismatchKind, position: Optional[int] = None):
        self.kind = kind
        self.position = position
        if kind is MismatchKind.UNMATCHED_CLOSE:
            message = f"mismatched ']' at instruction {position + 1}."
        else:
            message = "mismatched '['."
        super().__init__(message)


class CursorUnderflowError(InterpreterError):
    """Raised when '<' would move the cell pointer below zero."""

    def __init__(self, instruction: Optional[int] = None):
        self.instruction = instruction
        if instruction is None:
            message = "cell pointer out of bounds."
        else:
            message = f"cell pointer out of bounds. (instruction {instruction + 1})"
        super().__init__(message)


class EndOfInputError(InterpreterError):
    """Raised when ',' asks an exhausted input port for a symbol."""

    def __init__(self, instruction: Optional[int] = None):
        self.instruction = instruction
        if instruction is None:
            message = "no more input."
        else:
            message = f"no more input. (instruction {instruction + 1})"
        super().__init__(message)
