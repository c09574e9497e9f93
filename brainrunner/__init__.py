"""BrainRunner: a Brainfuck interpreter with an incremental REPL."""

from .errors import (BracketMismatchError, CursorUnderflowError, EndOfInputError,
                     InterpreterError, MismatchKind)
from .executor import Executor
from .ports import BufferedInput, BufferedOutput, ConsoleInput, ConsoleOutput
from .program import Program, validate
from .tape import Tape

__version__ = "0.1.0"
