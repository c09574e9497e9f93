"""
BrainRunner REPL

Reads one line at a time. `show`, `reset` and `exit` are commands;
anything else is source code handed to the interpreter. In resume mode
every line continues the same program with the same tape. An error
prints a message and leaves the interpreter freshly reset.
"""

import logging
import sys

from .errors import InterpreterError
from .executor import Executor

logger = logging.getLogger(__name__)


class Repl:
    def __init__(self, executor: Executor, resume: bool = True, max_steps=None,
                 stdin=None, stdout=None):
        self.executor = executor
        self.resume = resume
        self.max_steps = max_steps
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.command_number = 0

    def _print(self, text="", end="\n"):
        self.stdout.write(text + end)
        self.stdout.flush()

    def handle(self, line: str) -> bool:
        """Process one line. Returns False when the session should end."""
        command = line.strip()
        self.command_number += 1
        if command == 'exit':
            return False
        if command == 'show':
            self._print("> " + self.executor.show())
        elif command == 'reset':
            self.executor.reset()
            self._print("Interpreter memory reset.")
        elif command:
            try:
                self.executor.feed(command, resume=self.resume, max_steps=self.max_steps)
            except InterpreterError as exc:
                self._print(f"\nError: {exc}")
            else:
                if self.executor.hit_step_limit:
                    self._print(f"\nStopped after {self.max_steps} steps.")
        return True

    def loop(self):
        mode = 'resume' if self.resume else 'reset-first'
        self._print("[REPL]: BrainRunner Brainfuck REPL activated.")
        logger.debug("repl started in %s mode", mode)
        while True:
            self._print()
            self._print(f"[{self.command_number}]: ", end="")
            line = self.stdin.readline()
            if not line:
                self._print()
                break
            if not self.handle(line):
                break
