"""
Brainfuck Executor

Runs a program one symbol at a time against a growable tape:
    >   Move the cell pointer right (the tape grows as needed)
    <   Move the cell pointer left (moving below cell 0 is fatal)
    +   Increment the cell at the pointer
    -   Decrement the cell at the pointer
    .   Send the cell at the pointer to the output port
    ,   Read one symbol from the input port into the cell at the pointer
    [   Skip past the matching ] if the cell at the pointer is 0
    ]   Jump back to the matching [

All other characters are treated as comments and ignored.

The program can be extended while the executor keeps its tape and loop
stack, so an interactive session can add a line and resume as if it had
been one long program. Any error aborts the run and wipes the whole
interpreter, program included.
"""

import logging
from typing import List, Optional

from .errors import CursorUnderflowError, EndOfInputError, InterpreterError
from .ports import BufferedInput, BufferedOutput, InputPort, OutputPort
from .program import Program
from .tape import Tape

logger = logging.getLogger(__name__)


class Executor:
    def __init__(self, input_port: Optional[InputPort] = None,
                 output_port: Optional[OutputPort] = None, trace=None):
        self.input_port = input_port if input_port is not None else BufferedInput()
        self.output_port = output_port if output_port is not None else BufferedOutput()
        self.trace = trace
        self.program = Program()
        self.tape = Tape()
        self.instruction_pointer = 0
        self.loop_stack: List[int] = []
        self.step_count = 0
        self.hit_step_limit = False
        self.validated = False

    # Program buffer

    def set_instructions(self, source: str):
        self.program.replace(source)
        self.validated = False

    def add_instructions(self, source: str):
        self.program.append(source)
        self.validated = False

    # State

    def reset_state(self):
        """Clear the tape, instruction pointer and loop stack; keep the program."""
        self.tape.reset()
        self.instruction_pointer = 0
        self.loop_stack = []
        self.step_count = 0
        self.hit_step_limit = False

    def reset(self):
        """Wipe everything, including the pending program."""
        self.reset_state()
        self.program.clear()
        self.validated = False
        logger.info("interpreter reset")

    @property
    def halted(self) -> bool:
        return self.instruction_pointer >= len(self.program)

    def show(self) -> str:
        return f"Cell #: {self.tape.cursor}; Cell value: {self.tape.read()};"

    # Execution

    def prepare(self, reset_first: bool = True):
        """Validate the whole program and, in reset-first mode, clear the state.

        A bracket mismatch resets the interpreter and is re-raised.
        """
        try:
            self.program.validate()
        except InterpreterError as exc:
            self._abort(exc)
            raise
        self.validated = True
        if reset_first:
            self.reset_state()
        self.hit_step_limit = False

    def run(self, reset_first: bool = True, max_steps: Optional[int] = None) -> int:
        """Execute until the program ends or max_steps dispatches have been made.

        Returns the number of symbols dispatched by this call. Stopping at
        the step limit is not an error: hit_step_limit is set and a later
        run(reset_first=False) carries on from the same spot.
        """
        self.prepare(reset_first)
        logger.debug("run start: ip=%d len=%d reset_first=%s",
                     self.instruction_pointer, len(self.program), reset_first)
        steps = 0
        while not self.halted:
            if max_steps is not None and steps >= max_steps:
                self.hit_step_limit = True
                logger.debug("step limit %d reached at ip=%d", max_steps, self.instruction_pointer)
                break
            self.step()
            steps += 1
        logger.debug("run stop: ip=%d steps=%d", self.instruction_pointer, steps)
        return steps

    def feed(self, source: str, resume: bool = True, max_steps: Optional[int] = None) -> int:
        """Run a new chunk of source the way an interactive session does.

        In resume mode the chunk is appended and execution continues with
        the tape and loop stack intact. Otherwise the interpreter is wiped
        and the chunk runs on its own from a fresh tape.
        """
        if resume:
            self.add_instructions(source)
        else:
            self.reset()
            self.set_instructions(source)
        return self.run(reset_first=not resume, max_steps=max_steps)

    def step(self) -> bool:
        """Dispatch the symbol at the instruction pointer.

        Returns False once the program has run off its end. A program that
        has not been validated since it last changed is validated first.
        """
        if not self.validated:
            self.prepare(reset_first=False)
        if self.halted:
            return False
        position = self.instruction_pointer
        symbol = self.program[position]
        try:
            self._dispatch(symbol)
        except InterpreterError as exc:
            self._abort(exc)
            raise
        self.instruction_pointer += 1
        self.step_count += 1
        if self.trace is not None:
            self.trace.record(symbol, self.tape.cursor)
        return not self.halted

    def _dispatch(self, symbol: str):
        tape = self.tape
        if symbol == '+':
            tape.increment()
        elif symbol == '-':
            tape.decrement()
        elif symbol == '>':
            tape.advance()
        elif symbol == '<':
            try:
                tape.retreat()
            except CursorUnderflowError:
                raise CursorUnderflowError(self.instruction_pointer) from None
        elif symbol == '.':
            self.output_port.emit(tape.read())
        elif symbol == ',':
            try:
                tape.write(ord(self.input_port.next_symbol()))
            except EndOfInputError:
                raise EndOfInputError(self.instruction_pointer) from None
        elif symbol == '[':
            if tape.read() != 0:
                self.loop_stack.append(self.instruction_pointer)
            else:
                self.instruction_pointer = self.program.matching_close(self.instruction_pointer)
        elif symbol == ']':
            # Land on the '[' once step() adds one, so its condition is tested again.
            self.instruction_pointer = self.loop_stack.pop() - 1

    def _abort(self, exc: InterpreterError):
        logger.warning("run aborted: %s", exc)
        self.reset()
