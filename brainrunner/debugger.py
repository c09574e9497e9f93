"""
Brainfuck Step-by-Step Debugger

Shows the step-by-step execution of a program, displaying the program with
the instruction pointer marked, the memory tape around the cell pointer,
and the output produced so far after each step.
"""

import sys
from typing import List, Optional

from .executor import Executor
from .ports import to_char


class Debugger(Executor):
    """Executor that narrates every step."""

    def __init__(self, input_port=None, output_port=None, trace=None,
                 show_memory_range=10, stream=None):
        super().__init__(input_port, output_port, trace)
        self.show_memory_range = show_memory_range
        self.stream = stream if stream is not None else sys.stdout
        self.output: List[int] = []

    def _print(self, text=""):
        print(text, file=self.stream)

    def debug_run(self, reset_first: bool = True, max_steps: Optional[int] = None) -> int:
        """Run like Executor.run, printing the state before the first step and after each one."""
        self._print("🐛 BRAINFUCK DEBUGGER")
        self._print(f"Program: {self.program.source}")
        self._print("=" * 80)
        self.prepare(reset_first)
        self._show_state("INITIAL")

        steps = 0
        while not self.halted:
            if max_steps is not None and steps >= max_steps:
                self.hit_step_limit = True
                self._print(f"\n⚠️ Execution stopped after {max_steps} steps (possible infinite loop)")
                break
            self.step()
            steps += 1

        self._print("\n🎯 FINAL RESULT:")
        self._print(f"Output: {self._output_text()} → {self.output}")
        return steps

    def reset_state(self):
        super().reset_state()
        self.output = []

    def step(self) -> bool:
        if not self.validated:
            self.prepare(reset_first=False)
        if self.halted:
            return False
        position = self.instruction_pointer
        symbol = self.program[position]
        before = self.tape.read()
        self._print(f"\nStep {self.step_count + 1}: Execute {symbol!r} at position {position}")
        running = super().step()
        self._print(f"  {self._describe(symbol, before)}")
        self._show_state(f"AFTER STEP {self.step_count}")
        return running

    def _dispatch(self, symbol: str):
        super()._dispatch(symbol)
        if symbol == '.':
            self.output.append(self.tape.read())

    def _describe(self, symbol: str, before: int) -> str:
        cursor = self.tape.cursor
        value = self.tape.read()
        if symbol == '>':
            return f"Move pointer right → position {cursor}"
        if symbol == '<':
            return f"Move pointer left → position {cursor}"
        if symbol == '+':
            return f"Increment cell[{cursor}] → {value}"
        if symbol == '-':
            return f"Decrement cell[{cursor}] → {value}"
        if symbol == '.':
            return f"Output cell[{cursor}] = {value} → {to_char(value)!r}"
        if symbol == ',':
            return f"Read input → cell[{cursor}] = {value}"
        if symbol == '[':
            if before == 0:
                return f"Loop start: cell[{cursor}] = 0, skip to position {self.instruction_pointer - 1}"
            return f"Loop start: cell[{cursor}] ≠ 0, enter loop"
        if symbol == ']':
            return f"Loop end: jump back to position {self.instruction_pointer}"
        return "Comment, ignored"

    def _output_text(self) -> str:
        return repr(''.join(to_char(v) for v in self.output))

    def _show_state(self, label: str):
        """Show current state of memory, pointer, and program."""
        self._print(f"\n{label}:")

        program_display = ""
        for i, cmd in enumerate(self.program):
            if i == self.instruction_pointer:
                program_display += f"[{cmd}]"
            else:
                program_display += cmd
        if self.halted:
            program_display += "[END]"
        self._print(f"Program:  {program_display}")

        start, values = self.tape.window(self.show_memory_range // 2)
        memory_vals = [f"{v:3d}" for v in values]
        memory_ptrs = [" ^ " if start + i == self.tape.cursor else "   " for i in range(len(values))]
        memory_addrs = [f"{start + i:3d}" for i in range(len(values))]
        self._print("Memory:   [" + "|".join(memory_vals) + "]")
        self._print("Pointer:   " + " ".join(memory_ptrs))
        self._print("Address:   " + " ".join(memory_addrs))

        if self.loop_stack:
            self._print(f"Loops:    {self.loop_stack}")
        if self.output:
            self._print(f"Output:   {self._output_text()} → {self.output}")
        else:
            self._print("Output:   (empty)")
