"""
BrainRunner command line

    brainrunner -h             Display help menu.
    brainrunner -r             Start the BrainRunner Brainfuck REPL.
    brainrunner -f filename    Open and execute the Brainfuck code in the file.
"""

import argparse
import dataclasses
import logging
import sys
from typing import Optional, Sequence

from .config import configure_logging, load_settings, parse_eof
from .debugger import Debugger
from .errors import InterpreterError
from .executor import Executor
from .ports import ConsoleInput, ConsoleOutput
from .repl import Repl
from .stats import ExecutionTrace

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="brainrunner",
                                     description="Brainfuck interpreter and REPL")
    action = parser.add_mutually_exclusive_group()
    action.add_argument("-f", "--file", help="Open and execute the Brainfuck code in the specified file.")
    action.add_argument("-r", "--repl", action="store_true", help="Start the BrainRunner Brainfuck REPL.")
    parser.add_argument("--reset-each", action="store_true",
                        help="REPL: run every line on a fresh interpreter instead of resuming.")
    parser.add_argument("--debug", action="store_true", help="Print machine state after every step.")
    parser.add_argument("--stats", action="store_true", help="Print execution statistics when done.")
    parser.add_argument("--step-limit", type=int, help="Stop a run after this many steps (0 = no limit).")
    parser.add_argument("--eof", help="'error' or the character code ',' reads at end of input.")
    parser.add_argument("--log-level", help="Logging level (DEBUG, INFO, WARNING, ...).")
    parser.add_argument("--env-file", help="Read settings from this .env file.")
    return parser


def read_source(path: str) -> Optional[str]:
    """Read a program file, joining its lines. Returns None if it does not exist."""
    try:
        with open(path, 'r') as f:
            return ''.join(line.rstrip('\r\n') for line in f)
    except FileNotFoundError:
        return None


def run_file(executor: Executor, path: str, max_steps=None) -> int:
    code = read_source(path)
    if code is None:
        print("Error: the specified file does not exist.")
        return 1
    executor.set_instructions(code)
    try:
        if isinstance(executor, Debugger):
            executor.debug_run(max_steps=max_steps)
        else:
            executor.run(max_steps=max_steps)
    except InterpreterError as exc:
        print(f"\nError: {exc}")
        return 1
    if executor.hit_step_limit:
        print(f"\nStopped after {max_steps} steps.")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.file and not args.repl:
        parser.print_help()
        return 0

    try:
        settings = load_settings(args.env_file)
        overrides = {}
        if args.step_limit is not None:
            overrides["step_limit"] = args.step_limit
        if args.eof is not None:
            overrides["eof_value"] = parse_eof(args.eof)
        if args.log_level is not None:
            overrides["log_level"] = args.log_level
        if args.reset_each:
            overrides["repl_mode"] = "reset"
        settings = dataclasses.replace(settings, **overrides)
    except ValueError as exc:
        parser.error(str(exc))

    configure_logging(settings.log_level)
    logger.debug("settings: %s", settings)

    trace = ExecutionTrace() if args.stats else None
    executor_cls = Debugger if args.debug else Executor
    executor = executor_cls(ConsoleInput(eof_value=settings.eof_value), ConsoleOutput(), trace=trace)

    if args.file:
        status = run_file(executor, args.file, settings.max_steps)
    else:
        Repl(executor, resume=settings.resume, max_steps=settings.max_steps).loop()
        status = 0

    if trace is not None:
        print()
        print(trace.format_summary())
    return status


if __name__ == "__main__":
    sys.exit(main())
