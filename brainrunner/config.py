"""
Runtime configuration

Settings come from environment variables, optionally merged from a .env
file first (variables already set in the environment win):

    BF_STEP_LIMIT   max dispatches per run, 0 for no limit (default 0)
    BF_EOF          'error', or the character code ',' reads at end of input
    BF_REPL_MODE    'resume' or 'reset' (default 'resume')
    BF_LOG_LEVEL    logging level name (default WARNING)
"""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

REPL_MODES = ('resume', 'reset')


def parse_eof(value) -> Optional[int]:
    """'error' (or None) means raise at end of input; anything else is a character code."""
    if value is None or str(value).strip().lower() == 'error':
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"BF_EOF must be 'error' or an integer, got {value!r}") from None


@dataclass
class Settings:
    """Configuration for a BrainRunner session."""
    step_limit: int = 0
    eof_value: Optional[int] = None
    repl_mode: str = 'resume'
    log_level: str = 'WARNING'

    def __post_init__(self):
        if self.step_limit < 0:
            raise ValueError("step_limit must be >= 0")
        if self.eof_value is not None and not 0 <= self.eof_value < 0x110000:
            raise ValueError("eof_value must be a valid character code")
        if self.repl_mode not in REPL_MODES:
            raise ValueError(f"repl_mode must be one of {REPL_MODES}, got {self.repl_mode!r}")
        self.log_level = self.log_level.upper()
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown log level {self.log_level!r}")

    @property
    def max_steps(self) -> Optional[int]:
        return self.step_limit or None

    @property
    def resume(self) -> bool:
        return self.repl_mode == 'resume'


def load_settings(env_file: Optional[str] = None) -> Settings:
    load_dotenv(env_file)
    try:
        step_limit = int(os.environ.get("BF_STEP_LIMIT", "0"))
    except ValueError:
        raise ValueError("BF_STEP_LIMIT must be an integer") from None
    return Settings(
        step_limit=step_limit,
        eof_value=parse_eof(os.environ.get("BF_EOF")),
        repl_mode=os.environ.get("BF_REPL_MODE", "resume").strip().lower(),
        log_level=os.environ.get("BF_LOG_LEVEL", "WARNING"),
    )


def configure_logging(level: str = 'WARNING'):
    """Send log records to stderr; program output stays on stdout."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("brainrunner")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
