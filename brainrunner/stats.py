"""
Execution statistics

ExecutionTrace is attached to an Executor and records every dispatched
symbol together with where the cell pointer ended up. The summary gives a
rough picture of what a program spent its time on.
"""

from dataclasses import dataclass, field
from typing import Dict, List

import numpy as np

from .program import COMMANDS


@dataclass
class ExecutionTrace:
    symbols: List[str] = field(default_factory=list)
    cursors: List[int] = field(default_factory=list)

    def record(self, symbol: str, cursor: int):
        self.symbols.append(symbol)
        self.cursors.append(cursor)

    def clear(self):
        self.symbols.clear()
        self.cursors.clear()

    @property
    def steps(self) -> int:
        return len(self.symbols)

    def symbol_counts(self) -> Dict[str, int]:
        """Dispatch count per command; comment characters are grouped under 'other'."""
        counts = {c: 0 for c in COMMANDS}
        counts['other'] = 0
        if not self.symbols:
            return counts
        values, freq = np.unique(np.array(self.symbols), return_counts=True)
        for symbol, n in zip(values, freq):
            key = str(symbol) if symbol in counts else 'other'
            counts[key] += int(n)
        return counts

    def summary(self) -> Dict[str, object]:
        if not self.cursors:
            return {
                'steps': 0,
                'symbols': self.symbol_counts(),
                'max_cursor': 0,
                'mean_cursor': 0.0,
                'hottest_cell': 0,
            }
        cursors = np.array(self.cursors)
        visits = np.bincount(cursors)
        return {
            'steps': self.steps,
            'symbols': self.symbol_counts(),
            'max_cursor': int(cursors.max()),
            'mean_cursor': float(np.mean(cursors)),
            'hottest_cell': int(np.argmax(visits)),
        }

    def format_summary(self) -> str:
        s = self.summary()
        used = ' '.join(f"{k}:{v}" for k, v in s['symbols'].items() if v)
        return (f"Steps: {s['steps']}\n"
                f"Symbols: {used or '(none)'}\n"
                f"Max cell: {s['max_cursor']}  Mean cell: {s['mean_cursor']:.1f}  "
                f"Hottest cell: {s['hottest_cell']}")
