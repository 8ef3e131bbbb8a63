"""
Composition analysis: one left-to-right classification pass.

Each character lands in exactly one of lowercase, uppercase, numeric or symbol
(tested in that order). Alongside the per-class totals we count "consecutive"
hits, i.e. how often a class member sits right after the previous member of
the same class, and the interior occurrences of digits and symbols.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from re import Pattern
from typing import Dict, List, Tuple

from .config import ScoringConfig
from .state import PasswordState

logger = logging.getLogger(__name__)

CHARACTER_CLASSES = ("lowercase", "uppercase", "numeric", "symbol")


@dataclass(frozen=True)
class Composition:
    lowercase: int = 0
    uppercase: int = 0
    numeric: int = 0
    symbol: int = 0
    consecutive_lowercase: int = 0
    consecutive_uppercase: int = 0
    consecutive_numeric: int = 0
    consecutive_symbol: int = 0
    middle_numeric: int = 0
    middle_symbol: int = 0
    uncategorized: int = 0

    @property
    def letters(self) -> int:
        return self.lowercase + self.uppercase

    @property
    def consecutive_letters(self) -> int:
        return self.consecutive_lowercase + self.consecutive_uppercase


def _classifiers(config: ScoringConfig) -> List[Tuple[str, Pattern[str]]]:
    return [
        ("lowercase", re.compile(config.lowercase_pattern)),
        ("uppercase", re.compile(config.uppercase_pattern)),
        ("numeric", re.compile(config.digit_pattern)),
        ("symbol", re.compile(config.symbol_pattern)),
    ]


def classify(char: str, classifiers: List[Tuple[str, Pattern[str]]]) -> str | None:
    """Return the class name of a single character, or None if nothing claims it."""
    for name, regex in classifiers:
        if regex.fullmatch(char):
            return name
    return None


def _edge_run(text: str, regex: Pattern[str], reverse: bool = False) -> int:
    chars = reversed(text) if reverse else iter(text)
    run = 0
    for char in chars:
        if not regex.fullmatch(char):
            break
        run += 1
    return run


def middle_count(text: str, regex: Pattern[str]) -> int:
    """
    Count class members strictly inside the password, ignoring any leading or
    trailing run of that class.
    """
    if len(text) < 3:
        return 0
    start = max(_edge_run(text, regex), 1)
    stop = len(text) - max(_edge_run(text, regex, reverse=True), 1)
    return sum(1 for char in text[start:stop] if regex.fullmatch(char))


def analyze(state: PasswordState, config: ScoringConfig) -> Composition:
    classifiers = _classifiers(config)
    counts: Dict[str, int] = dict.fromkeys(CHARACTER_CLASSES, 0)
    consecutive: Dict[str, int] = dict.fromkeys(CHARACTER_CLASSES, 0)
    last_seen: Dict[str, int] = dict.fromkeys(CHARACTER_CLASSES, -1)
    uncategorized = 0

    for index, char in enumerate(state.text):
        name = classify(char, classifiers)
        if name is None:
            uncategorized += 1
            logger.warning("Character #%d is not catered for by any character class", index + 1)
            continue
        if last_seen[name] != -1 and last_seen[name] + 1 == index:
            consecutive[name] += 1
        last_seen[name] = index
        counts[name] += 1

    patterns = dict(classifiers)
    middle_numeric = 0
    middle_symbol = 0
    if counts["numeric"] and not state.is_all_digits:
        middle_numeric = middle_count(state.text, patterns["numeric"])
    if counts["symbol"] and not state.is_all_symbols:
        middle_symbol = middle_count(state.text, patterns["symbol"])

    return Composition(
        lowercase=counts["lowercase"],
        uppercase=counts["uppercase"],
        numeric=counts["numeric"],
        symbol=counts["symbol"],
        consecutive_lowercase=consecutive["lowercase"],
        consecutive_uppercase=consecutive["uppercase"],
        consecutive_numeric=consecutive["numeric"],
        consecutive_symbol=consecutive["symbol"],
        middle_numeric=middle_numeric,
        middle_symbol=middle_symbol,
        uncategorized=uncategorized,
    )
