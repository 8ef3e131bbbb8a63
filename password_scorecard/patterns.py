"""
Pattern detectors.

All of them count rather than answer yes/no: every offending window adds to
the rule's count, which is what the offence rules multiply by their factor.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Set, Tuple

from .composition import Composition
from .config import ScoringConfig
from .state import PasswordState


@dataclass(frozen=True)
class PatternCounts:
    sequential_letters: int = 0
    sequential_numbers: int = 0
    sequential_symbols: int = 0
    mirrored_sequence: int = 0
    repeated_sequence: int = 0
    keyboard_patterns: int = 0
    year_patterns: int = 0
    common_words: int = 0


def windows(corpus: str, size: int) -> Iterator[str]:
    for i in range(len(corpus) - size + 1):
        yield corpus[i : i + size]


def count_window_hits(haystack: str, corpus: str, size: int) -> int:
    """
    Slide a window over `corpus`; each window found in `haystack` counts once
    and its reversal, if also found, counts once more.
    """
    count = 0
    for forward in windows(corpus, size):
        if forward in haystack:
            count += 1
        if forward[::-1] in haystack:
            count += 1
    return count


def rotated(sequence: str, size: int) -> str:
    """Extend an ordered alphabet so windows wrap around (yza, zab, ...)."""
    if not sequence:
        return sequence
    return sequence + sequence[: size - 1]


def count_sequences(state: PasswordState, sequence: str, size: int) -> int:
    if state.length < size or len(sequence) < size:
        return 0
    return count_window_hits(state.lowered, rotated(sequence, size), size)


def sequential_counts(
    state: PasswordState, composition: Composition, config: ScoringConfig
) -> Tuple[int, int, int]:
    """Sequential letters, numbers and symbols, in that order."""
    size = config.match_length
    letters = numbers = symbols = 0
    if state.length < size:
        return letters, numbers, symbols

    # A homogeneous password can only hold sequences of its own class
    scan_letters = not (state.is_all_digits or state.is_all_symbols)
    scan_numbers = not (state.is_all_letters or state.is_all_symbols)
    scan_symbols = not (state.is_all_letters or state.is_all_digits)

    if scan_letters and composition.consecutive_letters and composition.letters >= size:
        letters = count_sequences(state, config.letter_sequence, size)
    if scan_numbers and composition.consecutive_numeric and composition.numeric >= size:
        numbers = count_sequences(state, config.digit_sequence, size)
    if scan_symbols and composition.consecutive_symbol and composition.symbol >= size:
        symbols = count_sequences(state, config.symbol_sequence, size)
    return letters, numbers, symbols


def mirrored_and_repeated(state: PasswordState, size: int) -> Tuple[int, int]:
    """
    Scan the password against itself.

    Returns (mirrored, repeated). A repeat is counted for every window that
    shows up again further on. A mirror is counted once per forward/reverse
    pair; both spellings are remembered so the pair is not counted again.
    """
    mirrored = repeated = 0
    if state.length < size:
        return mirrored, repeated

    text = state.text
    seen_mirrors: Set[str] = set()
    for start, forward in enumerate(windows(text, size)):
        search_from = start + size
        reverse = forward[::-1]
        if text.find(forward, search_from) != -1:
            repeated += 1
        if forward in seen_mirrors or reverse in seen_mirrors:
            continue
        if text.find(reverse, search_from) != -1:
            seen_mirrors.update((forward, reverse))
            mirrored += 1
    return mirrored, repeated


def keyboard_count(state: PasswordState, config: ScoringConfig) -> int:
    size = config.match_length
    if state.length < size:
        return 0
    return count_window_hits(state.lowered, config.keyboard_corpus, size)


def year_count(state: PasswordState, config: ScoringConfig) -> int:
    if state.length < config.year_min_length:
        return 0
    return sum(1 for _ in config.year_regex.finditer(state.text))


def common_word_count(state: PasswordState, config: ScoringConfig) -> int:
    if state.length < config.word_min_length or config.word_regex is None:
        return 0
    return sum(1 for _ in config.word_regex.finditer(state.text))


def detect(state: PasswordState, composition: Composition, config: ScoringConfig) -> PatternCounts:
    letters, numbers, symbols = sequential_counts(state, composition, config)
    mirrored, repeated = mirrored_and_repeated(state, config.match_length)
    return PatternCounts(
        sequential_letters=letters,
        sequential_numbers=numbers,
        sequential_symbols=symbols,
        mirrored_sequence=mirrored,
        repeated_sequence=repeated,
        keyboard_patterns=keyboard_count(state, config),
        year_patterns=year_count(state, config),
        common_words=common_word_count(state, config),
    )
