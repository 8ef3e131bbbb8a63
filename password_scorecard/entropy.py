"""
Heuristic entropy estimate.

Informational only: the figure is reported next to the grade and never
feeds the score.
"""

from __future__ import annotations

import math

from .composition import Composition
from .config import ScoringConfig
from .state import PasswordState


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def alphabet_size(state: PasswordState, composition: Composition, config: ScoringConfig) -> int:
    """
    Rough pool size: the full ASCII alphabet for every class in use, plus one
    for each distinct character outside ASCII (there is no telling how large a
    non-western alphabet is, so each such character only grants itself).
    """
    size = sum(1 for char in set(state.text) if ord(char) > 127)
    if composition.lowercase:
        size += len(config.letter_sequence)
    if composition.uppercase:
        size += len(config.letter_sequence)
    if composition.numeric:
        size += len(config.digit_sequence)
    if composition.symbol:
        size += len(config.symbol_sequence)
    return size


def estimate_entropy_bits(state: PasswordState, composition: Composition, config: ScoringConfig) -> int:
    size = alphabet_size(state, composition, config)
    if size <= 0:
        return 0
    return state.length * round_half_up(math.log2(size))
