"""Candidate password and the cheap primitives derived from it."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

_ONLY_LETTERS = re.compile(r"[a-zA-Z]+")
_ONLY_DIGITS = re.compile(r"[0-9]+")
_ONLY_SYMBOLS = re.compile(r"[^a-zA-Z0-9]+")


@dataclass(frozen=True)
class PasswordState:
    """
    One candidate password.

    The is_all_* flags are mutually exclusive and all False for an empty
    string. They only gate work that carries no signal for homogeneous input.
    """

    text: str
    length: int = field(init=False)
    is_all_letters: bool = field(init=False)
    is_all_digits: bool = field(init=False)
    is_all_symbols: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", len(self.text))
        object.__setattr__(self, "is_all_letters", bool(_ONLY_LETTERS.fullmatch(self.text)))
        object.__setattr__(self, "is_all_digits", bool(_ONLY_DIGITS.fullmatch(self.text)))
        object.__setattr__(self, "is_all_symbols", bool(_ONLY_SYMBOLS.fullmatch(self.text)))

    @property
    def lowered(self) -> str:
        return self.text.lower()
