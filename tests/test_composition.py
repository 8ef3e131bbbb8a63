"""Tests for the classification pass."""

import logging

import pytest

from password_scorecard.composition import analyze
from password_scorecard.config import DEFAULT_CONFIG, ScoringConfig
from password_scorecard.state import PasswordState


def composition_of(text, config=DEFAULT_CONFIG):
    return analyze(PasswordState(text), config)


class TestPasswordState:
    @pytest.mark.parametrize(
        "text, letters, digits, symbols",
        [
            ("abcXYZ", True, False, False),
            ("2024", False, True, False),
            ("!?#", False, False, True),
            ("ab12", False, False, False),
            ("", False, False, False),
        ],
    )
    def test_homogeneity_flags(self, text, letters, digits, symbols):
        state = PasswordState(text)
        assert (state.is_all_letters, state.is_all_digits, state.is_all_symbols) == (letters, digits, symbols)

    def test_length_counts_code_points(self):
        assert PasswordState("pässwörd").length == 8


def test_counts_and_consecutive_runs():
    c = composition_of("aBc12!x")
    assert (c.lowercase, c.uppercase, c.numeric, c.symbol) == (3, 1, 2, 1)
    assert c.consecutive_numeric == 1
    assert c.consecutive_lowercase == 0
    assert c.consecutive_uppercase == 0
    assert c.consecutive_symbol == 0


def test_consecutive_counts_adjacent_pairs():
    assert composition_of("abc").consecutive_lowercase == 2
    assert composition_of("ABxCD").consecutive_uppercase == 2


def test_non_ascii_is_a_symbol():
    c = composition_of("ü")
    assert c.symbol == 1
    assert c.uncategorized == 0


@pytest.mark.parametrize(
    "text, middle_numeric, middle_symbol",
    [
        ("aBc12!x", 2, 1),
        ("12ab34", 0, 0),
        ("a1b2", 1, 0),
        ("!a!", 0, 0),
        ("a!!b", 0, 2),
        ("1234", 0, 0),
        ("!!!", 0, 0),
        ("a1", 0, 0),
    ],
)
def test_middle_counts_ignore_leading_and_trailing_runs(text, middle_numeric, middle_symbol):
    c = composition_of(text)
    assert (c.middle_numeric, c.middle_symbol) == (middle_numeric, middle_symbol)


def test_uncategorized_characters_are_logged_not_raised(caplog):
    config = ScoringConfig(symbol_pattern=r"[!-/:-@\[-`{-~]")
    with caplog.at_level(logging.WARNING, logger="password_scorecard.composition"):
        c = composition_of("ab cd", config)
    assert c.uncategorized == 1
    assert c.lowercase == 4
    assert "Character #3" in caplog.text
    assert "ab cd" not in caplog.text
