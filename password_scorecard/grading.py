"""Turning the raw total into a percentage and a grade."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .entropy import round_half_up


@dataclass(frozen=True)
class Grade:
    letter: str
    name: str
    minimum: int
    maximum: int

    def covers(self, percentage: int) -> bool:
        return self.minimum <= percentage <= self.maximum


# Scanned in order, first match wins
GRADES: Tuple[Grade, ...] = (
    Grade("A", "Very Strong", 80, 100),
    Grade("B", "Strong", 60, 79),
    Grade("C", "Good", 40, 59),
    Grade("D", "Weak", 20, 39),
    Grade("E", "Very Weak", 0, 19),
)


def adjust_score(total: int, factor: float) -> int:
    """Scale the raw total into a 0-100 percentage."""
    adjusted = total * factor
    if adjusted < 0:
        return 0
    if adjusted > 100:
        return 100
    return round_half_up(adjusted)


def grade_for(percentage: int) -> str:
    for grade in GRADES:
        if grade.covers(percentage):
            return grade.name
    return ""


def exit_code_from_grade(grade: str) -> int:
    # Useful for automation / CI checks
    mapping = {
        "Very Strong": 0,
        "Strong": 0,
        "Good": 1,
        "Weak": 2,
        "Very Weak": 3,
    }
    return mapping.get(grade, 3)
