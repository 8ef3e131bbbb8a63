"""Weighted-rule password scorecard."""

from .config import DEFAULT_CONFIG, ScoringConfig, load_word_list
from .engine import Evaluation, Scorecard, evaluate
from .grading import GRADES, grade_for
from .rules import RULES, RuleKind, RuleResult, StatusCode

__all__ = [
    "DEFAULT_CONFIG",
    "Evaluation",
    "GRADES",
    "RULES",
    "RuleKind",
    "RuleResult",
    "Scorecard",
    "ScoringConfig",
    "StatusCode",
    "evaluate",
    "grade_for",
    "load_word_list",
]

__version__ = "1.2.0"
