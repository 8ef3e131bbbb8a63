"""
The scorecard engine.

A Scorecard owns immutable configuration and a rule table; every call to
evaluate() runs the whole pipeline from scratch and returns a fresh
Evaluation, so one Scorecard can be shared freely.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Dict, List, Optional, Tuple

from .composition import Composition, analyze
from .config import DEFAULT_CONFIG, ScoringConfig
from .entropy import estimate_entropy_bits
from .grading import adjust_score, grade_for
from .patterns import PatternCounts, detect
from .rules import REQUIREMENTS_RULE, SCORED_RULES, Rule, RuleResult, StatusCode, requirements_count
from .state import PasswordState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Evaluation:
    length: int
    rules: Tuple[RuleResult, ...]
    raw_total: int
    adjusted_percentage: int
    grade: str
    entropy_bits: int
    composition: Composition
    patterns: PatternCounts

    def rule(self, name: str) -> RuleResult:
        for result in self.rules:
            if result.name == name:
                return result
        raise KeyError(name)

    def status(self, name: str) -> StatusCode:
        return self.rule(name).status

    def by_category(self) -> Dict[str, List[RuleResult]]:
        grouped: Dict[str, List[RuleResult]] = {}
        for result in self.rules:
            grouped.setdefault(result.category, []).append(result)
        return grouped

    def to_dict(self) -> dict:
        return {
            "length": self.length,
            "raw_total": self.raw_total,
            "adjusted_percentage": self.adjusted_percentage,
            "grade": self.grade,
            "entropy_bits": self.entropy_bits,
            "rules": [result.to_dict() for result in self.rules],
            "composition": asdict(self.composition),
            "patterns": asdict(self.patterns),
        }


def rule_counts(state: PasswordState, composition: Composition, patterns: PatternCounts) -> Dict[str, int]:
    """Raw count fed to each scored rule, keyed by rule name."""
    return {
        "character_count_normal": state.length,
        "character_count_recommended": state.length,
        "lowercase_count": composition.lowercase,
        "uppercase_count": composition.uppercase,
        "numeric_count": composition.numeric,
        "symbol_count": composition.symbol,
        "middle_numeric_count": composition.middle_numeric,
        "middle_symbol_count": composition.middle_symbol,
        "repeated_characters": state.length - len(set(state.text)),
        "consecutive_lowercase": composition.consecutive_lowercase,
        "consecutive_uppercase": composition.consecutive_uppercase,
        "consecutive_numbers": composition.consecutive_numeric,
        "consecutive_symbols": composition.consecutive_symbol,
        "sequential_letters": patterns.sequential_letters,
        "sequential_numbers": patterns.sequential_numbers,
        "sequential_symbols": patterns.sequential_symbols,
        "mirrored_sequence": patterns.mirrored_sequence,
        "repeated_sequence": patterns.repeated_sequence,
        "keyboard_patterns": patterns.keyboard_patterns,
        "year_patterns": patterns.year_patterns,
        "common_words": patterns.common_words,
    }


class Scorecard:
    # The rule table is fixed: rule_counts() and requirements_count() address
    # rules by name. Only the configuration is replaceable.
    rules: Tuple[Rule, ...] = SCORED_RULES
    requirements: Rule = REQUIREMENTS_RULE

    def __init__(self, config: Optional[ScoringConfig] = None) -> None:
        self.config = config or DEFAULT_CONFIG

    def reset(self) -> Evaluation:
        """The result for an empty password: every rule at its baseline."""
        return Evaluation(
            length=0,
            rules=tuple(rule.reset() for rule in self.rules + (self.requirements,)),
            raw_total=0,
            adjusted_percentage=0,
            grade="",
            entropy_bits=0,
            composition=Composition(),
            patterns=PatternCounts(),
        )

    def evaluate(self, password: str) -> Evaluation:
        if not password:
            return self.reset()

        state = PasswordState(password)
        composition = analyze(state, self.config)
        patterns = detect(state, composition, self.config)
        entropy_bits = estimate_entropy_bits(state, composition, self.config)

        counts = rule_counts(state, composition, patterns)
        results: Dict[str, RuleResult] = {}
        for rule in self.rules:
            results[rule.name] = rule.score(counts[rule.name])

        # Basic requirements look at every other status, so they go last
        results[self.requirements.name] = self.requirements.score(requirements_count(results))

        raw_total = sum(result.rating for result in results.values())
        adjusted = adjust_score(raw_total, self.config.adjustment_factor)
        grade = grade_for(adjusted)

        logger.debug(
            "Scored password of length %d: total=%d adjusted=%d%% grade=%s entropy=%d bits",
            state.length,
            raw_total,
            adjusted,
            grade,
            entropy_bits,
        )
        return Evaluation(
            length=state.length,
            rules=tuple(results.values()),
            raw_total=raw_total,
            adjusted_percentage=adjusted,
            grade=grade,
            entropy_bits=entropy_bits,
            composition=composition,
            patterns=patterns,
        )


_default_scorecard = Scorecard()


def evaluate(password: str) -> Evaluation:
    """Score `password` with the default configuration."""
    return _default_scorecard.evaluate(password)
