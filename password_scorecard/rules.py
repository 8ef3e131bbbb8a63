"""
Rule table and the threshold formulas behind each kind of rule.

Rules come in four kinds plus the aggregate basic-requirements rule:

- constructive: rewards reaching a minimum (length, class counts, interior counts)
- minor offence: tolerated up to a maximum, penalised beyond it
- intermediate offence: any occurrence is penalised (sequences, mirrors, repeats)
- serious offence: same shape, heavier factors (keyboard, years, common words)

The rating functions are pure: (count, rule) -> (status, rating).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum, IntEnum
from typing import Callable, Dict, Mapping, Optional, Tuple


class StatusCode(IntEnum):
    FAIL = 0
    WARNING = 1
    PASS = 2
    EXCELLENT = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class RuleKind(str, Enum):
    CONSTRUCTIVE = "constructive"
    MINOR_OFFENCE = "minor_offence"
    INTERMEDIATE_OFFENCE = "intermediate_offence"
    SERIOUS_OFFENCE = "serious_offence"
    BASIC = "basic"

    @property
    def is_offence(self) -> bool:
        return self in (RuleKind.MINOR_OFFENCE, RuleKind.INTERMEDIATE_OFFENCE, RuleKind.SERIOUS_OFFENCE)


Rating = Tuple[StatusCode, int]


@dataclass(frozen=True)
class RuleResult:
    name: str
    title: str
    category: str
    kind: RuleKind
    count: int
    rating: int
    factor: int
    status: StatusCode
    minimum: Optional[int] = None
    maximum: Optional[int] = None

    def to_dict(self) -> dict:
        payload = asdict(self)
        payload["kind"] = self.kind.value
        payload["status"] = int(self.status)
        payload["status_name"] = self.status.label
        return payload


@dataclass(frozen=True)
class Rule:
    name: str
    title: str
    category: str
    kind: RuleKind
    factor: int
    rate: Callable[[int, "Rule"], Rating]
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    warning_break_point: Optional[int] = None

    @property
    def baseline(self) -> StatusCode:
        """Status shown before anything has been typed."""
        return StatusCode.PASS if self.kind.is_offence else StatusCode.FAIL

    def score(self, count: int) -> RuleResult:
        status, rating = self.rate(count, self)
        return self._result(count, rating, status)

    def reset(self) -> RuleResult:
        return self._result(0, 0, self.baseline)

    def _result(self, count: int, rating: int, status: StatusCode) -> RuleResult:
        return RuleResult(
            name=self.name,
            title=self.title,
            category=self.category,
            kind=self.kind,
            count=count,
            rating=rating,
            factor=self.factor,
            status=status,
            minimum=self.minimum,
            maximum=self.maximum,
        )


# ----------------------------
# Constructive rules
# ----------------------------
def _rate_length(count: int, rule: Rule, capped: bool) -> Rating:
    minimum, warn = rule.minimum, rule.warning_break_point
    if count < warn:
        return StatusCode.FAIL, (count - minimum) * rule.factor
    if count < minimum:
        return StatusCode.WARNING, (count - warn) * rule.factor
    if count == minimum:
        return StatusCode.PASS, warn
    # Normal length stops paying out at its minimum; recommended keeps going
    return StatusCode.EXCELLENT, minimum if capped else count * rule.factor


def rate_length_normal(count: int, rule: Rule) -> Rating:
    return _rate_length(count, rule, capped=True)


def rate_length_recommended(count: int, rule: Rule) -> Rating:
    return _rate_length(count, rule, capped=False)


def rate_class_count(count: int, rule: Rule) -> Rating:
    rating = count * rule.factor
    if count < rule.minimum:
        status = StatusCode.WARNING if count >= rule.minimum - 1 else StatusCode.FAIL
        return status, -rating
    if count == rule.minimum:
        return StatusCode.PASS, rating
    return StatusCode.EXCELLENT, rating


def rate_middle_count(count: int, rule: Rule) -> Rating:
    if count < rule.minimum:
        return StatusCode.FAIL, (count - rule.minimum) * rule.factor
    if count == rule.minimum:
        return StatusCode.PASS, 0
    return StatusCode.EXCELLENT, (count - rule.minimum) * rule.factor


# ----------------------------
# Offences (factors are negative)
# ----------------------------
def rate_minor_offence(count: int, rule: Rule) -> Rating:
    if count < rule.maximum:
        return StatusCode.PASS, 0
    if count == rule.maximum:
        return StatusCode.WARNING, 0
    return StatusCode.FAIL, count * rule.factor


def rate_offence(count: int, rule: Rule) -> Rating:
    if count == 0:
        return StatusCode.PASS, 0
    return StatusCode.FAIL, count * rule.factor


# ----------------------------
# Basic requirements
# ----------------------------
def rate_requirements(count: int, rule: Rule) -> Rating:
    rating = count * rule.factor
    if count > rule.minimum:
        return StatusCode.EXCELLENT, rating
    if count == rule.minimum:
        return StatusCode.PASS, rating
    if count >= rule.warning_break_point:
        return StatusCode.WARNING, rating
    return StatusCode.FAIL, rating


REQUIRED_EXCELLENT = ("character_count_normal", "lowercase_count", "uppercase_count", "numeric_count", "symbol_count")
REQUIRED_PASSING = ("character_count_recommended", "middle_numeric_count", "middle_symbol_count")
FORBIDDEN = (
    "repeated_characters",
    "sequential_letters",
    "sequential_numbers",
    "sequential_symbols",
    "mirrored_sequence",
    "repeated_sequence",
    "year_patterns",
    "keyboard_patterns",
    "common_words",
)


def requirements_count(results: Mapping[str, RuleResult]) -> int:
    """How many basic requirements the already-scored rules satisfy, floored at 0."""
    count = sum(1 for name in REQUIRED_EXCELLENT if results[name].status == StatusCode.EXCELLENT)
    count += sum(1 for name in REQUIRED_PASSING if results[name].status > StatusCode.WARNING)
    count -= sum(1 for name in FORBIDDEN if results[name].status <= StatusCode.WARNING)
    return max(count, 0)


# ----------------------------
# Default rule table, in evaluation order
# ----------------------------
def _constructive(name, title, factor, minimum, rate, warning_break_point=None) -> Rule:
    return Rule(
        name=name,
        title=title,
        category="merit",
        kind=RuleKind.CONSTRUCTIVE,
        factor=factor,
        rate=rate,
        minimum=minimum,
        warning_break_point=minimum - 1 if warning_break_point is None else warning_break_point,
    )


def _offence(name, title, category, kind, factor, maximum, rate) -> Rule:
    return Rule(name=name, title=title, category=category, kind=kind, factor=factor, rate=rate, maximum=maximum)


def _minor(name, title, factor, maximum=2) -> Rule:
    return _offence(name, title, "infraction", RuleKind.MINOR_OFFENCE, factor, maximum, rate_minor_offence)


def _intermediate(name, title, factor) -> Rule:
    return _offence(name, title, "misdemeanour", RuleKind.INTERMEDIATE_OFFENCE, factor, 0, rate_offence)


def _serious(name, title, factor) -> Rule:
    return _offence(name, title, "felony", RuleKind.SERIOUS_OFFENCE, factor, 0, rate_offence)


SCORED_RULES: Tuple[Rule, ...] = (
    _constructive("character_count_normal", "Number of characters", 1, 8, rate_length_normal, warning_break_point=6),
    _constructive("character_count_recommended", "Recommended length", 1, 12, rate_length_recommended, warning_break_point=8),
    _constructive("lowercase_count", "Lowercase letters", 1, 2, rate_class_count),
    _constructive("uppercase_count", "Uppercase letters", 2, 2, rate_class_count),
    _constructive("numeric_count", "Numbers", 2, 2, rate_class_count),
    _constructive("symbol_count", "Symbols", 3, 2, rate_class_count),
    _constructive("middle_numeric_count", "Numbers in the middle", 4, 1, rate_middle_count),
    _constructive("middle_symbol_count", "Symbols in the middle", 4, 1, rate_middle_count),
    _minor("repeated_characters", "Repeated characters", -2, maximum=1),
    _minor("consecutive_lowercase", "Consecutive lowercase letters", -1),
    _minor("consecutive_uppercase", "Consecutive uppercase letters", -1),
    _minor("consecutive_numbers", "Consecutive numbers", -3),
    _minor("consecutive_symbols", "Consecutive symbols", -3),
    _intermediate("sequential_letters", "Sequential letters", -4),
    _intermediate("sequential_numbers", "Sequential numbers", -5),
    _intermediate("sequential_symbols", "Sequential symbols", -5),
    _intermediate("mirrored_sequence", "Mirrored sequences", -6),
    _intermediate("repeated_sequence", "Repeated sequences", -6),
    _serious("keyboard_patterns", "Keyboard patterns", -10),
    _serious("year_patterns", "Years", -20),
    _serious("common_words", "Common words", -20),
)

REQUIREMENTS_RULE = Rule(
    name="requirements",
    title="Basic requirements",
    category="basic",
    kind=RuleKind.BASIC,
    factor=3,
    rate=rate_requirements,
    minimum=6,
    warning_break_point=5,
)

RULES: Tuple[Rule, ...] = SCORED_RULES + (REQUIREMENTS_RULE,)
RULES_BY_NAME: Dict[str, Rule] = {rule.name: rule for rule in RULES}
