"""End-to-end tests for Scorecard.evaluate()."""

import logging
import threading

import pytest

from password_scorecard import RULES, Scorecard, ScoringConfig, StatusCode, evaluate

STRONG = "aB1!cD2@eF3#gH"


@pytest.fixture
def scorecard():
    return Scorecard()


class TestReset:
    def test_empty_password_is_neutral(self, scorecard):
        result = scorecard.evaluate("")
        assert result.raw_total == 0
        assert result.adjusted_percentage == 0
        assert result.grade == ""
        assert result.entropy_bits == 0
        assert all(r.count == 0 and r.rating == 0 for r in result.rules)

    def test_baseline_statuses(self, scorecard):
        result = scorecard.evaluate("")
        for r in result.rules:
            expected = StatusCode.PASS if r.kind.is_offence else StatusCode.FAIL
            assert r.status == expected, r.name

    def test_reset_after_a_real_password(self, scorecard):
        scorecard.evaluate(STRONG)
        assert scorecard.evaluate("") == scorecard.evaluate("")


def test_deterministic(scorecard):
    for password in ("", "a", "password", "Tr0ub4dor&3", STRONG, "ééü2019"):
        assert scorecard.evaluate(password) == scorecard.evaluate(password)


def test_results_cover_every_rule_in_order(scorecard):
    result = scorecard.evaluate("anything")
    assert [r.name for r in result.rules] == [rule.name for rule in RULES]
    assert result.rules[-1].name == "requirements"


def test_rule_table_is_not_a_constructor_argument():
    with pytest.raises(TypeError):
        Scorecard(rules=RULES[:-2])
    assert Scorecard(ScoringConfig()).rules + (Scorecard.requirements,) == RULES


def test_raw_total_is_the_sum_of_ratings(scorecard):
    for password in ("password", "Tr0ub4dor&3", STRONG, "x"):
        result = scorecard.evaluate(password)
        assert result.raw_total == sum(r.rating for r in result.rules)


def test_strong_password(scorecard):
    result = scorecard.evaluate(STRONG)
    assert result.rule("character_count_recommended").rating == 14
    assert result.rule("middle_numeric_count").count == 3
    assert result.rule("middle_symbol_count").count == 3
    assert all(r.rating == 0 for r in result.rules if r.kind.is_offence)
    assert result.rule("requirements").count == 8
    assert result.status("requirements") == StatusCode.EXCELLENT
    assert result.raw_total == 89
    assert result.adjusted_percentage == 80
    assert result.grade == "Very Strong"
    assert result.entropy_bits == 98


def test_common_password(scorecard):
    result = scorecard.evaluate("password")
    assert result.rule("character_count_normal").status == StatusCode.PASS
    assert result.rule("repeated_characters").status == StatusCode.WARNING
    assert result.rule("consecutive_lowercase").rating == -7
    assert result.rule("keyboard_patterns").count == 1
    assert result.rule("requirements").count == 0
    assert result.raw_total == -11
    assert result.adjusted_percentage == 0
    assert result.grade == "Very Weak"


def test_mixed_password(scorecard):
    result = scorecard.evaluate("Tr0ub4dor&3")
    c = result.composition
    assert c.uppercase > 0 and c.lowercase > 0 and c.numeric > 0 and c.symbol > 0
    assert (c.consecutive_uppercase, c.consecutive_numeric, c.consecutive_symbol) == (0, 0, 0)
    # "ub" and "dor" are adjacent lowercase letters
    assert c.consecutive_lowercase == 3
    assert result.rule("requirements").count == 4
    assert result.raw_total == 31
    assert result.adjusted_percentage == 28
    assert result.grade == "Weak"
    assert result.entropy_bits == 77


def test_length_reward_never_drops_past_minimum(scorecard):
    previous = None
    for n in range(2, 25):
        rating = scorecard.evaluate("a" * n).rule("lowercase_count").rating
        if previous is not None:
            assert rating >= previous
        previous = rating


def test_sequence_in_both_directions(scorecard):
    forward = scorecard.evaluate("xabcx").rule("sequential_letters").count
    both = scorecard.evaluate("xabcxcbax").rule("sequential_letters").count
    assert forward == 1
    assert both == 2


def test_dictionary_gate(scorecard):
    assert scorecard.evaluate("tiger").rule("common_words").count == 0
    assert scorecard.evaluate("tiger!").rule("common_words").count == 1


def test_dictionary_gate_on_exact_words():
    tigers = Scorecard(ScoringConfig(common_words=("tiger", "tigers")))
    assert tigers.evaluate("tiger").rule("common_words").count == 0
    assert tigers.evaluate("tigers").rule("common_words").count == 1


def test_year_penalty(scorecard):
    result = scorecard.evaluate("summer1999")
    assert result.rule("year_patterns").count == 1
    assert result.rule("year_patterns").rating == -20
    assert result.rule("common_words").count == 1


def test_custom_config(scorecard):
    relaxed = Scorecard(ScoringConfig(common_words=()))
    assert relaxed.evaluate("dragon").rule("common_words").count == 0
    assert scorecard.evaluate("dragon").rule("common_words").count == 1


def test_module_level_evaluate_uses_defaults(scorecard):
    assert evaluate(STRONG) == scorecard.evaluate(STRONG)


def test_invalid_config_rejected():
    with pytest.raises(ValueError):
        ScoringConfig(match_length=0)
    with pytest.raises(ValueError):
        ScoringConfig(adjustment_factor=0)


def test_shared_scorecard_across_threads(scorecard):
    passwords = ["password", STRONG, "Tr0ub4dor&3", "qwerty2020"] * 10
    expected = {p: scorecard.evaluate(p) for p in passwords}
    mismatches = []

    def work(password):
        if scorecard.evaluate(password) != expected[password]:
            mismatches.append(password)

    threads = [threading.Thread(target=work, args=(p,)) for p in passwords]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert mismatches == []


def test_debug_log_never_contains_the_password(scorecard, caplog):
    with caplog.at_level(logging.DEBUG, logger="password_scorecard.engine"):
        scorecard.evaluate("s3cretValue!")
    assert "Scored password of length 12" in caplog.text
    assert "s3cretValue!" not in caplog.text


def test_to_dict(scorecard):
    payload = scorecard.evaluate(STRONG).to_dict()
    assert payload["grade"] == "Very Strong"
    assert payload["rules"][-1]["name"] == "requirements"
    assert payload["rules"][-1]["status_name"] == "Excellent"
    assert payload["composition"]["symbol"] == 3
