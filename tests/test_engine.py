"""Tests for the answer grading engine."""

import pytest
from daxdaily.grading import Rule, RuleKind, evaluate, extract_keywords, PASS_THRESHOLD
from daxdaily.grading.engine import (
    FEEDBACK_TIERS,
    feedback_for,
    keyword_similarity,
    percentage,
    round_half_up,
)


DAY1_SOLUTION = "Total Sales = SUM(Sales[TotalAmount])\n\nTotal Orders = COUNTROWS(Sales)"
DAY1_RULES = [
    Rule.contains("SUM"),
    Rule.contains("Sales[TotalAmount]"),
    Rule.contains("COUNTROWS"),
    Rule.contains("Sales"),
]

EXCELLENT, GOOD, ON_TRACK, KEEP_GOING = (message for _, message in FEEDBACK_TIERS)


class TestKeywords:
    """Test solution tokenization."""

    def test_short_tokens_dropped(self):
        assert extract_keywords("a = SUM(x) VAR abc abcd") == ["SUM(x)", "abcd"]

    def test_separators(self):
        """#, /, CR and LF split tokens like whitespace does."""
        solution = "SUM(Sales[Amount])/COUNTROWS(Sales) # note\r\nabc"
        assert extract_keywords(solution) == ["SUM(Sales[Amount])", "COUNTROWS(Sales)", "note"]

    def test_duplicates_kept(self):
        assert extract_keywords("CALCULATE CALCULATE FILTER") == ["CALCULATE", "CALCULATE", "FILTER"]

    def test_empty_solution(self):
        assert extract_keywords("") == []
        assert extract_keywords("   \n\n  ") == []

    def test_duplicates_weigh_similarity(self):
        """A repeated keyword counts once per occurrence."""
        assert keyword_similarity("calculate", "CALCULATE CALCULATE FILTER") == 67
        assert keyword_similarity("filter", "CALCULATE CALCULATE FILTER") == 33


class TestRounding:

    def test_half_rounds_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(12.5) == 13
        assert round_half_up(56.8) == 57
        assert round_half_up(0.4) == 0

    def test_percentage(self):
        assert percentage(1, 8) == 13
        assert percentage(2, 3) == 67
        assert percentage(0, 0) == 0
        assert percentage(5, 5) == 100


class TestEvaluate:
    """Test the composite verdict."""

    def test_scenario_partial_answer(self):
        """One of two rules present, partial keyword overlap."""
        rules = [Rule.contains("SUM"), Rule.contains("COUNTROWS")]
        verdict = evaluate("Total Sales = SUM(Sales[TotalAmount])", DAY1_SOLUTION, rules)

        assert verdict.rule_score == 50
        assert verdict.similarity == 67
        assert verdict.score == 57
        assert not verdict.passed
        assert verdict.feedback == ON_TRACK
        assert verdict.improvements == ["Missing pattern: COUNTROWS"]
        assert [(d.pattern, d.passed) for d in verdict.rule_details] == [
            ("SUM", True),
            ("COUNTROWS", False),
        ]

    def test_empty_ruleset_caps_score(self):
        """No rules confirms nothing: only similarity counts, so at most 40."""
        verdict = evaluate(DAY1_SOLUTION, DAY1_SOLUTION, [])
        assert verdict.rule_score == 0
        assert verdict.similarity == 100
        assert verdict.score == 40
        assert not verdict.passed
        assert verdict.rule_details == []
        assert verdict.improvements == []

    def test_identical_submission_scores_full(self):
        verdict = evaluate(DAY1_SOLUTION, DAY1_SOLUTION, DAY1_RULES)
        assert verdict.rule_score == 100
        assert verdict.similarity == 100
        assert verdict.score == 100
        assert verdict.passed
        assert verdict.feedback == EXCELLENT
        assert verdict.improvements == []

    def test_unknown_kind_passes(self):
        """Rules of a kind this version does not know always pass."""
        rule = Rule.from_tag("regex", "x+")
        assert rule.kind is RuleKind.UNKNOWN

        verdict = evaluate("", "", [rule])
        assert verdict.rule_details[0].passed
        assert verdict.rule_score == 100
        assert verdict.score == 60
        assert verdict.improvements == []

    def test_case_insensitive_match(self):
        verdict = evaluate("total = sum(x)", "", [Rule.contains("SUM")])
        assert verdict.rule_details[0].passed

        verdict = evaluate("TOTAL = SUM(X)", "", [Rule.contains("sum")])
        assert verdict.rule_details[0].passed

    def test_empty_everything(self):
        verdict = evaluate("", "", [])
        assert verdict.score == 0
        assert not verdict.passed
        assert verdict.feedback == KEEP_GOING

    def test_empty_submission_lists_every_rule(self):
        verdict = evaluate("", DAY1_SOLUTION, DAY1_RULES)
        assert verdict.score == 0
        assert verdict.improvements == [f"Missing pattern: {r.value}" for r in DAY1_RULES]

    def test_empty_solution_contributes_nothing(self):
        verdict = evaluate(DAY1_SOLUTION, "", DAY1_RULES)
        assert verdict.similarity == 0
        assert verdict.score == 60

    def test_pass_at_threshold(self):
        rules = [Rule.contains("CALCULATE"), Rule.contains("ALLEXCEPT")]
        verdict = evaluate("CALCULATE(FILTER())", "CALCULATE FILTER", rules)
        assert verdict.rule_score == 50
        assert verdict.similarity == 100
        assert verdict.score == PASS_THRESHOLD
        assert verdict.passed
        assert verdict.feedback == GOOD

    def test_rule_order_preserved(self):
        rules = [Rule.contains("ZZZZ"), Rule.contains("SUM"), Rule.contains("YYYY")]
        verdict = evaluate("SUM", "", rules)
        assert [d.pattern for d in verdict.rule_details] == ["ZZZZ", "SUM", "YYYY"]
        assert verdict.improvements == ["Missing pattern: ZZZZ", "Missing pattern: YYYY"]

    def test_inputs_not_mutated(self):
        rules = list(DAY1_RULES)
        evaluate("sum", DAY1_SOLUTION, rules)
        assert rules == DAY1_RULES

    @pytest.mark.parametrize("submission,solution,rules", [
        ("", "", []),
        ("SUM", DAY1_SOLUTION, DAY1_RULES[:1]),
        ("garbage ### ///", DAY1_SOLUTION, DAY1_RULES),
        (DAY1_SOLUTION * 3, DAY1_SOLUTION, DAY1_RULES),
        ("x", "a/b#c\r\nd", [Rule.from_tag("", "")]),
        ("Total", DAY1_SOLUTION, [Rule.from_tag("numeric", "1.5")]),
    ])
    def test_invariants(self, submission, solution, rules):
        verdict = evaluate(submission, solution, rules)
        assert isinstance(verdict.score, int)
        assert 0 <= verdict.score <= 100
        assert verdict.passed == (verdict.score >= PASS_THRESHOLD)
        assert len(verdict.rule_details) == len(rules)
        failed = [d for d in verdict.rule_details if not d.passed]
        assert len(verdict.improvements) == len(failed)


class TestFeedback:

    @pytest.mark.parametrize("score,expected", [
        (100, EXCELLENT),
        (90, EXCELLENT),
        (89, GOOD),
        (70, GOOD),
        (69, ON_TRACK),
        (40, ON_TRACK),
        (39, KEEP_GOING),
        (0, KEEP_GOING),
    ])
    def test_bands(self, score, expected):
        assert feedback_for(score) == expected
