"""
Sweeper Detection Engine Tests
"""

import pytest

from sweeper.config.scoring import calculate_risk_level
from sweeper.models.classification import RiskLevel
from sweeper.models.rules import CustomRuleSet


SAMPLE_TEXTS = [
    "",
    "hello, how are you?",
    "hi! wa.me/12345",
    "sent a link",
    "crypto investment, guaranteed profit",
    "bit.ly/abc",
    "my new video youtube.com/watch",
    "URGENT: act now, last chance, free money, telegram, whatsapp, onlyfans.com",
    "this is a 500x opportunity",
]


class TestClassify:
    """Scoring over the shipped tables."""

    def test_empty_text_is_safe(self, engine):
        for text in ("", None):
            result = engine.classify(text)
            assert result.score == 0
            assert result.risk_level == RiskLevel.SAFE
            assert result.is_hidden_link is False
            assert result.url_match.matched_patterns == []
            assert result.keyword_match.matched_keywords == {}

    def test_whatsapp_shortlink_is_high(self, engine):
        result = engine.classify("hi! wa.me/12345")
        assert result.score == 20
        assert result.risk_level == RiskLevel.HIGH
        assert result.url_match.risk_level == RiskLevel.HIGH

    def test_high_url_with_safe_domain_is_discounted(self, engine):
        # The discount applies after the URL bonus, so the overall tier drops
        result = engine.classify("hi! wa.me/12345 youtube.com")
        assert result.url_match.risk_level == RiskLevel.HIGH
        assert result.url_match.has_safe_url is True
        assert result.score == 10
        assert result.risk_level == RiskLevel.MEDIUM
        assert engine.should_auto_flag("hi! wa.me/12345 youtube.com") is False

    def test_hidden_link(self, engine):
        result = engine.classify("sent a link")
        assert result.is_hidden_link is True
        assert result.score == 10
        assert result.risk_level == RiskLevel.MEDIUM

    def test_hidden_link_exact_match_only(self, engine):
        assert engine.classify("  Sent A Link  ").is_hidden_link is True
        result = engine.classify("I sent a link yesterday")
        assert result.is_hidden_link is False
        assert result.score == 0

    def test_medium_url(self, engine):
        result = engine.classify("bit.ly/abc")
        assert result.score == 10
        assert result.risk_level == RiskLevel.MEDIUM

    def test_regex_rule_only(self, engine):
        result = engine.classify("this is a 500x opportunity")
        hit = result.keyword_match.matched_keywords["regex:multiplier claim"]
        assert hit.weight == 5
        assert hit.count == 1
        assert result.score == 5
        assert result.risk_level == RiskLevel.LOW

    def test_safe_domain_discount_is_flat(self, engine):
        result = engine.classify("crypto crypto crypto crypto bit.ly/abc youtube.com and youtube.com")
        assert result.keyword_match.score == 12
        assert result.url_match.risk_level == RiskLevel.LOW
        assert result.url_match.has_safe_url is True
        assert result.score == 2
        assert result.risk_level == RiskLevel.SAFE

    def test_score_clamped_at_zero(self, engine):
        result = engine.classify("my new video youtube.com/watch")
        assert result.score == 0
        assert result.risk_level == RiskLevel.SAFE

    def test_score_clamped_at_thirty(self, engine):
        result = engine.classify(
            "URGENT: act now, last chance, free money, telegram, whatsapp, onlyfans.com"
        )
        assert result.keyword_match.score > 10
        assert result.score == 30
        assert result.risk_level == RiskLevel.HIGH

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_score_bounds_and_tier(self, engine, text):
        result = engine.classify(text)
        assert 0 <= result.score <= 30
        assert result.risk_level == calculate_risk_level(result.score)

    @pytest.mark.parametrize("text", SAMPLE_TEXTS)
    def test_idempotent(self, engine, text):
        assert engine.classify(text).model_dump() == engine.classify(text).model_dump()

    def test_classify_does_not_annotate_model_fields(self, engine):
        result = engine.classify("crypto investment, guaranteed profit")
        assert result.ai_checked is False
        assert result.ai_skipped is None
        assert result.ai_verdict is None


class TestAutoFlag:

    def test_high_is_flagged(self, engine):
        assert engine.should_auto_flag("hi! wa.me/12345") is True

    def test_medium_is_not_flagged(self, engine):
        assert engine.should_auto_flag("sent a link") is False
        assert engine.should_auto_flag("bit.ly/abc") is False

    def test_module_level_helpers(self):
        from sweeper.services.detection import classify, should_auto_flag
        assert classify("hi! wa.me/12345").risk_level == RiskLevel.HIGH
        assert should_auto_flag("hello there") is False


class TestBatch:

    def test_order_preserved(self, engine):
        results = engine.classify_batch(["hi! wa.me/12345", "", "sent a link"])
        assert [r.risk_level for r in results] == [
            RiskLevel.HIGH,
            RiskLevel.SAFE,
            RiskLevel.MEDIUM,
        ]


class TestCustomRuleReload:
    """Custom overlay is swapped in atomically."""

    def test_custom_keyword(self, engine):
        engine.load_custom_rules(CustomRuleSet(keywords={"foobar": 7}))
        result = engine.classify("foobar")
        assert result.keyword_match.matched_keywords["custom:foobar"].weight == 7
        assert result.score == 7
        assert result.risk_level == RiskLevel.LOW

    def test_custom_url_pattern(self, engine):
        engine.load_custom_rules(CustomRuleSet(url_patterns=["evil.example"]))
        result = engine.classify("go to evil.example/promo")
        assert result.score == 20
        assert result.risk_level == RiskLevel.HIGH
        assert "custom:evil.example" in result.url_match.matched_patterns

    def test_static_and_custom_duplicate_both_count(self, engine):
        engine.load_custom_rules(CustomRuleSet(keywords={"crypto": 7}))
        assert engine.classify("crypto").score == 10

    def test_previous_snapshot_untouched(self, engine):
        before = engine.tables
        engine.load_custom_rules(CustomRuleSet(keywords={"foobar": 7}))
        assert before.custom_keywords == ()
        assert engine.tables is not before
        assert len(engine.tables.custom_keywords) == 1

    def test_reload_replaces_overlay(self, engine):
        engine.load_custom_rules(CustomRuleSet(keywords={"foobar": 7}))
        engine.load_custom_rules(CustomRuleSet(keywords={"bazqux": 4}))
        assert engine.classify("foobar").score == 0
        assert engine.classify("bazqux").score == 4

    def test_clear_overlay(self, engine):
        engine.load_custom_rules(CustomRuleSet(keywords={"foobar": 7}))
        engine.load_custom_rules(None)
        assert engine.classify("foobar").score == 0

    def test_constructor_overlay(self):
        from sweeper.services.detection import SpamDetectionEngine
        engine = SpamDetectionEngine(custom_rules=CustomRuleSet(keywords={"foobar": 7}))
        assert engine.classify("foobar").score == 7


class TestRuleSummary:

    def test_summary(self, engine):
        summary = engine.get_rule_summary()
        assert summary['tables']['regex_rules'] == 12
        assert summary['tables']['safe_domains'] > 0
        assert summary['thresholds'] == {'high': 20, 'medium': 10, 'low': 3}
        assert summary['max_score'] == 30


class TestScoringConfig:

    def test_risk_level_boundaries(self):
        assert calculate_risk_level(0) == RiskLevel.SAFE
        assert calculate_risk_level(2) == RiskLevel.SAFE
        assert calculate_risk_level(3) == RiskLevel.LOW
        assert calculate_risk_level(9) == RiskLevel.LOW
        assert calculate_risk_level(10) == RiskLevel.MEDIUM
        assert calculate_risk_level(19) == RiskLevel.MEDIUM
        assert calculate_risk_level(20) == RiskLevel.HIGH
        assert calculate_risk_level(30) == RiskLevel.HIGH

    def test_clamp(self):
        from sweeper.config.scoring import clamp_score
        assert clamp_score(-10) == 0
        assert clamp_score(45) == 30
        assert clamp_score(12) == 12
