"""
Sweeper Model Overlay Tests
"""

import asyncio
import json

import pytest

from sweeper.models.classification import RiskLevel, SkipReason
from sweeper.services.ai import (
    BaseModelProvider,
    ModelOverlay,
    ModelStatus,
    ModelUnavailableError,
    ModelResponseParseError,
    parse_verdict,
)


# Heuristic score 6 (crypto 3 + investment 3): LOW, eligible for review
AMBIGUOUS_TEXT = "crypto investment opportunity"


class FakeProvider(BaseModelProvider):
    """Provider returning a canned reply, raising, or stalling."""

    provider_name = "fake"
    default_model = "fake-model"

    def __init__(self, reply=None, error=None, delay=0.0):
        super().__init__()
        self.reply = reply
        self.error = error
        self.delay = delay
        self.prompts = []

    async def generate(self, prompt, system_prompt=None):
        self.prompts.append(prompt)
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return self.reply

    async def check_availability(self):
        self.status = ModelStatus.AVAILABLE
        return self.status


def verdict_reply(is_spam, confidence, category="Crypto", reason="investment scheme"):
    return json.dumps({
        "isSpam": is_spam,
        "confidence": confidence,
        "category": category,
        "reason": reason,
    })


class TestGate:
    """Cases where the model is never called."""

    def test_disabled(self, engine):
        overlay = ModelOverlay()
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_skipped == SkipReason.AI_DISABLED
        assert result.ai_checked is False
        assert result.score == 6

    def test_already_high(self, engine):
        provider = FakeProvider(reply=verdict_reply(False, 0.99))
        overlay = ModelOverlay(provider)
        text = "hi! wa.me/12345"
        result = asyncio.run(overlay.maybe_consult_model(text, engine.classify(text)))
        assert result.ai_skipped == SkipReason.ALREADY_HIGH_RISK
        assert result.risk_level == RiskLevel.HIGH
        assert provider.prompts == []

    def test_score_too_low(self, engine):
        provider = FakeProvider(reply=verdict_reply(True, 0.99))
        overlay = ModelOverlay(provider)
        text = "hello there, how was your weekend?"
        result = asyncio.run(overlay.maybe_consult_model(text, engine.classify(text)))
        assert result.ai_skipped == SkipReason.SCORE_TOO_LOW
        assert result.score == 0
        assert provider.prompts == []

    def test_hidden_link_unresolved(self, engine):
        provider = FakeProvider(reply=verdict_reply(False, 0.99))
        overlay = ModelOverlay(provider)
        result = asyncio.run(overlay.maybe_consult_model("sent a link", engine.classify("sent a link")))
        assert result.ai_skipped == SkipReason.HIDDEN_LINK_UNRESOLVED
        assert result.score == 10
        assert provider.prompts == []


class TestVerdicts:
    """Applying model verdicts."""

    def test_confident_spam_upgrades(self, engine):
        overlay = ModelOverlay(FakeProvider(reply=verdict_reply(True, 0.95)))
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_checked is True
        assert result.ai_skipped is None
        assert result.score == 25
        assert result.risk_level == RiskLevel.HIGH
        assert result.ai_reason == "AI: Crypto - investment scheme"
        assert result.ai_verdict.confidence == 0.95

    def test_confident_safe_downgrades(self, engine):
        overlay = ModelOverlay(FakeProvider(reply=verdict_reply(False, 0.9, "Safe", "casual chat")))
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.score == 0
        assert result.risk_level == RiskLevel.SAFE
        assert result.ai_reason == "AI cleared: casual chat"

    @pytest.mark.parametrize("confidence", [0.5, 0.8])
    def test_uncertain_keeps_heuristic(self, engine, confidence):
        overlay = ModelOverlay(FakeProvider(reply=verdict_reply(True, confidence)))
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_checked is True
        assert result.ai_skipped is None
        assert result.score == 6
        assert result.risk_level == RiskLevel.LOW
        assert result.ai_reason is None
        assert result.ai_verdict is not None

    def test_input_not_mutated(self, engine):
        overlay = ModelOverlay(FakeProvider(reply=verdict_reply(True, 0.95)))
        original = engine.classify(AMBIGUOUS_TEXT)
        snapshot = original.model_dump()
        asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, original))
        assert original.model_dump() == snapshot

    def test_prompt_contains_text(self, engine):
        provider = FakeProvider(reply=verdict_reply(True, 0.95))
        overlay = ModelOverlay(provider)
        asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert provider.prompts == [f'Analyze this DM for spam: "{AMBIGUOUS_TEXT}"']


class TestFailOpen:
    """Provider failures keep the heuristic result."""

    def test_timeout(self, engine):
        provider = FakeProvider(reply=verdict_reply(True, 0.99), delay=1.0)
        overlay = ModelOverlay(provider, timeout=0.05)
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_checked is True
        assert result.ai_skipped == SkipReason.AI_TIMEOUT
        assert result.score == 6

    def test_provider_error(self, engine):
        overlay = ModelOverlay(FakeProvider(error=ModelUnavailableError("not downloaded")))
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_skipped == SkipReason.AI_ERROR
        assert result.score == 6

    def test_unexpected_error(self, engine):
        overlay = ModelOverlay(FakeProvider(error=RuntimeError("boom")))
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_skipped == SkipReason.AI_ERROR

    def test_unparseable_reply(self, engine):
        overlay = ModelOverlay(FakeProvider(reply="I think this is spam"))
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_skipped == SkipReason.AI_UNAVAILABLE
        assert result.risk_level == RiskLevel.LOW

    def test_missing_fields_unavailable(self, engine):
        overlay = ModelOverlay(FakeProvider(reply='{"category": "Crypto"}'))
        result = asyncio.run(overlay.maybe_consult_model(AMBIGUOUS_TEXT, engine.classify(AMBIGUOUS_TEXT)))
        assert result.ai_checked is True
        assert result.ai_skipped == SkipReason.AI_UNAVAILABLE
        assert result.score == 6

    def test_short_text_unavailable(self, engine):
        # crypto 3 + "5x" 5 = 8, but only 9 characters long
        text = "crypto 5x"
        provider = FakeProvider(reply=verdict_reply(True, 0.99))
        overlay = ModelOverlay(provider)
        result = asyncio.run(overlay.maybe_consult_model(text, engine.classify(text)))
        assert result.score == 8
        assert result.ai_skipped == SkipReason.AI_UNAVAILABLE
        assert provider.prompts == []


class TestEngineIntegration:

    def test_classify_with_model(self, engine):
        overlay = ModelOverlay(FakeProvider(reply=verdict_reply(True, 0.95)))
        result = asyncio.run(engine.classify_with_model(AMBIGUOUS_TEXT, overlay))
        assert result.risk_level == RiskLevel.HIGH
        assert result.score == 25

    def test_classify_without_overlay(self, engine):
        result = asyncio.run(engine.classify_with_model(AMBIGUOUS_TEXT))
        assert result.score == 6
        assert result.ai_skipped is None


class TestParseVerdict:
    """Model reply parsing."""

    def test_plain_json(self):
        verdict = parse_verdict(verdict_reply(True, 0.9))
        assert verdict.is_spam is True
        assert verdict.category == "Crypto"

    def test_code_fences(self):
        raw = "```json\n" + verdict_reply(False, 0.7) + "\n```"
        verdict = parse_verdict(raw)
        assert verdict.is_spam is False
        assert verdict.confidence == 0.7

    def test_confidence_clamped(self):
        assert parse_verdict('{"isSpam": true, "confidence": 1.7}').confidence == 1.0
        assert parse_verdict('{"isSpam": true, "confidence": -2}').confidence == 0.0

    def test_defaults(self):
        verdict = parse_verdict('{"isSpam": false, "confidence": 0.3}')
        assert verdict.category == "Unknown"
        assert verdict.reason == ""

    def test_non_string_fields_kept(self):
        verdict = parse_verdict('{"isSpam": true, "confidence": 0.9, "category": 3, "reason": ["x"]}')
        assert verdict.category == "3"
        assert verdict.reason == "['x']"

    @pytest.mark.parametrize("raw", [
        "",
        "not json",
        "[1, 2]",
        '{"confidence": 0.9}',
        '{"isSpam": "true", "confidence": 0.9}',
        '{"isSpam": true, "confidence": "high"}',
        '{"isSpam": true, "confidence": true}',
    ])
    def test_invalid(self, raw):
        with pytest.raises(ModelResponseParseError):
            parse_verdict(raw)


class TestProviderInput:

    def test_truncates_long_text(self):
        provider = FakeProvider()
        prepared = provider.prepare_text("a" * 600)
        assert len(prepared) == 503
        assert prepared.endswith("...")

    def test_skips_short_text(self):
        provider = FakeProvider()
        assert provider.prepare_text("   hi   ") is None
        assert provider.prepare_text(None) is None
        assert provider.prepare_text("long enough text") == "long enough text"


class TestOverlaySetup:

    def test_disabled_by_default(self):
        from sweeper.config import Settings
        from sweeper.services.ai import init_model_overlay, get_model_overlay

        overlay = init_model_overlay(Settings(ai_enabled=False))
        assert overlay.is_enabled() is False
        assert get_model_overlay() is overlay

    def test_enabled_builds_ollama_provider(self):
        from sweeper.config import Settings
        from sweeper.services.ai import OllamaProvider, init_model_overlay

        settings = Settings(
            ai_enabled=True,
            ai_base_url="http://127.0.0.1:11434/",
            ai_model="tiny-model",
            ai_timeout_seconds=1.5,
        )
        overlay = init_model_overlay(settings)
        assert isinstance(overlay.provider, OllamaProvider)
        assert overlay.provider.base_url == "http://127.0.0.1:11434"
        assert overlay.provider.model == "tiny-model"
        assert overlay.timeout == 1.5

        init_model_overlay(Settings(ai_enabled=False))

    def test_unknown_provider(self):
        from sweeper.services.ai import create_provider

        with pytest.raises(ValueError):
            create_provider("cloud", base_url="http://example.invalid")


class TestModelStatus:

    def test_status_values(self):
        assert {s.value for s in ModelStatus} == {"unknown", "available", "unavailable", "error"}
