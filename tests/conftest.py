"""
Sweeper Test Configuration

Pytest fixtures and configuration.
"""

import pytest


@pytest.fixture
def engine():
    """Fresh engine over the shipped tables."""
    from sweeper.services.detection import SpamDetectionEngine
    return SpamDetectionEngine()


@pytest.fixture
def store(tmp_path, engine):
    """Custom rule store backed by a temp file and wired to the engine."""
    from sweeper.services.detection import CustomRuleStore
    rule_store = CustomRuleStore(str(tmp_path / "custom_rules.json"), engine)
    rule_store.load()
    return rule_store


@pytest.fixture
def small_tables():
    """Tiny fixture tables, independent of the shipped data."""
    from sweeper.services.detection import build_tables
    from sweeper.services.detection.patterns import RegexRule
    return build_tables(
        high_risk_urls=[r"evil\.example"],
        medium_risk_urls=[r"short\.example/"],
        safe_domains=["good.example"],
        keywords={"free gift": 4, "winner": 2},
        regex_rules=[RegexRule(r"\b\d+x\b", 5, "multiplier claim")],
    )
