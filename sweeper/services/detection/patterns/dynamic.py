"""
Sweeper Dynamic Regex Rules

Structural spam signatures with variable numbers in them (multipliers,
percentages, countdowns). Every match instance contributes the rule weight.
"""

import re
from dataclasses import dataclass
from typing import List


@dataclass(frozen=True)
class RegexRule:
    """A named, weighted regular expression."""
    pattern: str
    weight: int
    name: str
    flags: int = re.IGNORECASE


SPAM_REGEX_PATTERNS: List[RegexRule] = [
    # 100x, 1000x
    RegexRule(r"\b\d+x\b", 5, "multiplier claim"),

    # "8875.5% returns", "200%-300% upside"
    RegexRule(
        r"\b\d+(?:\.\d+)?%(?:\s*[-–]\s*\d+(?:\.\d+)?%)?\s*(?:returns?|upside|profit|gains?)",
        5,
        "percentage returns",
    ),

    # "for the next 24h", "next 15 minutes", "free for 24 hours"
    RegexRule(r"(?:for the )?next\s+\d+\s*(?:h(?:ours?)?|min(?:utes?)?|days?)", 4, "time-limited offer"),
    RegexRule(r"free\s+(?:for\s+)?\d+\s*(?:h(?:ours?)?|min(?:utes?)?|days?)", 4, "free time-limited"),

    # "first 150", "first 50 members"
    RegexRule(r"\bfirst\s+\d+\b", 4, "first N spots"),

    # Stock trade records
    RegexRule(r"\bbuy:\s*[\d.]+", 4, "stock buy price"),
    RegexRule(r"\bsell:\s*[\d.]+", 4, "stock sell price"),

    # "DM me 1 word", "DM me one word"
    RegexRule(r"dm\s+me\s+(?:\d+|one|a)\s+word", 4, "dm trigger word"),

    # "in 8 sec", "in 5 seconds"
    RegexRule(r"in\s+\d+\s*sec(?:onds?)?", 3, "countdown trigger"),

    # "Send 0.1 ETH", "Deposit 500 USDT"
    RegexRule(r"(?:send|deposit)\s+\d+(?:\.\d+)?\s*(?:eth|btc|sol|bnb|usdt|usdc)", 5, "crypto deposit request"),

    RegexRule(r"check\s*(?:my)?\s*bio", 2, "check bio"),
    RegexRule(r"link\s*(?:is)?\s*in\s*(?:my)?\s*bio", 3, "link in bio"),
]
