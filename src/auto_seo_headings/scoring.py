"""
Confidence scoring for heading suggestions.

Scores are additive: a base value, a bonus for the focus keyword, a bonus
for every matching title keyword and a bonus for a comfortable heading
length, clamped to 0-100. Every bonus that applies adds a human-readable
reason, and the measured length is always reported last.
"""

from typing import NamedTuple, Optional, Sequence

from .config import AnalyzerConfig
from .keywords import contains_keyword
from .text_extraction import display_length


class ConfidenceScore(NamedTuple):
    """Confidence value with the reasons that produced it."""
    confidence: int
    reasons: tuple[str, ...]


def clamp_confidence(value: int) -> int:
    """Clamp a raw score into 0-100."""
    return max(0, min(100, value))


def score_confidence(
    text: str,
    title_keywords: Sequence[str],
    user_keyword: Optional[str] = None,
    config: Optional[AnalyzerConfig] = None,
) -> ConfidenceScore:
    """
    Compute the confidence of a heading suggestion.

    Args:
        text: Display text of the candidate block.
        title_keywords: Keywords extracted from the document title.
        user_keyword: Optional focus keyword.
        config: Scoring weights. Defaults to AnalyzerConfig().

    Returns:
        ConfidenceScore with the clamped value and ordered reasons.
    """
    config = config or AnalyzerConfig()
    confidence = config.base_confidence
    reasons: list[str] = []

    if contains_keyword(text, user_keyword):
        confidence += config.focus_keyword_bonus
        reasons.append(f"Contains focus keyword: '{user_keyword}'")

    # Each match counts, including repeated title words
    for keyword in title_keywords:
        if contains_keyword(text, keyword):
            confidence += config.title_keyword_bonus
            reasons.append(f"Contains title word: '{keyword}'")

    length = display_length(text)
    if config.is_optimal_length(length):
        confidence += config.optimal_length_bonus

    reasons.append(f"Heading length: {length} characters")

    return ConfidenceScore(confidence=clamp_confidence(confidence), reasons=tuple(reasons))
