# -*- coding: utf-8 -*-
"""
Centralized configuration for Auto SEO Headings.

This module provides the configuration dataclass that controls which blocks
are analyzed, which lengths qualify a paragraph as a heading candidate, and
how confidence scores are built.
"""

from dataclasses import dataclass, field

from .keywords import ITALIAN_STOPWORDS, MIN_KEYWORD_LENGTH
from .models import BlockKind


@dataclass
class AnalyzerConfig:
    """
    Central configuration for suggestion analysis.

    Attributes:
        eligible_kinds: Block kinds the engine walks and indexes.
            - persisted(): paragraphs only. Matches analysis of saved content,
              where suggestions point at the n-th paragraph.
            - live_editor(): paragraphs and headings. Lets existing headings
              be re-leveled from the editor sidebar.

        min_length: Shortest text (in characters) that can become a heading.
        max_length: Longest text (in characters) that can become a heading.
            Both bounds are inclusive.

        optimal_min_length / optimal_max_length: Length window that earns
            the optimal_length_bonus.

        base_confidence: Starting score for every candidate.
        focus_keyword_bonus: Added when the focus keyword is found.
        title_keyword_bonus: Added once per matching title keyword.
        optimal_length_bonus: Added when the text length is in the optimal window.

        min_keyword_length: Shortest title token kept as a keyword.
        stopwords: Title tokens never used as keywords.
    """

    # Block selection
    eligible_kinds: frozenset[BlockKind] = frozenset({BlockKind.PARAGRAPH})

    # Candidate length window (inclusive)
    min_length: int = 8
    max_length: int = 80

    # Optimal heading length window (inclusive)
    optimal_min_length: int = 15
    optimal_max_length: int = 50

    # Confidence scoring
    base_confidence: int = 50
    focus_keyword_bonus: int = 30
    title_keyword_bonus: int = 15
    optimal_length_bonus: int = 10

    # Title keywords
    min_keyword_length: int = MIN_KEYWORD_LENGTH
    stopwords: frozenset[str] = field(default=ITALIAN_STOPWORDS)

    @property
    def includes_headings(self) -> bool:
        """Check if existing headings are offered for re-leveling."""
        return BlockKind.HEADING in self.eligible_kinds

    def is_eligible(self, kind: BlockKind) -> bool:
        """Check if blocks of this kind are analyzed."""
        return kind in self.eligible_kinds

    def is_candidate_length(self, length: int) -> bool:
        """Check if a text length qualifies for a suggestion."""
        return self.min_length <= length <= self.max_length

    def is_optimal_length(self, length: int) -> bool:
        """Check if a text length earns the optimal length bonus."""
        return self.optimal_min_length <= length <= self.optimal_max_length

    def __post_init__(self):
        """Validate configuration values."""
        self.eligible_kinds = frozenset(self.eligible_kinds)
        self.stopwords = frozenset(self.stopwords)

        if not all(isinstance(kind, BlockKind) for kind in self.eligible_kinds):
            raise ValueError(
                f"eligible_kinds must contain BlockKind values, got {sorted(map(str, self.eligible_kinds))}"
            )
        if self.min_length < 1:
            raise ValueError(f"min_length must be >= 1, got {self.min_length}")
        if self.max_length < self.min_length:
            raise ValueError(
                f"max_length ({self.max_length}) must be >= min_length ({self.min_length})"
            )
        if self.optimal_max_length < self.optimal_min_length:
            raise ValueError(
                f"optimal_max_length ({self.optimal_max_length}) must be >= "
                f"optimal_min_length ({self.optimal_min_length})"
            )
        if not 0 <= self.base_confidence <= 100:
            raise ValueError(
                f"base_confidence must be between 0 and 100, got {self.base_confidence}"
            )
        if self.min_keyword_length < 1:
            raise ValueError(
                f"min_keyword_length must be >= 1, got {self.min_keyword_length}"
            )

    @classmethod
    def persisted(cls, **overrides) -> "AnalyzerConfig":
        """Create config for analyzing saved content (paragraphs only).

        Args:
            **overrides: Override any config values.

        Returns:
            AnalyzerConfig indexing paragraphs only.
        """
        defaults = {"eligible_kinds": frozenset({BlockKind.PARAGRAPH})}
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def live_editor(cls, **overrides) -> "AnalyzerConfig":
        """Create config for live editor analysis (paragraphs and headings).

        Args:
            **overrides: Override any config values.

        Returns:
            AnalyzerConfig indexing paragraphs and headings together.
        """
        defaults = {"eligible_kinds": frozenset({BlockKind.PARAGRAPH, BlockKind.HEADING})}
        defaults.update(overrides)
        return cls(**defaults)
