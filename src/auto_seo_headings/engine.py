"""
Suggestion engine for Auto SEO Headings.

Walks the blocks of a document and proposes short paragraphs (and, in the
live editor, existing headings) that would work as H2 or H3 headings.

The engine never modifies content. Suggestions are plain records; applying
one is an explicit, separate call that returns a new block list.
"""

import logging
from typing import Callable, Optional, Sequence

from .classifier import classify_heading_level
from .config import AnalyzerConfig
from .keywords import extract_title_keywords, normalize_focus_keyword
from .models import BlockKind, ContentBlock, Suggestion
from .scoring import score_confidence
from .text_extraction import display_length, extract_text
from .transform import heading_block, paragraph_block, validate_heading_level

logger = logging.getLogger(__name__)

EligibilityPredicate = Callable[[BlockKind], bool]


class SuggestionEngine:
    """
    Produces heading suggestions for a sequence of content blocks.

    Suggestions are indexed by position among eligible blocks only, so
    index 3 means "the fourth paragraph" under the persisted preset and
    "the fourth paragraph-or-heading" under the live editor preset.
    """

    def __init__(
        self,
        config: Optional[AnalyzerConfig] = None,
        is_eligible: Optional[EligibilityPredicate] = None,
    ):
        """
        Initialize the engine.

        Args:
            config: Analysis settings. Defaults to AnalyzerConfig().
            is_eligible: Predicate selecting block kinds to analyze.
                Defaults to config.is_eligible.
        """
        self.config = config or AnalyzerConfig()
        self.is_eligible = is_eligible or self.config.is_eligible

    def analyze(
        self,
        blocks: Sequence[ContentBlock],
        title: Optional[str] = "",
        user_keyword: Optional[str] = None,
        enabled: bool = True,
    ) -> list[Suggestion]:
        """
        Analyze blocks and return heading suggestions.

        Args:
            blocks: Document blocks in order.
            title: Document title, source of the title keywords.
            user_keyword: Optional focus keyword.
            enabled: Per-document switch; False returns no suggestions.

        Returns:
            Suggestions in block order.
        """
        if not enabled:
            logger.debug("Suggestions disabled for this document")
            return []

        config = self.config
        keyword = normalize_focus_keyword(user_keyword)
        title_keywords = extract_title_keywords(
            title,
            stopwords=config.stopwords,
            min_length=config.min_keyword_length,
        )
        logger.debug(f"Title keywords: {title_keywords}")

        suggestions: list[Suggestion] = []
        index = 0  # counts eligible blocks only

        for block in blocks:
            if not self.is_eligible(block.kind):
                continue

            text = extract_text(block)
            length = display_length(text)

            if text and config.is_candidate_length(length):
                score = score_confidence(text, title_keywords, keyword, config)
                suggestions.append(Suggestion(
                    block_index=index,
                    text_content=text,
                    suggested_level=classify_heading_level(text, title_keywords, keyword),
                    current_level=block.current_level,
                    length=length,
                    confidence=score.confidence,
                    reasons=score.reasons,
                    html_content=block.raw_markup,
                ))
            elif text:
                logger.debug(f"Block {index} skipped: {length} characters")

            index += 1

        logger.info(f"Analysis complete: {len(suggestions)} suggestions from {index} eligible blocks")
        return suggestions

    def eligible_positions(self, blocks: Sequence[ContentBlock]) -> list[int]:
        """Map eligible-block indexes to positions in blocks."""
        return [i for i, block in enumerate(blocks) if self.is_eligible(block.kind)]

    def _position(self, blocks: Sequence[ContentBlock], block_index: int) -> int:
        """Position in blocks of the eligible block at block_index."""
        positions = self.eligible_positions(blocks)
        if not 0 <= block_index < len(positions):
            raise IndexError(
                f"Suggestion index {block_index} out of range "
                f"({len(positions)} eligible blocks)"
            )
        return positions[block_index]

    def apply(
        self,
        blocks: Sequence[ContentBlock],
        suggestion: Suggestion,
        level: Optional[int] = None,
    ) -> list[ContentBlock]:
        """
        Return a copy of blocks with the suggested block turned into a heading.

        Args:
            blocks: The blocks the suggestion was computed from.
            suggestion: Suggestion to apply.
            level: Heading level to use. Defaults to the suggested level.

        Returns:
            New block list; the input is left unchanged.

        Raises:
            InvalidHeadingLevelError: If level is not 2 or 3.
            IndexError: If the suggestion does not point at an eligible block.
        """
        level = validate_heading_level(suggestion.suggested_level if level is None else level)
        position = self._position(blocks, suggestion.block_index)
        updated = list(blocks)
        updated[position] = heading_block(blocks[position], level)
        logger.info(f"Block {suggestion.block_index} converted to H{level}")
        return updated

    def convert_to_paragraph(
        self,
        blocks: Sequence[ContentBlock],
        suggestion: Suggestion,
    ) -> list[ContentBlock]:
        """
        Return a copy of blocks with a suggested heading turned back into a paragraph.

        Args:
            blocks: The blocks the suggestion was computed from.
            suggestion: Suggestion pointing at an existing heading.

        Returns:
            New block list; the input is left unchanged.

        Raises:
            IndexError: If the suggestion does not point at an eligible block.
            ValueError: If the block is not a heading.
        """
        position = self._position(blocks, suggestion.block_index)
        if not blocks[position].is_heading:
            raise ValueError(f"Block {suggestion.block_index} is not a heading")

        updated = list(blocks)
        updated[position] = paragraph_block(blocks[position])
        logger.info(f"Block {suggestion.block_index} converted to paragraph")
        return updated


def get_suggestions(
    blocks: Sequence[ContentBlock],
    title: Optional[str] = "",
    user_keyword: Optional[str] = None,
    config: Optional[AnalyzerConfig] = None,
) -> list[Suggestion]:
    """
    Analyze blocks with a one-off engine.

    Args:
        blocks: Document blocks in order.
        title: Document title.
        user_keyword: Optional focus keyword.
        config: Analysis settings. Defaults to the persisted preset.

    Returns:
        Suggestions in block order.
    """
    return SuggestionEngine(config).analyze(blocks, title, user_keyword)
