"""
Data models for Auto SEO Headings.

This module defines the block and suggestion structures shared by the
parser, the suggestion engine and the outer surfaces (CLI and API).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class BlockKind(Enum):
    """Kinds of content blocks the engine distinguishes."""
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    OTHER = "other"


# Block names used by the editor's serialized block format
PARAGRAPH_BLOCK_NAME = "core/paragraph"
HEADING_BLOCK_NAME = "core/heading"

# Lowest score a suggestion can reach with a keyword match (base 50 + one title word)
HIGH_CONFIDENCE_THRESHOLD = 65


@dataclass(frozen=True)
class ContentBlock:
    """
    A single unit of structured document content.

    Attributes:
        kind: Paragraph, heading or anything else.
        raw_markup: Inner HTML of the block, already sanitized by the host.
        current_level: Heading level (headings only).
        name: Source block name (e.g. "core/paragraph"), if known.
        attrs: Block attributes from the serialized delimiter.
    """
    kind: BlockKind
    raw_markup: str = ""
    current_level: Optional[int] = None
    name: Optional[str] = None
    attrs: dict = field(default_factory=dict, compare=False, hash=False)

    @classmethod
    def paragraph(cls, raw_markup: str) -> "ContentBlock":
        """Create a paragraph block."""
        return cls(kind=BlockKind.PARAGRAPH, raw_markup=raw_markup, name=PARAGRAPH_BLOCK_NAME)

    @classmethod
    def heading(cls, raw_markup: str, level: int = 2) -> "ContentBlock":
        """Create a heading block."""
        attrs = {} if level == 2 else {"level": level}
        return cls(
            kind=BlockKind.HEADING,
            raw_markup=raw_markup,
            current_level=level,
            name=HEADING_BLOCK_NAME,
            attrs=attrs,
        )

    @classmethod
    def other(cls, raw_markup: str, name: Optional[str] = None) -> "ContentBlock":
        """Create a block the engine never considers (images, lists, freeform HTML)."""
        return cls(kind=BlockKind.OTHER, raw_markup=raw_markup, name=name)

    @property
    def is_heading(self) -> bool:
        """Check if this block is a heading."""
        return self.kind == BlockKind.HEADING


@dataclass(frozen=True)
class Suggestion:
    """
    A recommendation to turn one block into a heading.

    block_index counts only blocks of the eligible kinds, so callers can
    map it back onto their own list of paragraphs (or paragraphs and headings).
    """
    block_index: int
    text_content: str
    suggested_level: int
    current_level: Optional[int]
    length: int
    confidence: int
    reasons: tuple[str, ...] = ()
    html_content: str = ""

    @property
    def is_high_confidence(self) -> bool:
        """Check if at least one keyword backs this suggestion."""
        return self.confidence >= HIGH_CONFIDENCE_THRESHOLD

    def to_dict(self) -> dict:
        """Convert to a JSON-ready dictionary."""
        return {
            "block_index": self.block_index,
            "text_content": self.text_content,
            "html_content": self.html_content,
            "suggested_level": self.suggested_level,
            "current_level": self.current_level,
            "length": self.length,
            "confidence": self.confidence,
            "reasons": list(self.reasons),
        }
