"""
Auto SEO Headings

Suggests non-destructive paragraph-to-heading conversions for SEO editing:
- Extracts keywords from the document title
- Finds short paragraphs that read like headings
- Proposes H2 (keyword match) or H3 with a confidence score and reasons
"""

__version__ = "2.0.0"
__author__ = "Auto SEO Headings Team"

from .config import AnalyzerConfig

from .models import (
    BlockKind,
    ContentBlock,
    Suggestion,
)

from .keywords import (
    ITALIAN_STOPWORDS,
    extract_title_keywords,
    contains_keyword,
)

from .text_extraction import extract_text, strip_markup
from .classifier import classify_heading_level
from .scoring import ConfidenceScore, score_confidence

from .engine import SuggestionEngine, get_suggestions

from .transform import (
    InvalidHeadingLevelError,
    transform_to_heading,
    transform_to_paragraph,
)

from .block_parser import (
    BlockParseError,
    load_blocks,
    parse_blocks,
    parse_html,
    serialize_blocks,
)

__all__ = [
    # Configuration
    "AnalyzerConfig",
    # Models
    "BlockKind",
    "ContentBlock",
    "Suggestion",
    # Title keywords
    "ITALIAN_STOPWORDS",
    "extract_title_keywords",
    "contains_keyword",
    # Analysis
    "extract_text",
    "strip_markup",
    "classify_heading_level",
    "ConfidenceScore",
    "score_confidence",
    "SuggestionEngine",
    "get_suggestions",
    # Transforms
    "InvalidHeadingLevelError",
    "transform_to_heading",
    "transform_to_paragraph",
    # Content loading
    "BlockParseError",
    "load_blocks",
    "parse_blocks",
    "parse_html",
    "serialize_blocks",
]
