"""
Markup transforms that realize a suggestion.

These helpers only rewrite the wrapper element: the inner markup (links,
emphasis, inline formatting) is carried over untouched.
"""

import logging
import re

from .classifier import VALID_HEADING_LEVELS
from .models import HEADING_BLOCK_NAME, BlockKind, ContentBlock

logger = logging.getLogger(__name__)

# Class tokens attached to every generated heading
HEADING_BLOCK_CLASS = "wp-block-heading"
GENERATED_CLASS = "auto-seo-generated"

_PARAGRAPH_WRAPPER = re.compile(r"^<p(?:\s[^>]*)?>(.*)</p>$", re.DOTALL | re.IGNORECASE)
_HEADING_WRAPPER = re.compile(r"^<h([1-6])(?:\s[^>]*)?>(.*)</h\1>$", re.DOTALL | re.IGNORECASE)
_PARAGRAPH_CLOSE = re.compile(r"</p\s*>", re.IGNORECASE)


class InvalidHeadingLevelError(ValueError):
    """Raised when a heading level other than 2 or 3 is requested."""
    pass


def validate_heading_level(level: int) -> int:
    """
    Ensure level is one the engine can produce.

    Raises:
        InvalidHeadingLevelError: If level is not 2 or 3.
    """
    if isinstance(level, bool) or level not in VALID_HEADING_LEVELS:
        raise InvalidHeadingLevelError(f"Invalid heading level: {level!r} (expected 2 or 3)")
    return level


def unwrap_paragraph(markup: str) -> str:
    """Remove a single outer <p> wrapper, if present."""
    markup = markup.strip()
    match = _PARAGRAPH_WRAPPER.match(markup)
    # "<p>a</p><p>b</p>" is two paragraphs, not one wrapper
    if not match or _PARAGRAPH_CLOSE.search(match.group(1)):
        return markup
    return match.group(1)


def transform_to_heading(markup: str, level: int) -> str:
    """
    Turn paragraph markup into heading markup.

    Args:
        markup: Block markup, usually "<p>...</p>".
        level: Target heading level (2 or 3).

    Returns:
        Heading markup carrying the generated class tokens.

    Raises:
        InvalidHeadingLevelError: If level is not 2 or 3.

    Example:
        >>> transform_to_heading("<p>Hello</p>", 2)
        '<h2 class="wp-block-heading auto-seo-generated">Hello</h2>'
    """
    validate_heading_level(level)
    content = unwrap_paragraph(markup)
    logger.debug(f"Transforming block to H{level}: {content[:40]!r}")
    return f'<h{level} class="{HEADING_BLOCK_CLASS} {GENERATED_CLASS}">{content}</h{level}>'


def transform_to_paragraph(markup: str) -> str:
    """
    Turn heading markup back into a paragraph.

    Args:
        markup: Heading markup, e.g. '<h2 class="...">Title</h2>'.

    Returns:
        "<p>...</p>" around the heading's inner markup. Markup without an
        outer heading element is wrapped as-is.
    """
    return f"<p>{unwrap_heading(markup)}</p>"


def unwrap_heading(markup: str) -> str:
    """Remove a single outer <h1>-<h6> wrapper, if present."""
    markup = markup.strip()
    match = _HEADING_WRAPPER.match(markup)
    if not match or re.search(rf"</h{match.group(1)}>", match.group(2), re.IGNORECASE):
        return markup
    return match.group(2)


def heading_block(block: ContentBlock, level: int) -> ContentBlock:
    """
    Build the heading block that replaces block.

    Paragraphs lose their <p> wrapper; existing headings are re-leveled.
    """
    markup = unwrap_heading(block.raw_markup) if block.is_heading else block.raw_markup
    attrs = {"className": GENERATED_CLASS}
    if level != 2:
        attrs = {"level": level, **attrs}
    return ContentBlock(
        kind=BlockKind.HEADING,
        raw_markup=transform_to_heading(markup, level),
        current_level=level,
        name=HEADING_BLOCK_NAME,
        attrs=attrs,
    )


def paragraph_block(block: ContentBlock) -> ContentBlock:
    """Build the paragraph block that replaces a heading block."""
    return ContentBlock.paragraph(transform_to_paragraph(block.raw_markup))
