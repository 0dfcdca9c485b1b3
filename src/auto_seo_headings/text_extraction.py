"""
Plain-text extraction from block markup.

The text produced here is what gets measured and matched. The block's
markup itself is never touched.
"""

from bs4 import BeautifulSoup

from .models import ContentBlock

# Elements whose content is not visible text
_INVISIBLE_TAGS = ["script", "style"]


def strip_markup(markup: str) -> str:
    """
    Strip tags and decode entities from an HTML fragment.

    Args:
        markup: HTML fragment.

    Returns:
        Visible text, trimmed.
    """
    if not markup:
        return ""

    soup = BeautifulSoup(markup, "html.parser")
    for tag in soup.find_all(_INVISIBLE_TAGS):
        tag.decompose()

    return soup.get_text().strip()


def extract_text(block: ContentBlock) -> str:
    """Return the display text of a block ("" when it has no markup)."""
    return strip_markup(block.raw_markup)


def display_length(text: str) -> int:
    """Length in characters (code points), not bytes."""
    return len(text)
