"""
Heading level decision.

A candidate becomes an H2 when it mentions the focus keyword or any title
keyword, and an H3 otherwise. The decision is a strict priority order and
does not depend on the confidence score.
"""

from typing import Optional, Sequence

from .keywords import contains_keyword

H2 = 2
H3 = 3
VALID_HEADING_LEVELS = (H2, H3)


def classify_heading_level(
    text: str,
    title_keywords: Sequence[str],
    user_keyword: Optional[str] = None,
) -> int:
    """
    Decide the suggested heading level for a block's display text.

    Args:
        text: Display text (markup already stripped).
        title_keywords: Keywords extracted from the document title.
        user_keyword: Optional focus keyword.

    Returns:
        2 if the focus keyword or a title keyword occurs in text, else 3.
    """
    # Priority 1: focus keyword
    if contains_keyword(text, user_keyword):
        return H2

    # Priority 2: title keywords
    if any(contains_keyword(text, keyword) for keyword in title_keywords):
        return H2

    return H3
