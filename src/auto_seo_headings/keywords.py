"""
Title keyword extraction and keyword matching.

Keywords are the meaningful words of a document title: lowercased tokens of
at least three characters that are not Italian function words. They are used
as the secondary signal (after the focus keyword) when deciding whether a
short paragraph deserves an H2 or an H3.
"""

import re
from typing import Iterable, Optional

# Italian stopwords: articles, prepositions (simple and articulated),
# conjunctions, pronouns, common verbs and adverbs
ITALIAN_STOPWORDS = frozenset({
    "il", "lo", "la", "i", "gli", "le", "un", "uno", "una", "di", "a", "da", "in", "con", "su", "per",
    "tra", "fra", "e", "ed", "o", "od", "che", "chi", "cui", "come", "quando", "dove", "mentre",
    "se", "anche", "ancora", "più", "molto", "tutto", "tutti", "tutte", "ogni", "questo", "questa",
    "questi", "queste", "quello", "quella", "quelli", "quelle", "del", "dello", "della", "dei",
    "degli", "delle", "al", "allo", "alla", "ai", "agli", "alle", "dal", "dallo", "dalla", "dai",
    "dagli", "dalle", "nel", "nello", "nella", "nei", "negli", "nelle", "sul", "sullo", "sulla",
    "sui", "sugli", "sulle", "essere", "avere", "fare", "dire", "andare", "potere", "dovere",
    "volere", "sapere", "dare", "stare", "venire", "uscire", "parlare", "vedere", "cosa", "non",
    "ma", "però", "quindi", "poi", "già", "sempre", "mai", "oggi", "ieri", "domani",
})

MIN_KEYWORD_LENGTH = 3

# Anything that is neither a word character nor whitespace (Unicode aware)
_NON_WORD_PATTERN = re.compile(r"[^\w\s]")


def extract_title_keywords(
    title: Optional[str],
    stopwords: Iterable[str] = ITALIAN_STOPWORDS,
    min_length: int = MIN_KEYWORD_LENGTH,
) -> list[str]:
    """
    Extract candidate keywords from a document title.

    Args:
        title: The document title. None or empty yields no keywords.
        stopwords: Words to discard.
        min_length: Minimum token length in characters.

    Returns:
        Lowercased keywords in title order. Repeated words are kept.

    Example:
        >>> extract_title_keywords("Come scegliere la Migliore Pizza a Napoli")
        ['scegliere', 'migliore', 'pizza', 'napoli']
    """
    if not title:
        return []

    stopword_set = stopwords if isinstance(stopwords, (set, frozenset)) else set(stopwords)
    cleaned = _NON_WORD_PATTERN.sub(" ", title.lower())

    return [
        word for word in cleaned.split()
        if len(word) >= min_length and word not in stopword_set
    ]


def contains_keyword(text: str, keyword: Optional[str]) -> bool:
    """
    Check if keyword occurs in text, ignoring case.

    Plain substring containment: "pizza" matches "pizzeria".

    Args:
        text: Display text of a block.
        keyword: Keyword to look for. Empty or None never matches.

    Returns:
        True if keyword is a case-insensitive substring of text.
    """
    if not keyword:
        return False
    return keyword.lower() in text.lower()


def normalize_focus_keyword(keyword: Optional[str]) -> str:
    """Trim a user-supplied focus keyword; None becomes an empty string."""
    return keyword.strip() if keyword else ""
