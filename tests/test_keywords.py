"""
Tests for title keyword extraction and keyword matching.
"""

import pytest

from auto_seo_headings.keywords import (
    ITALIAN_STOPWORDS,
    contains_keyword,
    extract_title_keywords,
    normalize_focus_keyword,
)


class TestExtractTitleKeywords:
    """Tests for extract_title_keywords."""

    def test_drops_stopwords_and_short_words(self):
        """Test the canonical pizza title."""
        keywords = extract_title_keywords("Come scegliere la Migliore Pizza a Napoli")
        assert keywords == ["scegliere", "migliore", "pizza", "napoli"]
        assert "come" not in keywords
        assert "la" not in keywords

    def test_empty_title(self):
        """Test that empty or missing titles yield no keywords."""
        assert extract_title_keywords("") == []
        assert extract_title_keywords(None) == []
        assert extract_title_keywords("   ") == []

    def test_punctuation_becomes_separator(self):
        """Test that punctuation splits words."""
        assert extract_title_keywords("Pizza, pasta & vino!") == ["pizza", "pasta", "vino"]

    def test_apostrophe_splits_elision(self):
        """Test that elided articles are separated and dropped."""
        assert extract_title_keywords("L'arte della pizza") == ["arte", "pizza"]

    def test_accented_characters_kept(self):
        """Test Unicode word characters survive tokenization."""
        keywords = extract_title_keywords("Perché la città è bella")
        assert keywords == ["perché", "città", "bella"]

    def test_accented_stopwords_removed(self):
        """Test stopwords with accents are filtered."""
        assert extract_title_keywords("Più pizza per tutti") == ["pizza"]

    def test_length_counts_characters_not_bytes(self):
        """Test that a 3-character word with multi-byte letters is kept."""
        # "età" is 3 characters but 4 bytes in UTF-8
        assert extract_title_keywords("età") == ["età"]
        assert extract_title_keywords("è") == []

    def test_duplicates_preserved_in_order(self):
        """Test that repeated words are not deduplicated."""
        assert extract_title_keywords("Pizza pizza PIZZA forno") == ["pizza", "pizza", "pizza", "forno"]

    def test_three_letter_non_stopword_kept(self):
        """Test minimum length boundary."""
        assert extract_title_keywords("Un re e tre") == ["tre"]

    def test_custom_stopwords_and_min_length(self):
        """Test overriding stopwords and minimum length."""
        keywords = extract_title_keywords("The best pizza in town", stopwords={"the", "in"}, min_length=4)
        assert keywords == ["best", "pizza", "town"]

    @pytest.mark.parametrize("title", [
        "Come scegliere la Migliore Pizza a Napoli",
        "Tutti i segreti della pasta fatta in casa",
        "Dove mangiare oggi: guida ai ristoranti più belli",
        "Il 10% degli italiani preferisce la pizza",
    ])
    def test_keywords_are_long_and_not_stopwords(self, title):
        """Test the keyword invariants over several titles."""
        for keyword in extract_title_keywords(title):
            assert len(keyword) >= 3
            assert keyword not in ITALIAN_STOPWORDS
            assert keyword == keyword.lower()


class TestContainsKeyword:
    """Tests for contains_keyword."""

    def test_case_insensitive(self):
        """Test matching ignores case on both sides."""
        assert contains_keyword("Ricetta PIZZA", "pizza") is True
        assert contains_keyword("ricetta pizza", "PIZZA") is True

    def test_substring_match(self):
        """Test plain substring containment."""
        assert contains_keyword("La pizzeria sotto casa", "pizza") is False
        assert contains_keyword("La pizzeria sotto casa", "pizz") is True

    def test_empty_keyword_never_matches(self):
        """Test empty and missing keywords."""
        assert contains_keyword("Pizza", "") is False
        assert contains_keyword("Pizza", None) is False


class TestNormalizeFocusKeyword:
    """Tests for normalize_focus_keyword."""

    def test_trims_whitespace(self):
        assert normalize_focus_keyword("  pizza napoletana ") == "pizza napoletana"

    def test_none_becomes_empty(self):
        assert normalize_focus_keyword(None) == ""
