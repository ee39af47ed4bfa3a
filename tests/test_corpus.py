"""Tests for line and word tokenization"""

from langngram.corpus import read_corpus_lines, split_text_into_lines, split_text_into_words

from tests.expected_ngrams import FIXTURE_TEXT


class TestSplitTextIntoLines:
    """Test line tokenization"""

    def test_lowercases_and_keeps_order(self):
        assert split_text_into_lines(FIXTURE_TEXT) == [
            "these sentences are intended for testing purposes.",
            "⚠ do not use them in production",
            "by the way, they consist of 23 words in total.",
        ]

    def test_empty_text(self):
        assert split_text_into_lines("") == []

    def test_read_corpus_lines(self, tmp_path):
        path = tmp_path / "corpus.txt"
        path.write_text("Hello World\nZweite Zeile\n", encoding="utf-8")
        assert read_corpus_lines(path) == ["hello world", "zweite zeile"]


class TestSplitTextIntoWords:
    """Test word tokenization"""

    def test_fixture_text(self):
        words = split_text_into_words(FIXTURE_TEXT)
        assert words[:4] == ["these", "sentences", "are", "intended"]
        assert "23" not in words
        assert "⚠" not in words
        assert words[-3:] == ["words", "in", "total"]
        assert len(words) == 22

    def test_non_letters_split_words(self):
        assert split_text_into_words("Don't stop-me now2day") == ["don", "t", "stop", "me", "now", "day"]

    def test_unicode_letters(self):
        assert split_text_into_words("Größe, Привет!") == ["größe", "привет"]

    def test_combining_marks_stay_in_words(self):
        assert split_text_into_words("नमस्ते, दुनिया!") == ["नमस्ते", "दुनिया"]

    def test_empty_text(self):
        assert split_text_into_words("  ...  ") == []
