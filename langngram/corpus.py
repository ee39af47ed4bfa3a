"""
Corpus Loading and Tokenization

This module splits raw text into the lines consumed by the training model
builder and the words consumed by the test model builder, and loads
training corpora from text files or the NLTK Brown corpus.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

import nltk
import regex
from nltk.corpus import brown


logger = logging.getLogger(__name__)

# Runs of letters and the combining marks inside them; everything else
# separates words
_WORD = regex.compile(r"[\p{L}\p{M}]+")


def ensure_nltk_data():
    """Download the Brown corpus if not present."""
    try:
        nltk.data.find('corpora/brown')
    except LookupError:
        logger.info("Downloading Brown corpus...")
        nltk.download('brown', quiet=True)


def split_text_into_lines(text: str) -> List[str]:
    """
    Split raw text into lowercased lines.

    Non-letter characters are kept; dropping them is the job of the
    alphabet filter during n-gram extraction.

    Args:
        text: Raw multi-line text

    Returns:
        Lowercased lines in their original order
    """
    return [line.lower() for line in text.splitlines()]


def split_text_into_words(text: str) -> List[str]:
    """
    Split raw text into lowercased words.

    Any character that is neither a letter nor a combining mark (whitespace,
    punctuation, digits, symbols) acts as a word boundary.

    Args:
        text: Raw text to classify

    Returns:
        Word tokens in reading order
    """
    return _WORD.findall(text.lower())


def read_corpus_lines(path: Union[str, Path], encoding: str = 'utf-8') -> List[str]:
    """Read a plain text corpus file into lowercased lines."""
    path = Path(path)
    text = path.read_text(encoding=encoding)
    lines = split_text_into_lines(text)
    logger.debug("Read %d lines from %s", len(lines), path)
    return lines


def load_brown_lines(categories: Optional[List[str]] = None) -> List[str]:
    """
    Load the Brown corpus as lowercased lines, one sentence per line.

    Args:
        categories: Optional list of Brown corpus categories
                   (e.g., ['news', 'fiction']). If None, loads all.

    Returns:
        Lowercased sentence lines
    """
    ensure_nltk_data()

    if categories:
        sents = brown.sents(categories=categories)
    else:
        sents = brown.sents()

    return [" ".join(sent).lower() for sent in sents]


def get_brown_categories() -> List[str]:
    """Return list of available Brown corpus categories."""
    ensure_nltk_data()
    return brown.categories()
