"""Shared fixtures built from the three sentence fixture text."""

import pytest

from langngram import Language, Ngram
from langngram.alphabet import LATIN
from langngram.corpus import split_text_into_lines, split_text_into_words
from langngram.model import TrainingDataLanguageModel

from tests.expected_ngrams import FIXTURE_TEXT


def to_ngrams(table):
    """Key a {str: value} table by Ngram."""
    return {Ngram(key): value for key, value in table.items()}


@pytest.fixture
def fixture_lines():
    return split_text_into_lines(FIXTURE_TEXT)


@pytest.fixture
def fixture_words():
    return split_text_into_words(FIXTURE_TEXT)


@pytest.fixture
def english_models(fixture_lines):
    """Training models of orders 1-5, each built on the order below."""
    models = {}
    lower = None
    for order in range(1, 6):
        model = TrainingDataLanguageModel.from_corpus(
            fixture_lines, Language.ENGLISH, order, LATIN, lower
        )
        models[order] = model
        lower = model.absolute_frequencies
    return models
