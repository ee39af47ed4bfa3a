"""
Language Identification N-gram Models

Builds the character n-gram models a language detector works with:
per-language training models of conditional n-gram frequencies and
per-text test models of n-gram back-off chains.
"""

from .alphabet import Alphabet, any_letter
from .corpus import split_text_into_lines, split_text_into_words
from .language import Language
from .model import (
    TestDataLanguageModel, TrainingDataLanguageModel,
    build_test_model, build_training_model
)
from .ngram import MAX_ORDER, MIN_ORDER, Ngram

__version__ = "0.1.0"
__all__ = [
    "Alphabet", "any_letter", "Language", "Ngram", "MIN_ORDER", "MAX_ORDER",
    "TrainingDataLanguageModel", "TestDataLanguageModel",
    "build_training_model", "build_test_model",
    "split_text_into_lines", "split_text_into_words",
]
