"""
Training and Test Data Language Models

This module builds the two model shapes used for language identification:

- TrainingDataLanguageModel: absolute and relative (conditional) n-gram
  frequencies of one language for one n-gram order, learned from a corpus.
- TestDataLanguageModel: the distinct n-grams of an unknown text for one
  order, each stored with its back-off chain.
"""

import json
import logging
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from .alphabet import any_letter
from .language import Language
from .ngram import Ngram, sliding_windows, validate_order


logger = logging.getLogger(__name__)

FrequencyTable = Mapping[Ngram, Union[int, float]]


def _frozen_table(table: Dict[Ngram, Union[int, float]]) -> FrequencyTable:
    return MappingProxyType(dict(sorted(table.items())))


def _count_ngrams(corpus_lines: Iterable[str], order: int,
                  alphabet: Callable[[str], bool]) -> Counter:
    counts = Counter()
    for line in corpus_lines:
        counts.update(sliding_windows(line, order, alphabet))
    return Counter({Ngram(value): count for value, count in counts.items()})


def _check_lower_order_table(order: int,
                             lower_order_absolute_frequencies: Optional[Mapping[Ngram, int]]) -> None:
    if order == 1:
        return
    if lower_order_absolute_frequencies is None:
        raise ValueError(
            f"Building an order-{order} model requires the absolute frequencies "
            f"of the order-{order - 1} model"
        )
    for ngram in lower_order_absolute_frequencies:
        if not isinstance(ngram, Ngram) or ngram.order != order - 1:
            raise ValueError(
                f"Lower order table for an order-{order} model must only contain "
                f"order-{order - 1} n-grams, found {ngram!r}"
            )


@dataclass(frozen=True)
class TrainingDataLanguageModel:
    """
    N-gram frequency statistics of one language for one order.

    Attributes:
        language: The language the corpus is written in
        order: The n-gram order (1 to 5)
        absolute_frequencies: Occurrence count of each n-gram in the corpus
        relative_frequencies: P(last character | preceding characters) of each
            n-gram; for unigrams, the share of all unigram occurrences
    """
    language: Language
    order: int
    absolute_frequencies: FrequencyTable = field(hash=False)
    relative_frequencies: FrequencyTable = field(hash=False)

    @classmethod
    def from_corpus(cls, corpus_lines: Iterable[str], language: Language, order: int,
                    alphabet: Callable[[str], bool],
                    lower_order_absolute_frequencies: Optional[Mapping[Ngram, int]] = None
                    ) -> 'TrainingDataLanguageModel':
        """
        Build a model from lowercased corpus lines.

        Args:
            corpus_lines: Already lowercased text lines
            language: Language of the corpus
            order: N-gram order (1 to 5)
            alphabet: Predicate selecting the characters n-grams may contain
            lower_order_absolute_frequencies: Absolute frequencies of the
                model of order - 1 built from the same corpus (unused for order 1)

        Returns:
            The trained model

        Raises:
            ValueError: If the order is invalid or the lower order table is
                missing or of the wrong order
        """
        validate_order(order)
        _check_lower_order_table(order, lower_order_absolute_frequencies)

        counts = _count_ngrams(corpus_lines, order, alphabet)

        absolute: Dict[Ngram, int] = {}
        relative: Dict[Ngram, float] = {}

        if order == 1:
            total = sum(counts.values())
            for ngram, count in counts.items():
                absolute[ngram] = count
                relative[ngram] = count / total
        else:
            missing = 0
            for ngram, count in counts.items():
                denominator = lower_order_absolute_frequencies.get(ngram.prefix())
                if not denominator:
                    logger.debug("No order-%d frequency for prefix of %r (%s), skipping",
                                 order - 1, ngram.value, language.name)
                    missing += 1
                    continue
                absolute[ngram] = count
                relative[ngram] = count / denominator
            if missing:
                logger.warning("Skipped %d order-%d n-grams of %s without a lower order "
                               "frequency (lower model not built from the same corpus)",
                               missing, order, language.name)

        model = cls(
            language=language,
            order=order,
            absolute_frequencies=_frozen_table(absolute),
            relative_frequencies=_frozen_table(relative),
        )
        logger.debug("Built order-%d model for %s: %d n-grams",
                     order, language.name, len(absolute))
        return model

    def top_ngrams(self, top_k: int = 10) -> List[Tuple[Ngram, int]]:
        """Get the most frequent n-grams, ties broken lexicographically."""
        ranked = sorted(self.absolute_frequencies.items(), key=lambda item: (-item[1], item[0]))
        return ranked[:top_k]

    def stats(self) -> Dict:
        return {
            'language': self.language.iso_code,
            'order': self.order,
            'unique_ngrams': len(self.absolute_frequencies),
            'total_ngrams': sum(self.absolute_frequencies.values()),
        }

    def to_dict(self) -> Dict:
        return {
            'language': self.language.iso_code,
            'order': self.order,
            'absolute_frequencies': {ng.value: c for ng, c in self.absolute_frequencies.items()},
            'relative_frequencies': {ng.value: f for ng, f in self.relative_frequencies.items()},
        }

    @classmethod
    def from_dict(cls, data: Dict) -> 'TrainingDataLanguageModel':
        order = data['order']
        validate_order(order)

        absolute = {Ngram(value): int(count) for value, count in data['absolute_frequencies'].items()}
        relative = {Ngram(value): float(freq) for value, freq in data['relative_frequencies'].items()}

        if absolute.keys() != relative.keys():
            raise ValueError("Absolute and relative frequency tables have different n-grams")
        if any(ngram.order != order for ngram in absolute):
            raise ValueError(f"Model of order {order} contains n-grams of another order")

        return cls(
            language=Language.from_iso_code(data['language']),
            order=order,
            absolute_frequencies=_frozen_table(absolute),
            relative_frequencies=_frozen_table(relative),
        )

    def save(self, path: Union[str, Path]) -> None:
        """Save the model to a JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, ensure_ascii=False)

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'TrainingDataLanguageModel':
        """Load a model from a JSON file."""
        with open(Path(path), encoding='utf-8') as f:
            return cls.from_dict(json.load(f))


@dataclass(frozen=True)
class TestDataLanguageModel:
    """
    Distinct n-grams of a text, each with its back-off chain.

    Every chain is ``(g_k, g_k-1, ..., g_1)`` where ``g_i`` is the order-i
    prefix of ``g_k``. No two chains share the same ``g_k``.
    """
    __test__ = False

    order: int
    chains: Tuple[Tuple[Ngram, ...], ...]

    @classmethod
    def from_words(cls, words: Iterable[str], order: int,
                   alphabet: Callable[[str], bool] = any_letter) -> 'TestDataLanguageModel':
        """
        Build the test model of one order from word tokens.

        Args:
            words: Lowercased words of the text to classify
            order: N-gram order (1 to 5)
            alphabet: Predicate selecting the characters n-grams may contain
                (default: any letter or combining mark)

        Returns:
            Model whose chains are sorted by their top-order n-gram
        """
        validate_order(order)

        values = set()
        for word in words:
            if len(word) < order:
                continue
            values.update(sliding_windows(word, order, alphabet))

        chains = tuple(Ngram(value).backoff_chain() for value in sorted(values))
        return cls(order=order, chains=chains)

    def __len__(self) -> int:
        return len(self.chains)

    def __iter__(self) -> Iterator[Tuple[Ngram, ...]]:
        return iter(self.chains)

    def ngrams(self) -> List[Ngram]:
        """Top-order n-grams of all chains."""
        return [chain[0] for chain in self.chains]

    def to_strings(self) -> List[List[str]]:
        return [[ngram.value for ngram in chain] for chain in self.chains]


def build_training_model(corpus_lines: Iterable[str], language: Language, order: int,
                         alphabet: Callable[[str], bool],
                         lower_order_absolute_frequencies: Optional[Mapping[Ngram, int]] = None
                         ) -> TrainingDataLanguageModel:
    """Build a training model; see TrainingDataLanguageModel.from_corpus."""
    return TrainingDataLanguageModel.from_corpus(
        corpus_lines, language, order, alphabet, lower_order_absolute_frequencies
    )


def build_test_model(words: Iterable[str], order: int,
                     alphabet: Callable[[str], bool] = any_letter) -> TestDataLanguageModel:
    """Build a test model; see TestDataLanguageModel.from_words."""
    return TestDataLanguageModel.from_words(words, order, alphabet)
