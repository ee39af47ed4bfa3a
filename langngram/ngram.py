"""
Character N-grams

This module defines the Ngram value type, its back-off chain and the
sliding-window extraction shared by the training and test model builders.
"""

from dataclasses import dataclass
from typing import Callable, Generator, Optional, Tuple


MIN_ORDER = 1
MAX_ORDER = 5


def validate_order(order: int) -> None:
    """Raise ValueError unless ``order`` is an integer in [MIN_ORDER, MAX_ORDER]."""
    if isinstance(order, bool) or not isinstance(order, int):
        raise ValueError(f"N-gram order must be an integer, got {order!r}")
    if not MIN_ORDER <= order <= MAX_ORDER:
        raise ValueError(
            f"N-gram order must be between {MIN_ORDER} and {MAX_ORDER}, got {order}"
        )


@dataclass(frozen=True, order=True)
class Ngram:
    """
    A character n-gram of length 1 to 5.

    Ngrams are plain values: two ngrams are equal iff their strings are
    equal, and they sort lexicographically by string.

    Attributes:
        value: The underlying string
    """
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str):
            raise ValueError(f"N-gram value must be a string, got {self.value!r}")
        if not MIN_ORDER <= len(self.value) <= MAX_ORDER:
            raise ValueError(
                f"N-gram length must be between {MIN_ORDER} and {MAX_ORDER}, "
                f"got {len(self.value)} for {self.value!r}"
            )

    def __str__(self) -> str:
        return self.value

    @property
    def order(self) -> int:
        return len(self.value)

    def prefix(self) -> Optional['Ngram']:
        """Return the ngram of order k-1 (last character dropped), None for unigrams."""
        if self.order == 1:
            return None
        return Ngram(self.value[:-1])

    def backoff_chain(self) -> Tuple['Ngram', ...]:
        """
        Return this ngram followed by all of its successively shorter prefixes.

        Example:
            Ngram("testi").backoff_chain() ->
                (testi, test, tes, te, t)
        """
        return tuple(Ngram(self.value[:end]) for end in range(self.order, 0, -1))


def sliding_windows(text: str, order: int,
                    alphabet: Callable[[str], bool]) -> Generator[str, None, None]:
    """
    Yield every window of ``order`` consecutive characters admitted by ``alphabet``.

    A rejected character ends the current run, so no window spans it.

    Args:
        text: Text to scan (a corpus line or a single word)
        order: Window length
        alphabet: Per-character predicate

    Yields:
        Window strings in order of their start position
    """
    run_start = 0
    for idx, char in enumerate(text):
        if not alphabet(char):
            run_start = idx + 1
            continue
        if idx - run_start + 1 >= order:
            yield text[idx - order + 1:idx + 1]
