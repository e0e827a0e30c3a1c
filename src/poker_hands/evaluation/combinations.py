"""k-combinations over arbitrary sequences."""
import itertools
from typing import Iterator, List, Sequence, Tuple, TypeVar

from poker_hands.errors import InvalidCombinationSize

T = TypeVar('T')


def _validate_size(items: Sequence[T], k: int) -> None:
    if k < 0:
        raise InvalidCombinationSize(f"Combination size must not be negative, got {k}")
    if k > len(items):
        raise InvalidCombinationSize(
            f"Cannot choose {k} items from a sequence of {len(items)}"
        )


def iter_combinations(items: Sequence[T], k: int) -> Iterator[Tuple[T, ...]]:
    """
    Lazily yield every k-subset of ``items``.

    Subsets come in lexicographic index order and keep the relative order
    of the input. The size is checked before anything is yielded.

    Raises:
        InvalidCombinationSize: If k is negative or larger than the sequence
    """
    items = list(items)
    _validate_size(items, k)
    return itertools.combinations(items, k)


def combinations(items: Sequence[T], k: int) -> List[List[T]]:
    """All k-subsets of ``items`` as lists, e.g. ([1, 2, 3], 2) -> [[1, 2], [1, 3], [2, 3]]."""
    return [list(combo) for combo in iter_combinations(items, k)]
