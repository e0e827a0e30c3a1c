"""Hand comparison: category first, then the category's tie-break rule."""
import functools
import logging
from typing import TYPE_CHECKING, Callable, Dict, Sequence

from poker_hands.evaluation.types import HandCategory

if TYPE_CHECKING:
    from poker_hands.evaluation.hand import Hand

logger = logging.getLogger(__name__)


def _cmp(a: int, b: int) -> int:
    return (a > b) - (a < b)


def _compare_sequences(a: Sequence[int], b: Sequence[int]) -> int:
    """Compare value lists position by position; the first difference decides."""
    for a_value, b_value in zip(a, b):
        if a_value != b_value:
            return _cmp(a_value, b_value)
    return 0


def _compare_straight(a: 'Hand', b: 'Hand') -> int:
    # The low-ace straight is the only place an ace plays low
    return _cmp(a.effective_high_value, b.effective_high_value)


def _compare_four_of_a_kind(a: 'Hand', b: 'Hand') -> int:
    a_quad = a.ranks_with_count(4)[0]
    b_quad = b.ranks_with_count(4)[0]
    if a_quad != b_quad:
        return _cmp(a_quad, b_quad)
    return _compare_sequences(a.kickers(a_quad), b.kickers(b_quad))


def _compare_full_house(a: 'Hand', b: 'Hand') -> int:
    return _compare_sequences(
        [a.ranks_with_count(3)[0], a.ranks_with_count(2)[0]],
        [b.ranks_with_count(3)[0], b.ranks_with_count(2)[0]],
    )


def _compare_high_cards(a: 'Hand', b: 'Hand') -> int:
    return _compare_sequences(a.kickers(), b.kickers())


def _compare_three_of_a_kind(a: 'Hand', b: 'Hand') -> int:
    a_trips = a.ranks_with_count(3)[0]
    b_trips = b.ranks_with_count(3)[0]
    if a_trips != b_trips:
        return _cmp(a_trips, b_trips)
    return _compare_sequences(a.kickers(a_trips), b.kickers(b_trips))


def _compare_two_pair(a: 'Hand', b: 'Hand') -> int:
    a_high, a_low = a.ranks_with_count(2)
    b_high, b_low = b.ranks_with_count(2)
    return _compare_sequences(
        [a_high, a_low] + a.kickers(a_high, a_low),
        [b_high, b_low] + b.kickers(b_high, b_low),
    )


def _compare_pair(a: 'Hand', b: 'Hand') -> int:
    a_pair = a.ranks_with_count(2)[0]
    b_pair = b.ranks_with_count(2)[0]
    if a_pair != b_pair:
        return _cmp(a_pair, b_pair)
    return _compare_sequences(a.kickers(a_pair), b.kickers(b_pair))


TIE_BREAKERS: Dict[HandCategory, Callable[['Hand', 'Hand'], int]] = {
    HandCategory.STRAIGHT_FLUSH: _compare_straight,
    HandCategory.FOUR_OF_A_KIND: _compare_four_of_a_kind,
    HandCategory.FULL_HOUSE: _compare_full_house,
    HandCategory.FLUSH: _compare_high_cards,
    HandCategory.STRAIGHT: _compare_straight,
    HandCategory.THREE_OF_A_KIND: _compare_three_of_a_kind,
    HandCategory.TWO_PAIR: _compare_two_pair,
    HandCategory.PAIR: _compare_pair,
    HandCategory.HIGH_CARD: _compare_high_cards,
}


def compare_hands(a: 'Hand', b: 'Hand') -> int:
    """
    Compare two classified hands.

    Args:
        a: First hand to compare
        b: Second hand to compare

    Returns:
        1 if a wins, -1 if b wins, 0 if tie
    """
    a_category = a.category
    b_category = b.category
    if a_category != b_category:
        return _cmp(a_category, b_category)

    result = TIE_BREAKERS[a_category](a, b)
    if result == 0:
        logger.debug(f"Tie between {a} and {b} ({a_category.display_name})")
    return result


# For sorted(), min() and max() over hands
hand_sort_key = functools.cmp_to_key(compare_hands)
