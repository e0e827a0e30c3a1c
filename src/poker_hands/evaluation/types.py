"""Common types for poker evaluation."""
from enum import IntEnum


class HandCategory(IntEnum):
    """The nine standard hand classes; a higher value always wins."""
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIR = 3
    THREE_OF_A_KIND = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    FOUR_OF_A_KIND = 8
    STRAIGHT_FLUSH = 9

    @property
    def display_name(self) -> str:
        """Name as printed at the table, e.g. 'Three of a Kind'."""
        return CATEGORY_NAMES[self]


CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: 'High Card',
    HandCategory.PAIR: 'One Pair',
    HandCategory.TWO_PAIR: 'Two Pair',
    HandCategory.THREE_OF_A_KIND: 'Three of a Kind',
    HandCategory.STRAIGHT: 'Straight',
    HandCategory.FLUSH: 'Flush',
    HandCategory.FULL_HOUSE: 'Full House',
    HandCategory.FOUR_OF_A_KIND: 'Four of a Kind',
    HandCategory.STRAIGHT_FLUSH: 'Straight Flush',
}

HAND_SIZE = 5
