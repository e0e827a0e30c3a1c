"""Five-card hand classification."""
import logging
from collections import Counter
from typing import Dict, Iterable, List, Sequence, Tuple

from poker_hands.core.card import ACE, Card, Suit, format_cards
from poker_hands.errors import DuplicateCard, InvalidHandSize
from poker_hands.evaluation.comparator import compare_hands
from poker_hands.evaluation.types import HAND_SIZE, HandCategory

logger = logging.getLogger(__name__)

# Tie order for cards of equal rank, so a hand always prints the same way
SUIT_ORDER = {
    Suit.SPADES: 0,
    Suit.HEARTS: 1,
    Suit.CLUBS: 2,
    Suit.DIAMONDS: 3,
}

LOW_ACE_STRAIGHT = (2, 3, 4, 5, ACE)


class Hand:
    """
    Exactly five cards plus their rank-count profile.

    Cards are sorted ascending by rank when the hand is built and the
    profile (rank value -> number of cards of that rank) is computed once.
    A Hand is never mutated afterwards.

    ``==`` compares the cards themselves (rank and suit); ``<`` and
    friends compare poker strength. Use ``compare_hands`` to detect a tie
    between hands that hold different suits.
    """

    __slots__ = ('_cards', '_profile')

    def __init__(self, cards: Iterable[Card]):
        cards = tuple(cards)
        if len(cards) != HAND_SIZE:
            raise InvalidHandSize(
                f"A hand requires exactly {HAND_SIZE} cards, got {len(cards)}"
            )
        for card in cards:
            if not isinstance(card, Card):
                raise TypeError(f"Expected Card, got {type(card).__name__}")
        if len({card.identity for card in cards}) != HAND_SIZE:
            raise DuplicateCard(f"Hand contains a repeated card: {format_cards(cards)}")

        self._cards: Tuple[Card, ...] = tuple(
            sorted(cards, key=lambda c: (c.value, SUIT_ORDER[c.suit]))
        )
        self._profile: Dict[int, int] = dict(Counter(c.value for c in self._cards))

    @property
    def cards(self) -> Tuple[Card, ...]:
        """Cards in ascending rank order."""
        return self._cards

    @property
    def values(self) -> List[int]:
        """Rank values in ascending order."""
        return [card.value for card in self._cards]

    @property
    def profile(self) -> Dict[int, int]:
        """Copy of the rank-count profile."""
        return dict(self._profile)

    def ranks_with_count(self, count: int) -> List[int]:
        """Ranks held exactly ``count`` times, highest first."""
        return sorted(
            (rank for rank, n in self._profile.items() if n == count),
            reverse=True
        )

    def kickers(self, *excluded_ranks: int) -> List[int]:
        """Values of the cards outside the given ranks, highest first."""
        return [
            card.value for card in reversed(self._cards)
            if card.value not in excluded_ranks
        ]

    @property
    def high_card(self) -> Card:
        """Highest card of the hand."""
        return self._cards[-1]

    @property
    def has_pair(self) -> bool:
        """At least one rank held exactly twice."""
        return 2 in self._profile.values()

    @property
    def has_three_of_a_kind(self) -> bool:
        """A rank held exactly three times."""
        return 3 in self._profile.values()

    @property
    def has_two_pair(self) -> bool:
        """Two different ranks held twice each."""
        return list(self._profile.values()).count(2) == 2

    @property
    def is_four_of_a_kind(self) -> bool:
        """A rank held four times."""
        return 4 in self._profile.values()

    @property
    def is_full_house(self) -> bool:
        """Three of one rank and two of another."""
        return self.has_three_of_a_kind and self.has_pair

    @property
    def is_flush(self) -> bool:
        """All five cards share a suit."""
        suit = self._cards[0].suit
        return all(card.suit == suit for card in self._cards)

    @property
    def is_low_ace_straight(self) -> bool:
        """A-2-3-4-5, where the ace plays as a one."""
        return tuple(self.values) == LOW_ACE_STRAIGHT

    @property
    def is_straight(self) -> bool:
        """Five consecutive values, the wheel included."""
        if self.is_low_ace_straight:
            return True
        values = self.values
        return all(high - low == 1 for low, high in zip(values, values[1:]))

    @property
    def is_straight_flush(self) -> bool:
        """Straight and flush at once."""
        return self.is_straight and self.is_flush

    @property
    def effective_high_value(self) -> int:
        """Value of the top card, except a low-ace straight which tops out at 5."""
        if self.is_low_ace_straight:
            return 5
        return self.high_card.value

    @property
    def category(self) -> HandCategory:
        """Strongest category the hand satisfies."""
        if self.is_straight_flush:
            return HandCategory.STRAIGHT_FLUSH
        if self.is_four_of_a_kind:
            return HandCategory.FOUR_OF_A_KIND
        if self.is_full_house:
            return HandCategory.FULL_HOUSE
        if self.is_flush:
            return HandCategory.FLUSH
        if self.is_straight:
            return HandCategory.STRAIGHT
        if self.has_three_of_a_kind:
            return HandCategory.THREE_OF_A_KIND
        if self.has_two_pair:
            return HandCategory.TWO_PAIR
        if self.has_pair:
            return HandCategory.PAIR
        return HandCategory.HIGH_CARD

    @classmethod
    def parse(cls, hand_str: str) -> 'Hand':
        """
        Build a Hand from text such as 'AS, KS, QS, JS, TS'.

        Raises:
            InvalidCardFormat: If any card is malformed
            InvalidHandSize: If the text does not hold five cards
        """
        tokens = [token.strip() for token in hand_str.split(',')]
        if len(tokens) != HAND_SIZE:
            raise InvalidHandSize(
                f"A hand requires exactly {HAND_SIZE} cards, got {len(tokens)}: {hand_str!r}"
            )
        return cls(Card.parse(token) for token in tokens)

    def __str__(self) -> str:
        return format_cards(self._cards)

    def __repr__(self) -> str:
        return f"Hand('{self}')"

    def __iter__(self):
        return iter(self._cards)

    def __len__(self) -> int:
        return HAND_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return [c.identity for c in self._cards] == [c.identity for c in other._cards]

    def __hash__(self) -> int:
        return hash(tuple(c.identity for c in self._cards))

    def __lt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) < 0

    def __le__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) <= 0

    def __gt__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) > 0

    def __ge__(self, other: 'Hand') -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return compare_hands(self, other) >= 0


def classify(cards: Sequence[Card]) -> Hand:
    """Build and classify a hand from exactly five cards."""
    hand = Hand(cards)
    logger.debug(f"Classified {hand} as {hand.category.display_name}")
    return hand
