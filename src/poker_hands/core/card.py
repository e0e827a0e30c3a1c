"""Card related classes and utilities."""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from poker_hands.errors import InvalidCardFormat

# Rank characters in ascending order, the first one being rank 2
RANK_CHARS = "23456789TJQKA"
MIN_RANK = 2
MAX_RANK = 14
ACE = 14

RANK_NAMES = {
    2: 'Two', 3: 'Three', 4: 'Four', 5: 'Five', 6: 'Six', 7: 'Seven',
    8: 'Eight', 9: 'Nine', 10: 'Ten', 11: 'Jack', 12: 'Queen',
    13: 'King', 14: 'Ace',
}

RANK_PLURALS = {
    rank: ('Sixes' if rank == 6 else f"{name}s")
    for rank, name in RANK_NAMES.items()
}


class Suit(Enum):
    """Card suits."""
    SPADES = 'S'
    HEARTS = 'H'
    CLUBS = 'C'
    DIAMONDS = 'D'

    def __str__(self) -> str:
        return self.value


def rank_char(rank: int) -> str:
    """Single character used to print a rank value."""
    return RANK_CHARS[rank - MIN_RANK]


@dataclass(frozen=True, eq=False)
class Card:
    """
    Represents a playing card.

    Equality, ordering and hashing use the rank value only, so two cards
    of the same rank in different suits are equal in strength. Use
    ``identity`` to tell physical cards apart.

    Attributes:
        rank: Rank value, 2 (deuce) to 14 (ace)
        suit: Card suit
    """
    rank: int
    suit: Suit

    def __post_init__(self):
        if isinstance(self.rank, bool) or not isinstance(self.rank, int):
            raise InvalidCardFormat(f"Rank must be an integer, got {self.rank!r}")
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise InvalidCardFormat(f"Rank out of range {MIN_RANK}-{MAX_RANK}: {self.rank}")
        if not isinstance(self.suit, Suit):
            try:
                suit = Suit(self.suit)
            except ValueError:
                raise InvalidCardFormat(f"Invalid suit: {self.suit!r}")
            object.__setattr__(self, 'suit', suit)

    @property
    def value(self) -> int:
        """Rank value of the card (2-14)."""
        return self.rank

    @property
    def identity(self) -> Tuple[int, Suit]:
        """Rank and suit together; unique per physical card in a deck."""
        return (self.rank, self.suit)

    def __str__(self) -> str:
        """String representation in format 'AS' for Ace of spades."""
        return f"{rank_char(self.rank)}{self.suit}"

    def __repr__(self) -> str:
        return f"Card('{self}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank

    def __hash__(self) -> int:
        return hash(self.rank)

    @classmethod
    def parse(cls, card_str: str) -> 'Card':
        """
        Create a Card from a string representation.

        Args:
            card_str: Rank character then suit character, e.g. 'AS' or 'TD'

        Returns:
            Card instance

        Raises:
            InvalidCardFormat: If string format is invalid
        """
        if not isinstance(card_str, str) or len(card_str) != 2:
            raise InvalidCardFormat(f"Invalid card string: {card_str!r}")

        rank_str, suit_str = card_str[0], card_str[1]
        rank_index = RANK_CHARS.find(rank_str)
        if rank_index < 0:
            raise InvalidCardFormat(f"Invalid rank in: {card_str}")
        try:
            suit = Suit(suit_str)
        except ValueError:
            raise InvalidCardFormat(f"Invalid suit in: {card_str}")

        return cls(rank=rank_index + MIN_RANK, suit=suit)


def compare_cards(a: Card, b: Card) -> int:
    """Compare two cards by rank value: 1 if a is higher, -1 if lower, 0 if equal."""
    return (a.value > b.value) - (a.value < b.value)


def parse_cards(text: str) -> List[Card]:
    """Parse a comma and/or whitespace separated list such as 'AS, KH QD'."""
    tokens = [token for token in re.split(r"[,\s]+", text.strip()) if token]
    return [Card.parse(token) for token in tokens]


def format_cards(cards: Iterable[Card]) -> str:
    """Join cards as a comma separated list, in the order given."""
    return ', '.join(str(card) for card in cards)
