"""Deck implementation."""
import logging
import random
from typing import List, Optional

from poker_hands.core.card import MAX_RANK, MIN_RANK, Card, Suit, format_cards
from poker_hands.errors import DeckExhausted

logger = logging.getLogger(__name__)


class Deck:
    """
    A deck of playing cards.

    Shuffling draws only from the random source handed to the deck, so a
    seeded ``random.Random`` reproduces the same order every time.

    Attributes:
        cards: List of cards in the deck; the top of the deck is the end
    """

    def __init__(self, cards: Optional[List[Card]] = None, rng: Optional[random.Random] = None):
        """
        Initialize a new deck.

        Args:
            cards: Cards to start with; a fresh 52-card deck when omitted
            rng: Random source used by shuffle()
        """
        self.rng = rng if rng is not None else random.Random()
        if cards is None:
            self.cards: List[Card] = [
                Card(rank=rank, suit=suit)
                for suit in Suit
                for rank in range(MIN_RANK, MAX_RANK + 1)
            ]
        else:
            self.cards = list(cards)

    @classmethod
    def seeded(cls, seed: int) -> 'Deck':
        """Fresh deck whose shuffles are reproducible from ``seed``."""
        return cls(rng=random.Random(seed))

    def shuffle(self) -> None:
        """Shuffle the deck in place."""
        self.rng.shuffle(self.cards)

    def shuffled(self) -> 'Deck':
        """Shuffled copy of the deck sharing the same random source."""
        deck = Deck(self.cards, rng=self.rng)
        deck.shuffle()
        return deck

    def deal(self, count: int) -> List[Card]:
        """
        Deal cards from the top of the deck.

        Args:
            count: Number of cards to deal

        Raises:
            DeckExhausted: If count is negative or the deck holds fewer cards
        """
        if count < 0:
            raise DeckExhausted(f"Cannot deal a negative number of cards: {count}")
        if count > len(self.cards):
            raise DeckExhausted(
                f"Cannot deal {count} cards from a deck of {len(self.cards)}"
            )
        dealt = self.cards[len(self.cards) - count:]
        del self.cards[len(self.cards) - count:]
        logger.debug(f"Dealt {format_cards(dealt)}, {len(self.cards)} left")
        return dealt

    def deal_to(self, out: List[Card], count: int) -> None:
        """Deal ``count`` cards onto the end of ``out``."""
        out.extend(self.deal(count))

    def add(self, card: Card) -> None:
        """Put a card on top of the deck."""
        self.cards.append(card)

    def remove(self, card: Card) -> Card:
        """
        Remove a specific card, matching rank and suit.

        Raises:
            ValueError: If card not in deck
        """
        # list.remove would match on rank alone
        for index, deck_card in enumerate(self.cards):
            if deck_card.identity == card.identity:
                return self.cards.pop(index)
        raise ValueError(f"Card {card} not in deck")

    def __len__(self) -> int:
        return len(self.cards)

    def __str__(self) -> str:
        return format_cards(self.cards)
