"""Poker hand evaluation engine."""

from poker_hands.core.card import Card, Suit, compare_cards, parse_cards
from poker_hands.core.deck import Deck
from poker_hands.errors import (
    DeckExhausted,
    DuplicateCard,
    InsufficientCandidates,
    InvalidCardFormat,
    InvalidCombinationSize,
    InvalidHandSize,
    PokerHandError,
)
from poker_hands.evaluation.combinations import combinations
from poker_hands.evaluation.comparator import compare_hands, hand_sort_key
from poker_hands.evaluation.hand import Hand, classify
from poker_hands.evaluation.selector import best_hand, rank_hands
from poker_hands.evaluation.types import HandCategory

__version__ = "0.1.0"
__all__ = [
    "Card",
    "Suit",
    "compare_cards",
    "parse_cards",
    "Deck",
    "Hand",
    "HandCategory",
    "classify",
    "compare_hands",
    "hand_sort_key",
    "best_hand",
    "rank_hands",
    "combinations",
    "PokerHandError",
    "InvalidCardFormat",
    "InvalidHandSize",
    "InsufficientCandidates",
    "InvalidCombinationSize",
    "DuplicateCard",
    "DeckExhausted",
]
