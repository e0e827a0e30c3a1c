"""Errors raised by the hand evaluation engine."""


class PokerHandError(ValueError):
    """Base class for every caller-correctable input problem."""


class InvalidCardFormat(PokerHandError):
    """Card text or rank/suit values could not be understood."""


class InvalidHandSize(PokerHandError):
    """A hand was built from the wrong number of cards."""


class InsufficientCandidates(PokerHandError):
    """Fewer than five cards were offered to the best-hand selector."""


class InvalidCombinationSize(PokerHandError):
    """Requested combination size does not fit the input sequence."""


class DuplicateCard(PokerHandError):
    """The same physical card appears more than once."""


class DeckExhausted(PokerHandError):
    """More cards were requested than the deck holds."""
