"""Players and showdown winner determination."""
import logging
from dataclasses import dataclass
from typing import List, Sequence

from poker_hands.core.card import Card, format_cards
from poker_hands.errors import DuplicateCard, InsufficientCandidates, InvalidHandSize
from poker_hands.evaluation.comparator import compare_hands
from poker_hands.evaluation.hand import Hand
from poker_hands.evaluation.hand_description import describe_hand_detailed
from poker_hands.evaluation.selector import best_hand

logger = logging.getLogger(__name__)

HOLE_CARDS = 2
MIN_COMMUNITY_CARDS = 3


@dataclass
class Player:
    """A seated player and their two hole cards."""
    name: str
    hole_cards: List[Card]

    def __post_init__(self):
        self.hole_cards = list(self.hole_cards)
        if len(self.hole_cards) != HOLE_CARDS:
            raise InvalidHandSize(
                f"{self.name} must hold {HOLE_CARDS} hole cards, got {len(self.hole_cards)}"
            )
        if self.hole_cards[0].identity == self.hole_cards[1].identity:
            raise DuplicateCard(f"{self.name} holds the same card twice: {self.hole_cards[0]}")

    def best_hand(self, community_cards: Sequence[Card]) -> Hand:
        """
        Best five-card hand using the hole cards and the board.

        Raises:
            InsufficientCandidates: If fewer than three community cards are out
        """
        if len(community_cards) < MIN_COMMUNITY_CARDS:
            raise InsufficientCandidates(
                f"Can't form a hand with fewer than {MIN_COMMUNITY_CARDS} community cards"
            )
        return best_hand(self.hole_cards + list(community_cards))

    def __str__(self) -> str:
        return f"{self.name} ({format_cards(self.hole_cards)})"


@dataclass
class HandResult:
    """Information about a player's best hand at showdown."""
    player: Player
    hand: Hand
    hand_description: str

    def __str__(self) -> str:
        return f"{self.player.name}: {self.hand_description} ({self.hand})"


@dataclass
class ShowdownResult:
    """Every player's best hand and the player(s) holding the strongest one."""
    results: List[HandResult]
    winners: List[Player]

    @property
    def split(self) -> bool:
        """Whether more than one player holds the winning hand."""
        return len(self.winners) > 1

    @property
    def winning_hand(self) -> Hand:
        return next(r.hand for r in self.results if r.player is self.winners[0])


def determine_winners(players: Sequence[Player], community_cards: Sequence[Card]) -> ShowdownResult:
    """
    Evaluate every player against the board and collect the winners.

    Tied players are all reported; splitting the pot is up to the caller.

    Raises:
        ValueError: If no players are given
    """
    if not players:
        raise ValueError("Showdown needs at least one player")

    results = []
    for player in players:
        hand = player.best_hand(community_cards)
        results.append(HandResult(player, hand, describe_hand_detailed(hand)))
        logger.debug(f"{player.name} shows {hand}")

    winners = [results[0]]
    for result in results[1:]:
        comparison = compare_hands(result.hand, winners[0].hand)
        if comparison > 0:
            winners = [result]
        elif comparison == 0:
            winners.append(result)

    names = ', '.join(r.player.name for r in winners)
    logger.info(f"Showdown won by {names} with {winners[0].hand_description}")
    return ShowdownResult(results=results, winners=[r.player for r in winners])
