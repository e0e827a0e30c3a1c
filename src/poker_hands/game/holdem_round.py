"""A single Texas Hold'em deal from hole cards to the river."""
import logging
import random
from typing import List, Optional, Sequence

from poker_hands.core.card import Card, format_cards
from poker_hands.core.deck import Deck
from poker_hands.game.showdown import HOLE_CARDS, Player, ShowdownResult, determine_winners

logger = logging.getLogger(__name__)

FLOP_CARDS = 3
BOARD_SIZE = 5


class HoldemRound:
    """
    Deals hole cards, then the flop, turn and river, then picks the winner.

    Attributes:
        deck: Remaining cards
        players: Players in seat order
        community_cards: Cards on the board
    """

    def __init__(self, names: Sequence[str], rng: Optional[random.Random] = None):
        """
        Shuffle a fresh deck and deal two hole cards to each player.

        Args:
            names: Player names in seat order
            rng: Random source for the shuffle; pass a seeded one for repeatable deals

        Raises:
            ValueError: If no names are given or there are too many players for one deck
        """
        if not names:
            raise ValueError("A round needs at least one player")
        if len(names) * HOLE_CARDS + BOARD_SIZE > 52:
            raise ValueError(f"Too many players for one deck: {len(names)}")

        self.deck = Deck(rng=rng).shuffled()
        self.players: List[Player] = [
            Player(name, self.deck.deal(HOLE_CARDS)) for name in names
        ]
        self.community_cards: List[Card] = []
        logger.info(f"Dealt hole cards to {len(self.players)} players")

    def _deal_street(self, name: str, expected_board: int, count: int) -> None:
        if len(self.community_cards) != expected_board:
            raise ValueError(
                f"Cannot deal the {name} with {len(self.community_cards)} community cards out"
            )
        self.deck.deal_to(self.community_cards, count)
        logger.info(f"{name.capitalize()}: {format_cards(self.community_cards)}")

    def flop(self) -> None:
        self._deal_street('flop', 0, FLOP_CARDS)

    def turn(self) -> None:
        self._deal_street('turn', FLOP_CARDS, 1)

    def river(self) -> None:
        self._deal_street('river', FLOP_CARDS + 1, 1)

    def deal_board(self) -> None:
        """Deal whatever is left of the flop, turn and river."""
        if not self.community_cards:
            self.flop()
        if len(self.community_cards) == FLOP_CARDS:
            self.turn()
        if len(self.community_cards) == FLOP_CARDS + 1:
            self.river()

    def winners(self) -> ShowdownResult:
        """Showdown against the current board (at least the flop must be out)."""
        return determine_winners(self.players, self.community_cards)

    def __str__(self) -> str:
        lines = []
        if self.community_cards:
            lines.append(f"Community Cards: {format_cards(self.community_cards)}")
        lines.extend(str(player) for player in self.players)
        return '\n'.join(lines)
