"""Best five-card hand out of a larger candidate set."""
import logging
from typing import List, Optional, Sequence

from poker_hands.core.card import Card, format_cards
from poker_hands.errors import DuplicateCard, InsufficientCandidates
from poker_hands.evaluation.combinations import iter_combinations
from poker_hands.evaluation.comparator import compare_hands
from poker_hands.evaluation.hand import Hand
from poker_hands.evaluation.types import HAND_SIZE

logger = logging.getLogger(__name__)


def _validate_candidates(cards: Sequence[Card]) -> None:
    if len(cards) < HAND_SIZE:
        raise InsufficientCandidates(
            f"Best hand needs at least {HAND_SIZE} cards, got {len(cards)}"
        )
    if len({card.identity for card in cards}) != len(cards):
        raise DuplicateCard(f"Candidate set contains a repeated card: {format_cards(cards)}")


def best_hand(cards: Sequence[Card]) -> Hand:
    """
    Find the strongest five-card hand in a candidate set.

    Every 5-card subset is classified and the maximum under
    ``compare_hands`` is kept. When several subsets are equally strong the
    first one enumerated is returned.

    Args:
        cards: Five or more candidate cards, e.g. hole cards plus the board

    Returns:
        The best Hand

    Raises:
        InsufficientCandidates: If fewer than five cards are given
        DuplicateCard: If the same card appears twice
    """
    cards = list(cards)
    _validate_candidates(cards)

    best: Optional[Hand] = None
    for five_cards in iter_combinations(cards, HAND_SIZE):
        hand = Hand(five_cards)
        if best is None or compare_hands(hand, best) > 0:
            best = hand

    logger.debug(f"Best hand from {format_cards(cards)}: {best} ({best.category.display_name})")
    return best


def rank_hands(candidate_sets: Sequence[Sequence[Card]]) -> List[int]:
    """
    Indexes of the candidate sets whose best hands are jointly strongest.

    More than one index means the best hands tie.
    """
    if not candidate_sets:
        return []

    best_hands = [best_hand(cards) for cards in candidate_sets]
    winners = [0]
    for index in range(1, len(best_hands)):
        result = compare_hands(best_hands[index], best_hands[winners[0]])
        if result > 0:
            winners = [index]
        elif result == 0:
            winners.append(index)
    return winners
