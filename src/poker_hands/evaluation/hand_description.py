"""Human-readable names for classified hands."""
from poker_hands.core.card import ACE, RANK_NAMES, RANK_PLURALS
from poker_hands.evaluation.hand import Hand
from poker_hands.evaluation.types import HandCategory

ROYAL_FLUSH = 'Royal Flush'


def _is_royal(hand: Hand) -> bool:
    return hand.is_straight_flush and hand.effective_high_value == ACE


def describe_hand(hand: Hand) -> str:
    """Get a basic description of the hand, e.g. 'Full House'."""
    if _is_royal(hand):
        return ROYAL_FLUSH
    return hand.category.display_name


def describe_hand_detailed(hand: Hand) -> str:
    """Get a detailed description of the hand, e.g. 'Full House, Kings over Jacks'."""
    category = hand.category

    if _is_royal(hand):
        return ROYAL_FLUSH
    if category in (HandCategory.STRAIGHT_FLUSH, HandCategory.STRAIGHT):
        return f"{RANK_NAMES[hand.effective_high_value]}-high {category.display_name}"
    if category == HandCategory.FOUR_OF_A_KIND:
        return f"Four {RANK_PLURALS[hand.ranks_with_count(4)[0]]}"
    if category == HandCategory.FULL_HOUSE:
        trips = RANK_PLURALS[hand.ranks_with_count(3)[0]]
        pair = RANK_PLURALS[hand.ranks_with_count(2)[0]]
        return f"Full House, {trips} over {pair}"
    if category == HandCategory.FLUSH:
        return f"{RANK_NAMES[hand.high_card.value]}-high Flush"
    if category == HandCategory.THREE_OF_A_KIND:
        return f"Three {RANK_PLURALS[hand.ranks_with_count(3)[0]]}"
    if category == HandCategory.TWO_PAIR:
        high, low = hand.ranks_with_count(2)
        return f"Two Pair, {RANK_PLURALS[high]} and {RANK_PLURALS[low]}"
    if category == HandCategory.PAIR:
        return f"Pair of {RANK_PLURALS[hand.ranks_with_count(2)[0]]}"
    return f"{RANK_NAMES[hand.high_card.value]} High"
