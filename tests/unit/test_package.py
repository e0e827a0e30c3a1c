"""Tests for the top-level package exports."""
import poker_hands
from poker_hands import Card, HandCategory, best_hand, classify, compare_hands, combinations


def test_public_api():
    """Test the engine is usable from the package root."""
    hand = classify([Card.parse(c) for c in ("AS", "2H", "3C", "4D", "5S")])
    assert hand.category == HandCategory.STRAIGHT
    best = best_hand([Card.parse(c) for c in ("2S", "3H", "4C", "5D", "6S", "KD", "KC")])
    assert compare_hands(best, hand) == 1
    assert combinations([1, 2, 3], 2) == [[1, 2], [1, 3], [2, 3]]


def test_all_exports_exist():
    """Test every name in __all__ is importable."""
    for name in poker_hands.__all__:
        assert hasattr(poker_hands, name), name
