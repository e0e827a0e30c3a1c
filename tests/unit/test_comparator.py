"""Tests for hand comparison and tie-break rules."""
import itertools

import pytest
from poker_hands.core.card import parse_cards
from poker_hands.evaluation.comparator import compare_hands, hand_sort_key
from poker_hands.evaluation.hand import Hand
from poker_hands.evaluation.types import HandCategory


def make_hand(text):
    """Helper: build a Hand from space or comma separated card text."""
    return Hand(parse_cards(text))


@pytest.fixture
def one_of_each_category():
    """One hand per category, weakest first."""
    return [
        make_hand("AS QH 9C 6D 3S"),   # High card
        make_hand("TS TH 8C 4D 2S"),   # Pair
        make_hand("JS JH 4C 4D 9S"),   # Two pair
        make_hand("7S 7H 7C KD 2S"),   # Three of a kind
        make_hand("AS 2H 3C 4D 5S"),   # Low-ace straight
        make_hand("KC JC 9C 6C 3C"),   # Flush
        make_hand("2S 2H 2C 3D 3S"),   # Full house
        make_hand("3S 3H 3C 3D 2S"),   # Four of a kind
        make_hand("AD 2D 3D 4D 5D"),   # Low-ace straight flush
    ]


def test_category_monotonicity(one_of_each_category):
    """Test that any higher category beats any lower one."""
    hands = one_of_each_category
    assert [h.category for h in hands] == list(HandCategory)
    for (i, weaker), (j, stronger) in itertools.combinations(enumerate(hands), 2):
        assert compare_hands(stronger, weaker) == 1, (stronger, weaker)
        assert compare_hands(weaker, stronger) == -1, (weaker, stronger)


def test_reflexive(one_of_each_category):
    """Test that every hand ties with itself."""
    for hand in one_of_each_category:
        assert compare_hands(hand, hand) == 0


def test_antisymmetric_and_transitive():
    """Test order properties over a mixed sample of hands."""
    sample = [
        make_hand("AS AH KS KH 2C"),
        make_hand("AD AC QS QH KC"),
        make_hand("KS KH 8C 4D 2S"),
        make_hand("KD KC 8D 4C 3S"),
        make_hand("9S 8H 7C 6D 5S"),
        make_hand("TS 9H 8C 7D 6S"),
        make_hand("AC JC 9C 6C 3C"),
        make_hand("AH JH 9H 6H 2H"),
        make_hand("AS QH 9C 6D 3S"),
    ]
    for a, b in itertools.product(sample, repeat=2):
        assert compare_hands(a, b) == -compare_hands(b, a)
    for a, b, c in itertools.product(sample, repeat=3):
        if compare_hands(a, b) >= 0 and compare_hands(b, c) >= 0:
            assert compare_hands(a, c) >= 0


def test_low_ace_straight_loses_to_six_high():
    """Test the ace only counts as one inside A-2-3-4-5."""
    wheel = make_hand("AS 2H 3C 4D 5S")
    six_high = make_hand("2S 3H 4C 5D 6S")
    assert wheel.category == HandCategory.STRAIGHT
    assert wheel.effective_high_value == 5
    assert compare_hands(wheel, six_high) == -1
    assert compare_hands(six_high, wheel) == 1


def test_broadway_beats_king_high_straight():
    """Test the ace plays high in the top straight."""
    assert compare_hands(make_hand("AS KH QC JD TS"), make_hand("KS QH JC TD 9S")) == 1


def test_straight_flush_tie_break():
    """Test straight flushes compare by effective high card."""
    assert compare_hands(make_hand("9H 8H 7H 6H 5H"), make_hand("AD 2D 3D 4D 5D")) == 1
    assert compare_hands(make_hand("AS KS QS JS TS"), make_hand("KH QH JH TH 9H")) == 1


def test_two_pair_second_pair_decides():
    """Test that the lower pair decides after equal top pairs."""
    aces_and_kings = make_hand("AS AH KS KH 2C")
    aces_and_queens = make_hand("AD AC QS QH KC")
    assert compare_hands(aces_and_kings, aces_and_queens) == 1


def test_two_pair_kicker_decides():
    """Test the single kicker after two equal pairs."""
    assert compare_hands(make_hand("KS KC QD QH 9S"), make_hand("KH KD QS QC 8S")) == 1


def test_four_of_a_kind_tie_break():
    """Test quads compare by quad rank, then kicker."""
    assert compare_hands(make_hand("KS KH KC KD 2S"), make_hand("QS QH QC QD AS")) == 1
    assert compare_hands(make_hand("7S 7H 7C 7D AS"), make_hand("7S 7H 7C 7D KS")) == 1


def test_full_house_tie_break():
    """Test full houses compare by triple, then pair."""
    assert compare_hands(make_hand("KS KC KD JH JS"), make_hand("QS QC QD AH AS")) == 1
    assert compare_hands(make_hand("5S 5C 5D AH AS"), make_hand("5H 5C 5D KH KS")) == 1


def test_flush_tie_break():
    """Test flushes compare card by card from the top."""
    assert compare_hands(make_hand("AS KS QS JS 9S"), make_hand("KH QH JH 9H 8H")) == 1
    assert compare_hands(make_hand("AC JC 9C 6C 3C"), make_hand("AH JH 9H 6H 2H")) == 1
    assert compare_hands(make_hand("AC JC 9C 6C 3C"), make_hand("AH JH 9H 6H 3H")) == 0


def test_three_of_a_kind_kickers_exclude_triple():
    """Test trips compare by triple rank, then the two other cards."""
    assert compare_hands(make_hand("8S 8H 8C 2D 3S"), make_hand("7S 7H 7C AD KS")) == 1
    assert compare_hands(make_hand("8S 8H 8C KD 3S"), make_hand("8D 8H 8C QD JS")) == 1
    assert compare_hands(make_hand("8S 8H 8C KD 4S"), make_hand("8D 8H 8C KS 3S")) == 1


def test_pair_tie_break():
    """Test pairs compare by pair rank, then three kickers high to low."""
    assert compare_hands(make_hand("KS KC 2D 3H 4S"), make_hand("QS QC AD JH 9S")) == 1
    assert compare_hands(make_hand("KS KC JD 9H 8S"), make_hand("KH KD JC 7H 6S")) == 1
    assert compare_hands(make_hand("KS KC JD 9H 3S"), make_hand("KH KD JC 9S 2S")) == 1


def test_pair_kickers_ignore_the_pair():
    """Test a high pair card is not mistaken for a kicker."""
    # Kickers are A,4,3 vs A,5,2: the five decides
    low = make_hand("2S 2C AD 4H 3S")
    high = make_hand("2H 2D AC 5H 3C")
    assert compare_hands(high, low) == 1


def test_high_card_tie_break():
    """Test high-card hands compare every card down to the last."""
    assert compare_hands(make_hand("AS QH 9C 6D 3S"), make_hand("AH QD 9S 6C 2S")) == 1
    assert compare_hands(make_hand("KS QH 9C 6D 3S"), make_hand("AH 4D 5S 6C 2S")) == -1


def test_identical_hands_tie_both_ways():
    """Test that equal hands never report less or greater."""
    a = make_hand("AS KH 9C 6D 3S")
    b = make_hand("AD KS 9H 6C 3D")
    assert compare_hands(a, b) == 0
    assert compare_hands(b, a) == 0


def test_rich_comparisons():
    """Test that hands support <, >, <= and >= by strength."""
    pair = make_hand("TS TH 8C 4D 2S")
    trips = make_hand("7S 7H 7C KD 2S")
    same_pair = make_hand("TD TC 8S 4C 2H")
    assert pair < trips
    assert trips > pair
    assert pair <= same_pair and pair >= same_pair
    assert pair != same_pair  # Same strength, different cards


def test_sorting_and_max():
    """Test hand_sort_key and max() over hands."""
    hands = [
        make_hand("JS JH 4C 4D 9S"),
        make_hand("AS QH 9C 6D 3S"),
        make_hand("KS KH KC KD 2S"),
    ]
    ordered = sorted(hands, key=hand_sort_key)
    assert [h.category for h in ordered] == [
        HandCategory.HIGH_CARD, HandCategory.TWO_PAIR, HandCategory.FOUR_OF_A_KIND
    ]
    assert max(hands).category == HandCategory.FOUR_OF_A_KIND
