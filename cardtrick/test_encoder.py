""" Tests for `Cards`, their ordering, and the encoder. """

import pytest

from cardtrick.card import (
    Card,
    full_deck,
    parse_card,
    Rank,
    SCAN_ORDER,
    Suit
)
from cardtrick.encoder import clock_distance, encode, permute, select_pair
from cardtrick.errors import DuplicateCard, InvalidHandSize
from cardtrick.ordering import compare, rank_key, sort_cards


@pytest.fixture()
def hand():
    return [
        Card(3, Suit.CLUBS),
        Card(9, Suit.CLUBS),
        Card(2, Suit.HEARTS),
        Card(13, Suit.SPADES),
        Card(7, Suit.DIAMONDS)
    ]


def test_card_identity():
    assert Card(1, Suit.SPADES) == Card(Rank(1), Suit.SPADES)
    assert Card(1, Suit.SPADES) != Card(1, Suit.HEARTS)
    assert len({Card(12, Suit.HEARTS), Card(12, Suit.HEARTS)}) == 1
    assert parse_card('10h') == Card(10, Suit.HEARTS)
    assert parse_card('KS').serialize() == 'KS'
    with pytest.raises(AttributeError):
        Card(4, Suit.CLUBS).rank = Rank(5)


def test_invalid_cards():
    with pytest.raises(ValueError):
        Card(0, Suit.CLUBS)
    with pytest.raises(ValueError):
        Card(14, Suit.CLUBS)
    # Only whole numbers are ranks, and True is not the Ace
    for rank in (0.5, 13.5, 3.0, '3', True, None):
        with pytest.raises(ValueError):
            Card(rank, Suit.CLUBS)
        with pytest.raises(ValueError):
            Rank.lift(rank)
    with pytest.raises(ValueError):
        Card(3, 'C')
    assert Rank(3) == 3 and Rank(3) != 0.5 and Rank(3) != '3'
    for text in ('ZC', '3X', 'C', ''):
        with pytest.raises(ValueError):
            parse_card(text)


def test_rank_key_is_a_total_order():
    keys = sorted(rank_key(c) for c in full_deck())
    assert keys == list(range(52))
    assert rank_key(Card(2, Suit.HEARTS)) == 6
    # Rank dominates, the suit breaks ties
    assert compare(Card(5, Suit.SPADES), Card(6, Suit.CLUBS)) < 0
    assert compare(Card(5, Suit.DIAMONDS), Card(5, Suit.CLUBS)) > 0
    assert sort_cards([Card(5, Suit.HEARTS),
                       Card(5, Suit.CLUBS),
                       Card(5, Suit.DIAMONDS)]) == (Card(5, Suit.CLUBS),
                                                    Card(5, Suit.DIAMONDS),
                                                    Card(5, Suit.HEARTS))


def test_deck_layout():
    deck = full_deck()
    assert len(set(deck)) == 52
    assert [deck[i * 13].suit for i in range(4)] == list(SCAN_ORDER)


def test_clock_distance():
    assert clock_distance(Card(3, Suit.CLUBS), Card(9, Suit.CLUBS)) == 6
    assert clock_distance(Card(9, Suit.CLUBS), Card(3, Suit.CLUBS)) == 7
    assert clock_distance(Card(13, Suit.HEARTS), Card(2, Suit.HEARTS)) == 2


def test_encode_example(hand):
    a = encode(hand)
    assert a.indicator == Card(3, Suit.CLUBS)
    assert a.hidden == Card(9, Suit.CLUBS)
    assert a.offset == 6
    # Small, Medium, Large are 2H, 7D, KS. Offset 6 lays them out large first
    assert a.code_cards == (Card(13, Suit.SPADES),
                            Card(7, Suit.DIAMONDS),
                            Card(2, Suit.HEARTS))
    assert a.serialize() == '3C KS 7D 2H'


def test_direction_does_not_depend_on_hand_order(hand):
    hand[0], hand[1] = hand[1], hand[0]
    a = encode(hand)
    assert a.indicator == Card(3, Suit.CLUBS)
    assert a.hidden == Card(9, Suit.CLUBS)


def test_offset_wraps_past_king():
    a = encode([
        Card(13, Suit.HEARTS),
        Card(2, Suit.HEARTS),
        Card(9, Suit.HEARTS),
        Card(3, Suit.DIAMONDS),
        Card(4, Suit.SPADES)
    ])
    # The first two hearts form the pair, and 2 is two ahead of the King
    assert a.indicator == Card(13, Suit.HEARTS)
    assert a.hidden == Card(2, Suit.HEARTS)
    assert a.offset == 2
    assert a.code_cards == (Card(3, Suit.DIAMONDS),
                            Card(9, Suit.HEARTS),
                            Card(4, Suit.SPADES))


def test_scan_order_picks_spades_first():
    cards = [
        Card(2, Suit.CLUBS),
        Card(5, Suit.CLUBS),
        Card(4, Suit.SPADES),
        Card(10, Suit.SPADES),
        Card(7, Suit.HEARTS)
    ]
    assert select_pair(cards) == (Card(4, Suit.SPADES), Card(10, Suit.SPADES))
    a = encode(cards)
    assert a.indicator == Card(4, Suit.SPADES)
    assert a.hidden == Card(10, Suit.SPADES)
    assert a.code_cards == (Card(7, Suit.HEARTS),
                            Card(5, Suit.CLUBS),
                            Card(2, Suit.CLUBS))


def test_permutation_table():
    s, m, l = 'S', 'M', 'L'
    assert permute((s, m, l), 1) == (s, m, l)
    assert permute((s, m, l), 2) == (s, l, m)
    assert permute((s, m, l), 3) == (m, s, l)
    assert permute((s, m, l), 4) == (m, l, s)
    assert permute((s, m, l), 5) == (l, s, m)
    assert permute((s, m, l), 6) == (l, m, s)
    for offset in (0, 7):
        with pytest.raises(ValueError):
            permute((s, m, l), offset)


def test_partition_and_suit(hand):
    a = encode(hand)
    assert a.indicator.suit == a.hidden.suit
    assert sorted([a.indicator, a.hidden, *a.code_cards],
                  key=rank_key) == sorted(hand, key=rank_key)


def test_deterministic(hand):
    assert encode(hand) == encode(hand)
    assert encode(hand) == encode(tuple(hand))


def test_unordered_hands_encode_by_value():
    cards = [
        Card(12, Suit.SPADES),
        Card(1, Suit.SPADES),
        Card(6, Suit.SPADES),
        Card(1, Suit.HEARTS),
        Card(2, Suit.HEARTS)
    ]
    # Sets built in different orders are equal, and encode the same way
    hands = [frozenset(cards), frozenset(reversed(cards)), set(cards[::2] +
                                                               cards[1::2])]
    for h in hands:
        a = encode(h)
        assert a.indicator == Card(1, Suit.SPADES)
        assert a.hidden == Card(6, Suit.SPADES)
        assert a.serialize() == 'AS QS AH 2H'
    assert encode(iter(cards)) == encode(frozenset(cards))
    # A list keeps its own order, so the Queen and Ace form the pair
    assert encode(cards).serialize() == 'QS AH 6S 2H'


def test_hand_size(hand):
    with pytest.raises(InvalidHandSize):
        encode(hand[:4])
    with pytest.raises(InvalidHandSize):
        encode(hand + [Card(1, Suit.SPADES)])
    with pytest.raises(InvalidHandSize):
        encode([])


def test_duplicate_card(hand):
    hand[4] = Card(3, Suit.CLUBS)
    with pytest.raises(DuplicateCard):
        encode(hand)
    # Both errors are `ValueErrors`
    with pytest.raises(ValueError):
        encode(hand)
