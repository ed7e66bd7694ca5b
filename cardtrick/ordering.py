"""
The total order over all 52 `Cards` that the encoder and the decoder agree on.
Rank dominates, and the suit breaks ties between cards of the same rank.
"""

from typing import Dict, Iterable, Tuple

from cardtrick.card import Card, Suit

# Canonical ranking order, independent of `SCAN_ORDER`
SUIT_PRIORITY: Dict[Suit, int] = {
    Suit.CLUBS: 0,
    Suit.DIAMONDS: 1,
    Suit.HEARTS: 2,
    Suit.SPADES: 3
}


def suit_priority(suit: Suit) -> int:
    return SUIT_PRIORITY[suit]


def rank_key(card: Card) -> int:
    """
    Return a key between 0 and 51 that is unique to `card`.

    Examples
    --------
    >>> rank_key(Card(1, Suit.CLUBS))
    0
    >>> rank_key(Card(2, Suit.HEARTS))
    6
    """
    return ((card.rank.value - 1) * len(SUIT_PRIORITY)
            + suit_priority(card.suit))


def compare(a: Card, b: Card) -> int:
    return rank_key(a) - rank_key(b)


def sort_cards(cards: Iterable[Card]) -> Tuple[Card, ...]:
    """ Sort `cards` ascending, e.g. into (Small, Medium, Large). """
    return tuple(sorted(cards, key=rank_key))
