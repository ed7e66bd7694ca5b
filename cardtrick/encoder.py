"""
Choose the hidden card of a hand and arrange the rest to encode it.

The hand must contain two cards of the same suit, since five cards cannot
fall into four suits without a repeat. One of the pair is hidden, and the
other (the indicator) is shown first. Counting forward on a 13-hour clock,
one of the two cards is at most six ranks ahead of the other: the card that
is behind becomes the indicator. The remaining three cards are then laid out
in one of six orders to tell the guesser how far ahead the hidden card is.
"""

import logging
from typing import Dict, Iterable, List, Sequence, Tuple

from cardtrick.arrangement import Arrangement
from cardtrick.card import Card, SCAN_ORDER, Suit
from cardtrick.constants import (
    HAND_SIZE,
    MAX_OFFSET,
    N_RANKS,
    PERMUTATIONS
)
from cardtrick.errors import DuplicateCard, InvalidHandSize
from cardtrick.ordering import rank_key, sort_cards


def encode(hand: Iterable[Card]) -> Arrangement:
    """
    Return the `Arrangement` for `hand`.

    Parameters
    ----------
    hand : Iterable[Card]
        Exactly five distinct `Cards`. When a suit holds more than two of
        them, the first two in order form the pair. A `Sequence` such as a
        list keeps the order it was given in. Any other iterable, such as a
        `set`, is unordered, so its `Cards` are put in `rank_key` order first
        and equal sets always encode the same way.
    """
    if isinstance(hand, Sequence):
        cards = list(hand)
    else:
        cards = sorted(hand, key=rank_key)
    _validate_hand(cards)

    c1, c2 = select_pair(cards)
    forward = clock_distance(c1, c2)
    if 0 < forward <= MAX_OFFSET:
        indicator, hidden, offset = c1, c2, forward
    else:
        indicator, hidden, offset = c2, c1, clock_distance(c2, c1)

    remaining = [c for c in cards if c != indicator and c != hidden]
    code_cards = permute(sort_cards(remaining), offset)
    logging.getLogger(__name__).debug(
        'Pair {0} and {1}: showing {0}, offset {2}'.format(indicator,
                                                            hidden,
                                                            offset)
    )
    return Arrangement(indicator, hidden, code_cards, offset)


def select_pair(cards: List[Card]) -> Tuple[Card, Card]:
    """
    Return the first two `Cards` of the first suit in `SCAN_ORDER` that
    holds at least two of `cards`.
    """
    by_suit: Dict[Suit, List[Card]] = {s: [] for s in Suit}
    for c in cards:
        by_suit[c.suit].append(c)
    for suit in SCAN_ORDER:
        if len(by_suit[suit]) >= 2:
            first, second = by_suit[suit][:2]
            return first, second
    raise InvalidHandSize(
        'No suit appears twice among {0} cards'.format(len(cards))
    )


def clock_distance(a: Card, b: Card) -> int:
    """ How many ranks forward `b` is from `a`, wrapping King to Ace. """
    return (b.rank.value - a.rank.value + N_RANKS) % N_RANKS


def permute(ordered: Tuple[Card, ...], offset: int) -> Tuple[Card, ...]:
    """
    Lay out the (Small, Medium, Large) triple `ordered` to encode `offset`.
    """
    if offset not in PERMUTATIONS:
        raise ValueError('Offset must be between 1 and {0}'.format(MAX_OFFSET))
    return tuple(ordered[i] for i in PERMUTATIONS[offset])


def _validate_hand(cards: List[Card]) -> None:
    if len(cards) != HAND_SIZE:
        raise InvalidHandSize(
            'A hand must have exactly {0} cards, not {1}'.format(HAND_SIZE,
                                                                 len(cards))
        )
    seen = set()
    for c in cards:
        if c in seen:
            raise DuplicateCard('{0} appears more than once'.format(c))
        seen.add(c)
