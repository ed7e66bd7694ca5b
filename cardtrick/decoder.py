"""
Work out the hidden card from the four `Cards` that are shown.
"""

from typing import Sequence

from cardtrick.card import Card, parse_card
from cardtrick.constants import CODE_LENGTH, N_RANKS, OFFSETS
from cardtrick.errors import InvalidPermutation
from cardtrick.ordering import sort_cards


def decode(indicator: Card, code_cards: Sequence[Card]) -> Card:
    """
    Return the hidden `Card`: it has the suit of `indicator`, and its rank
    is the indicator's rank moved forward by the offset that the order of
    `code_cards` encodes.

    Parameters
    ----------
    indicator : Card
        The first `Card` shown
    code_cards : Sequence[Card]
        The three `Cards` shown after the indicator, in order
    """
    code_cards = tuple(code_cards)
    if indicator in code_cards:
        raise InvalidPermutation(
            'The indicator {0} cannot also be a code card'.format(indicator)
        )
    offset = offset_for(code_cards)
    hidden_rank = (indicator.rank.value + offset - 1) % N_RANKS + 1
    return Card(hidden_rank, indicator.suit)


def offset_for(code_cards: Sequence[Card]) -> int:
    """ Read the offset, between 1 and 6, from the order of `code_cards`. """
    code_cards = tuple(code_cards)
    if len(code_cards) != CODE_LENGTH:
        raise InvalidPermutation(
            'Expected {0} code cards, not {1}'.format(CODE_LENGTH,
                                                      len(code_cards))
        )
    if len(set(code_cards)) != CODE_LENGTH:
        raise InvalidPermutation(
            'The code cards {0} repeat a card'.format(list(code_cards))
        )
    ordered = sort_cards(code_cards)
    permutation = tuple(ordered.index(c) for c in code_cards)
    if permutation not in OFFSETS:
        raise InvalidPermutation(
            '{0} is not an arrangement of {1}'.format(list(code_cards),
                                                      list(ordered))
        )
    return OFFSETS[permutation]


def decode_text(shown: str) -> Card:
    """
    Decode a serialized arrangement, e.g. "3C KS 7D 2H".

    Examples
    --------
    >>> decode_text('3C KS 7D 2H')
    9 of C
    """
    cards = [parse_card(token) for token in shown.split()]
    if len(cards) != CODE_LENGTH + 1:
        raise InvalidPermutation(
            'Expected {0} cards to be shown, not {1}'.format(CODE_LENGTH + 1,
                                                            len(cards))
        )
    return decode(cards[0], cards[1:])
