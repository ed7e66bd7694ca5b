"""
The result of performing the trick on a hand.
"""

from typing import Sequence, Tuple

from cardtrick.card import Card


class Arrangement:
    """
    The `indicator` is shown first, followed by the `code_cards` in order.
    The `hidden` card is withheld from the guesser, who must work it out
    from the four `Cards` that are shown.

    Examples
    --------
    >>> from cardtrick.card import Card, Suit
    >>> from cardtrick.encoder import encode
    >>> a = encode([Card(3, Suit.CLUBS), Card(9, Suit.CLUBS),
    ...             Card(2, Suit.HEARTS), Card(13, Suit.SPADES),
    ...             Card(7, Suit.DIAMONDS)])
    >>> a
    3 of C, K of S, 7 of D, 2 of H hides 9 of C
    """
    __slots__ = ('_indicator', '_hidden', '_code_cards', '_offset')

    def __init__(self,
                 indicator: Card,
                 hidden: Card,
                 code_cards: Sequence[Card],
                 offset: int):
        self._indicator = indicator
        self._hidden = hidden
        self._code_cards = tuple(code_cards)
        # `offset` is the clock distance from the indicator to the hidden
        # card, between 1 and 6
        self._offset = offset

    @property
    def indicator(self) -> Card:
        return self._indicator

    @property
    def hidden(self) -> Card:
        return self._hidden

    @property
    def code_cards(self) -> Tuple[Card, ...]:
        return self._code_cards

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def shown(self) -> Tuple[Card, ...]:
        """ The `Cards` the guesser sees, in the order they are laid out. """
        return (self.indicator,) + self.code_cards

    def serialize(self) -> str:
        """ Serialize the shown `Cards`, e.g. "3C KS 7D 2H". """
        return ' '.join(c.serialize() for c in self.shown)

    def __eq__(self, other):
        if not isinstance(other, Arrangement):
            return NotImplemented
        return (self.indicator == other.indicator
                and self.hidden == other.hidden
                and self.code_cards == other.code_cards
                and self.offset == other.offset)

    def __hash__(self):
        return hash((self.indicator, self.hidden, self.code_cards))

    def __repr__(self):
        return "{0} hides {1}".format(
            ', '.join(repr(c) for c in self.shown), self.hidden
        )
