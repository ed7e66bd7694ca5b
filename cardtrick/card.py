"""
Classes related to the definition of what a `Card` is.
"""

from enum import Enum
from functools import total_ordering
import random
from typing import (
    List,
    Optional,
    Tuple,
    Union
)

from cardtrick.constants import (
    HAND_SIZE,
    RANK_NAMES,
    RANKS
)


@total_ordering
class Suit(Enum):
    CLUBS = 1
    DIAMONDS = 2
    HEARTS = 3
    SPADES = 4

    def __lt__(self, other):
        return self.value < other.value

    @property
    def short(self) -> str:
        return self.name[0]


# The order in which suits are scanned for a pair and laid out for display.
# This is independent of the ranking order used to break ties between cards.
SCAN_ORDER: Tuple[Suit, ...] = (
    Suit.SPADES,
    Suit.HEARTS,
    Suit.CLUBS,
    Suit.DIAMONDS
)


@total_ordering
class Rank:
    """
    A representation of a `Card` value: Ace, 2 - 10, Jack, Queen, or King.
    """
    def __init__(self, rank: int):
        if not _is_integer(rank) or rank not in RANKS:
            raise ValueError("Rank must be an integer between 1 and 13")
        self.value = int(rank)

    def __eq__(self, other):
        if not isinstance(other, Rank) and not _is_integer(other):
            return NotImplemented
        return self.value == Rank.lift(other).value

    def __lt__(self, other):
        if not isinstance(other, Rank) and not _is_integer(other):
            return NotImplemented
        return self.value < Rank.lift(other).value

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return RANK_NAMES[self.value]

    @staticmethod
    def lift(r: Union["Rank", int]) -> "Rank":
        if isinstance(r, Rank):
            return r
        if _is_integer(r):
            return Rank(int(r))
        raise ValueError("{0!r} is not a rank".format(r))


def _is_integer(r) -> bool:
    # `bool` is a subclass of `int`, but True is not the Ace
    return isinstance(r, int) and not isinstance(r, bool)


class Card:
    """
    A playing card. Two `Cards` are the same card when they share a `Rank`
    and a `Suit`, and a `Card` cannot be changed once it is created.
    """
    __slots__ = ('_rank', '_suit')

    def __init__(self, rank: Union[Rank, int], suit: Suit):
        if not isinstance(suit, Suit):
            raise ValueError("{0} is not a suit".format(suit))
        self._rank = Rank.lift(rank)
        self._suit = suit

    @property
    def rank(self) -> Rank:
        return self._rank

    @property
    def suit(self) -> Suit:
        return self._suit

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self):
        return hash((self.rank.value, self.suit))

    def __repr__(self):
        return "{0} of {1}".format(self.rank, self.suit.short)

    def serialize(self) -> str:
        return "{0}{1}".format(self.rank, self.suit.short)


def deserialize(rank: str, suit: str) -> Card:
    """
    Convert a serialized card string to a `Card`.

    Parameters
    ----------
    rank : str
        A, 2, 3, ..., 10, J, Q, K
    suit : str
        C, D, H, S
    """
    suit_map = {
        'C': Suit.CLUBS,
        'D': Suit.DIAMONDS,
        'H': Suit.HEARTS,
        'S': Suit.SPADES
    }
    if suit.upper() not in suit_map:
        raise ValueError("{0} is not a suit".format(suit))
    return Card(_map_rank(rank.upper()), suit_map[suit.upper()])


def parse_card(text: str) -> Card:
    """
    Convert a single token such as "3C", "10h" or "KS" to a `Card`.
    """
    text = text.strip()
    if len(text) < 2:
        raise ValueError("'{0}' is not a card".format(text))
    return deserialize(rank=text[:-1], suit=text[-1])


def _map_rank(rank: str) -> Rank:
    if rank == 'J':
        return Rank(11)
    elif rank == 'Q':
        return Rank(12)
    elif rank == 'K':
        return Rank(13)
    elif rank == 'A':
        return Rank(1)
    if not rank.isdigit():
        raise ValueError("'{0}' is not a rank".format(rank))
    return Rank(int(rank))


def full_deck() -> List[Card]:
    """ The 52 `Cards`, grouped by suit in `SCAN_ORDER`. """
    return [Card(r, s) for s in SCAN_ORDER for r in RANKS]


def get_hand(rng: Optional[random.Random] = None) -> List[Card]:
    """
    Deal a random hand of `HAND_SIZE` distinct `Cards`.

    Parameters
    ----------
    rng : Optional[random.Random]
        The source of randomness. If None, use the `random` module.
    """
    if rng is None:
        return random.sample(full_deck(), HAND_SIZE)
    return rng.sample(full_deck(), HAND_SIZE)
