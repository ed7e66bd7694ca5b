"""
Errors raised when the trick is given input it cannot work with.
"""


class TrickError(ValueError):
    """ Base class for invalid hands and arrangements. """


class InvalidHandSize(TrickError):
    """ The hand does not hold exactly five cards. """


class DuplicateCard(TrickError):
    """ Two cards in the hand share a rank and a suit. """


class InvalidPermutation(TrickError):
    """
    The code cards cannot be read as an arrangement: there are not three of
    them, they repeat a card, or they include the indicator.
    """
