"""
A session of the five-card trick, played from text commands.

Examples
--------
>>> t = Trick()
>>> for card in ['3C', '9C', '2H', 'KS', '7D']:
...     t.commit_text(card)
>>> t.commit_text('PERFORM')
Showing 3 of C, K of S, 7 of D, 2 of H

The audience picked five `Cards`, and the magician laid out four of them.

>>> t.guess()
9 of C

The guesser only sees the four `Cards` that are shown, and works out that the
hidden `Card` is the 9 of clubs.

>>> t.commit_text('REVEAL')
The hidden card is 9 of C
"""

from enum import Enum
import logging
from typing import Dict, List, Optional

from cardtrick.arrangement import Arrangement
from cardtrick.card import Card, full_deck, parse_card, SCAN_ORDER, Suit
from cardtrick.constants import HAND_SIZE
from cardtrick.decoder import decode
from cardtrick.encoder import encode
from cardtrick.errors import InvalidHandSize


class Phase(Enum):
    SELECTION = 0
    STAGE = 1
    REVEAL = 2


class Trick:
    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self.hand: List[Card] = []
        self.phase = Phase.SELECTION
        self.arrangement: Optional[Arrangement] = None

    def select(self, card: Card) -> None:
        """
        Add `card` to the hand, or remove it if it was already selected.
        """
        self._require(Phase.SELECTION)
        if card in self.hand:
            self.hand.remove(card)
            self.logger.info('Removed {0}'.format(card))
            return
        if len(self.hand) >= HAND_SIZE:
            raise InvalidHandSize(
                'The hand already has {0} cards'.format(HAND_SIZE)
            )
        self.hand.append(card)
        self.logger.info('Selected {0} ({1}/{2})'.format(card,
                                                         len(self.hand),
                                                         HAND_SIZE))

    def perform(self) -> Arrangement:
        """ Hide one of the selected `Cards` and lay out the rest. """
        self._require(Phase.SELECTION)
        if len(self.hand) != HAND_SIZE:
            raise InvalidHandSize(
                'Select {0} cards to perform the trick, not {1}'.format(
                    HAND_SIZE, len(self.hand)
                )
            )
        self.arrangement = encode(self.hand)
        self.phase = Phase.STAGE
        self.logger.info('Showing {0}'.format(
            ', '.join(repr(c) for c in self.arrangement.shown)
        ))
        return self.arrangement

    def guess(self) -> Card:
        """ Name the hidden `Card` from the shown `Cards` alone. """
        arrangement = self._performed()
        return decode(arrangement.indicator, arrangement.code_cards)

    def reveal(self) -> Card:
        """ Turn over the hidden `Card`. """
        arrangement = self._performed()
        self.phase = Phase.REVEAL
        self.logger.info('The hidden card is {0}'.format(arrangement.hidden))
        guess = self.guess()
        if guess != arrangement.hidden:
            self.logger.error('The guess {0} was wrong'.format(guess))
        return arrangement.hidden

    def reset(self) -> None:
        self.hand = []
        self.phase = Phase.SELECTION
        self.arrangement = None

    def commit_text(self, command: str) -> None:
        """
        Enter a command as a string. A card is written as {value}{suit},
        where {value} is A, 2, ..., 10, J, Q, K and {suit} is C, D, H, S.
        Entering a card selects it, or removes it if it was already selected.
        The other commands are PERFORM, GUESS, REVEAL and RESET.

        Examples
        --------
        >>> trick.commit_text('10h')
        Selected 10 of H (1/5)
        >>> trick.commit_text('10H')
        Removed 10 of H
        """
        command = command.strip().upper()
        if command == 'PERFORM':
            self.perform()
        elif command == 'GUESS':
            self.logger.info('The hidden card must be {0}'.format(
                self.guess()
            ))
        elif command == 'REVEAL':
            self.reveal()
        elif command == 'RESET':
            self.reset()
        elif ' ' in command or len(command) == 0:
            raise ValueError("'{0}' is not a command".format(command))
        else:
            self.select(parse_card(command))

    def deck_by_suit(self) -> Dict[Suit, List[Card]]:
        """ The deck to pick from, grouped by suit in `SCAN_ORDER`. """
        deck: Dict[Suit, List[Card]] = {s: [] for s in SCAN_ORDER}
        for c in full_deck():
            deck[c.suit].append(c)
        return deck

    @property
    def completed(self) -> bool:
        return self.phase == Phase.REVEAL

    def play_interactive(self) -> None:
        """
        Play a single trick from standard input. The format of each command
        is specified in `commit_text`.
        """
        while not self.completed:
            command = input('Enter a command ({0}/{1} selected):\n'.format(
                len(self.hand), HAND_SIZE
            ))
            try:
                self.commit_text(command)
            except ValueError as ex:
                # Ask for another command if a `ValueError` occurs
                print(ex)

    def _performed(self) -> Arrangement:
        if self.arrangement is None:
            raise ValueError('The trick has not been performed yet')
        return self.arrangement

    def _require(self, phase: Phase) -> None:
        if self.phase != phase:
            raise ValueError('Cannot do that during {0}'.format(self.phase))


def main():
    log_format = '[%(asctime)s %(threadName)s, %(levelname)s] %(message)s'
    logging.basicConfig(level=logging.INFO, format=log_format)
    Trick().play_interactive()


if __name__ == '__main__':
    main()
