"""
Check that the decoder recovers the hidden card for many hands, either dealt
at random or for every hand that can be made from a deck.
"""

from itertools import combinations
import logging
from typing import Iterable, List, Optional, Sequence

import numpy as np

from cardtrick.arrangement import Arrangement
from cardtrick.card import Card, full_deck
from cardtrick.constants import HAND_SIZE, MAX_OFFSET
from cardtrick.decoder import decode
from cardtrick.encoder import encode


class VerificationReport:
    def __init__(self):
        self.trials = 0
        self.passed = 0
        self.failures: List[List[Card]] = []
        # `offset_counts[i]` is the number of hands that encoded offset i.
        # Index 0 is never used.
        self.offset_counts = np.zeros(MAX_OFFSET + 1, dtype=np.int64)

    @property
    def succeeded(self) -> bool:
        return self.trials > 0 and self.passed == self.trials

    def record(self, hand: List[Card]) -> bool:
        self.trials += 1
        arrangement = encode(hand)
        ok = _check(hand, arrangement)
        if ok:
            self.passed += 1
            self.offset_counts[arrangement.offset] += 1
        else:
            self.failures.append(hand)
            logging.getLogger(__name__).error('Failed: {0}'.format(hand))
        return ok

    def __repr__(self):
        return "Passed {0}/{1} hands".format(self.passed, self.trials)


def verify_hand(hand: Sequence[Card]) -> bool:
    """
    Return whether the `Arrangement` for `hand` uses every `Card` exactly
    once, pairs the indicator with a hidden `Card` of the same suit at an
    offset between 1 and 6, and decodes back to the hidden `Card`.
    """
    return _check(hand, encode(hand))


def _check(hand: Sequence[Card], arrangement: Arrangement) -> bool:
    used = [arrangement.indicator, arrangement.hidden]
    used.extend(arrangement.code_cards)
    return (
        sorted(used, key=repr) == sorted(hand, key=repr)
        and arrangement.indicator.suit == arrangement.hidden.suit
        and 1 <= arrangement.offset <= MAX_OFFSET
        and decode(arrangement.indicator,
                   arrangement.code_cards) == arrangement.hidden
    )


def verify_hands(hands: Iterable[Sequence[Card]]) -> VerificationReport:
    report = VerificationReport()
    for hand in hands:
        report.record(list(hand))
    return report


def verify_random(n_trials: int,
                  seed: Optional[int] = None) -> VerificationReport:
    """
    Deal `n_trials` random hands and verify each of them.

    Parameters
    ----------
    n_trials : int
        The number of hands to deal
    seed : Optional[int]
        Seed for the random number generator, for repeatable runs
    """
    rng = np.random.default_rng(seed)
    deck = full_deck()
    hands = (
        [deck[i] for i in rng.choice(len(deck), HAND_SIZE, replace=False)]
        for _ in range(n_trials)
    )
    report = verify_hands(hands)
    logging.getLogger(__name__).info(report)
    return report


def verify_exhaustive(deck: Optional[Sequence[Card]] = None
                      ) -> VerificationReport:
    """
    Verify every hand that can be dealt from `deck`. If `deck` is None, use
    all 52 `Cards`, which is 2,598,960 hands.
    """
    if deck is None:
        deck = full_deck()
    report = verify_hands(combinations(deck, HAND_SIZE))
    logging.getLogger(__name__).info(report)
    return report
