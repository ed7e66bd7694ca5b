"""
Constants that define how the trick operates.
"""

from typing import Dict, Tuple

# A hand is dealt whole to the encoder. One card is hidden, one is the
# indicator, and the rest are the code cards.
HAND_SIZE = 5
CODE_LENGTH = 3

# Ranks are positions on a 13-hour clock
N_RANKS = 13
ACE = 1
KING = 13
RANKS = range(ACE, KING + 1)

# The two distances between distinct ranks sum to 13, so exactly one of them
# is at most 6
MAX_OFFSET = 6

RANK_NAMES: Dict[int, str] = {i: str(i) for i in range(2, 11)}
RANK_NAMES[1] = "A"
RANK_NAMES[11] = "J"
RANK_NAMES[12] = "Q"
RANK_NAMES[13] = "K"

# Positions into the (Small, Medium, Large) triple, keyed by offset.
# Ordered by offset, not lexicographically by permutation.
PERMUTATIONS: Dict[int, Tuple[int, int, int]] = {
    1: (0, 1, 2),
    2: (0, 2, 1),
    3: (1, 0, 2),
    4: (1, 2, 0),
    5: (2, 0, 1),
    6: (2, 1, 0)
}
OFFSETS: Dict[Tuple[int, int, int], int] = {
    p: offset for offset, p in PERMUTATIONS.items()
}
