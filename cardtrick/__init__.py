from cardtrick.arrangement import Arrangement
from cardtrick.card import (
    Card,
    deserialize,
    full_deck,
    get_hand,
    parse_card,
    Rank,
    SCAN_ORDER,
    Suit
)
from cardtrick.constants import *
from cardtrick.decoder import decode, decode_text, offset_for
from cardtrick.encoder import clock_distance, encode
from cardtrick.errors import (
    DuplicateCard,
    InvalidHandSize,
    InvalidPermutation,
    TrickError
)
from cardtrick.learning import Model, model_from_file
from cardtrick.ordering import compare, rank_key, sort_cards
from cardtrick.trick import Phase, Trick
from cardtrick.verification import (
    verify_exhaustive,
    verify_hand,
    verify_random,
    VerificationReport
)
