"""Game representation module."""

from .cards import Card, Rank, Suit, InvalidRank, full_deck, parse_cards
from .hand_rank import HandCategory, HandKind, best_hand, best_of, classify, treys_kind
from .state import GameState, Perspective, Street, DuplicateCard
from .frequencies import (
    EngineConfig,
    FrequencyTable,
    best_hand_frequencies,
    completion_count,
    frequencies,
    missing_cards,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "InvalidRank",
    "full_deck",
    "parse_cards",
    "HandCategory",
    "HandKind",
    "best_hand",
    "best_of",
    "classify",
    "treys_kind",
    "GameState",
    "Perspective",
    "Street",
    "DuplicateCard",
    "EngineConfig",
    "FrequencyTable",
    "best_hand_frequencies",
    "completion_count",
    "frequencies",
    "missing_cards",
]
