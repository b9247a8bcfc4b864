"""
Five-card hand classification.

Hands are classified into one of ten categories, each carrying the
rank(s) needed to break ties between hands of the same category:

    HighCard(r) < Pair(r) < TwoPair(high, low) < ThreeOfAKind(r)
    < Straight(high) < Flush(high) < FullHouse(trips, pair)
    < FourOfAKind(r) < StraightFlush(high) < RoyalFlush

Classification works on the five cards sorted by rank, matching
pairs, trips and quads with fixed index windows over the sorted ranks.
"""

from dataclasses import dataclass
from enum import IntEnum
from itertools import combinations
from typing import Iterable

from treys import Evaluator

from .cards import Card, Rank, RANK_STR

HAND_SIZE = 5

# A hand to classify: exactly five cards.
FiveCards = tuple[Card, Card, Card, Card, Card]


class HandKind(IntEnum):
    """Hand categories, weakest first."""
    HIGH_CARD = 0
    PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9

    @property
    def label(self) -> str:
        return KIND_LABELS[self]


KIND_LABELS = {
    HandKind.HIGH_CARD: "High Card",
    HandKind.PAIR: "Pair",
    HandKind.TWO_PAIR: "Two Pair",
    HandKind.THREE_OF_A_KIND: "Three of a Kind",
    HandKind.STRAIGHT: "Straight",
    HandKind.FLUSH: "Flush",
    HandKind.FULL_HOUSE: "Full House",
    HandKind.FOUR_OF_A_KIND: "Four of a Kind",
    HandKind.STRAIGHT_FLUSH: "Straight Flush",
    HandKind.ROYAL_FLUSH: "Royal Flush",
}

# treys reports royal flushes either as their own class or as
# straight flushes depending on version; rank 1 is always the royal.
_TREYS_CLASS_TO_KIND = {label: kind for kind, label in KIND_LABELS.items()}
_TREYS_ROYAL_FLUSH_RANK = 1

WHEEL_RANKS = [2, 3, 4, 5, 14]


@dataclass(frozen=True, order=True)
class HandCategory:
    """
    A classified hand: category plus tie-break ranks.

    Ordering compares the category first, then the tie-break ranks,
    so any two categories can be compared directly.
    """
    kind: HandKind
    ranks: tuple[int, ...] = ()

    @classmethod
    def high_card(cls, rank: int) -> "HandCategory":
        return cls(HandKind.HIGH_CARD, (rank,))

    @classmethod
    def pair(cls, rank: int) -> "HandCategory":
        return cls(HandKind.PAIR, (rank,))

    @classmethod
    def two_pair(cls, high: int, low: int) -> "HandCategory":
        return cls(HandKind.TWO_PAIR, (high, low))

    @classmethod
    def three_of_a_kind(cls, rank: int) -> "HandCategory":
        return cls(HandKind.THREE_OF_A_KIND, (rank,))

    @classmethod
    def straight(cls, high: int) -> "HandCategory":
        return cls(HandKind.STRAIGHT, (high,))

    @classmethod
    def flush(cls, high: int) -> "HandCategory":
        return cls(HandKind.FLUSH, (high,))

    @classmethod
    def full_house(cls, trips: int, pair: int) -> "HandCategory":
        return cls(HandKind.FULL_HOUSE, (trips, pair))

    @classmethod
    def four_of_a_kind(cls, rank: int) -> "HandCategory":
        return cls(HandKind.FOUR_OF_A_KIND, (rank,))

    @classmethod
    def straight_flush(cls, high: int) -> "HandCategory":
        return cls(HandKind.STRAIGHT_FLUSH, (high,))

    @classmethod
    def royal_flush(cls) -> "HandCategory":
        return cls(HandKind.ROYAL_FLUSH)

    @property
    def label(self) -> str:
        return self.kind.label

    def __str__(self) -> str:
        if not self.ranks:
            return self.label
        ranks = ", ".join(RANK_STR[r] for r in self.ranks)
        return f"{self.label} ({ranks})"


def _all_equal(ranks: list[int]) -> bool:
    return len(set(ranks)) == 1


def best_hand(cards: FiveCards) -> HandCategory:
    """
    Classify exactly five cards.

    The input is not modified; classification works on a sorted copy,
    so the result does not depend on the order of the cards.

    Args:
        cards: The five cards to classify

    Returns:
        The hand's category with its tie-break ranks
    """
    c0, c1, c2, c3, c4 = sorted(cards, key=lambda c: c.rank)
    ranks = [c0.rank, c1.rank, c2.rank, c3.rank, c4.rank]
    suits = [c0.suit, c1.suit, c2.suit, c3.suit, c4.suit]

    # Straight (the wheel plays the Ace low)
    is_wheel = ranks == WHEEL_RANKS
    is_straight = is_wheel or all(
        ranks[i + 1] == ranks[i] + 1 for i in range(HAND_SIZE - 1)
    )
    straight_high = Rank.FIVE if is_wheel else ranks[4]

    is_flush = _all_equal(suits)

    if is_straight and is_flush:
        if straight_high == Rank.ACE:
            return HandCategory.royal_flush()
        return HandCategory.straight_flush(straight_high)

    # Four of a kind: either 4-card window
    for start in range(2):
        if _all_equal(ranks[start:start + 4]):
            return HandCategory.four_of_a_kind(ranks[start])

    # Full house: pair-then-trips or trips-then-pair
    if _all_equal(ranks[0:2]) and _all_equal(ranks[2:5]):
        return HandCategory.full_house(ranks[2], ranks[0])
    if _all_equal(ranks[0:3]) and _all_equal(ranks[3:5]):
        return HandCategory.full_house(ranks[0], ranks[3])

    if is_flush:
        return HandCategory.flush(ranks[4])

    if is_straight:
        return HandCategory.straight(straight_high)

    # Three of a kind: any 3-card window
    for start in range(3):
        if _all_equal(ranks[start:start + 3]):
            return HandCategory.three_of_a_kind(ranks[start])

    # Two pair: the three possible pair positions
    for low, high in (((0, 1), (2, 3)), ((0, 1), (3, 4)), ((1, 2), (3, 4))):
        if ranks[low[0]] == ranks[low[1]] and ranks[high[0]] == ranks[high[1]]:
            return HandCategory.two_pair(ranks[high[0]], ranks[low[0]])

    for i in range(HAND_SIZE - 1):
        if ranks[i] == ranks[i + 1]:
            return HandCategory.pair(ranks[i])

    return HandCategory.high_card(ranks[4])


# Alias matching the public call surface
classify = best_hand


def best_of(cards: Iterable[Card]) -> HandCategory:
    """
    Best category over every 5-card subset of five or more cards.

    Args:
        cards: Five to seven cards

    Returns:
        The strongest category any five of them make
    """
    cards = list(cards)
    if len(cards) < HAND_SIZE:
        raise ValueError(f"Need at least {HAND_SIZE} cards, got {len(cards)}")
    return max(best_hand(hand) for hand in combinations(cards, HAND_SIZE))


def treys_kind(cards: FiveCards) -> HandKind:
    """
    Category of five cards according to the treys evaluator.

    Independent of best_hand; useful for cross-checking it.
    """
    evaluator = Evaluator()
    treys_cards = [c.to_treys() for c in cards]
    rank = evaluator.evaluate(treys_cards[:2], treys_cards[2:])
    if rank == _TREYS_ROYAL_FLUSH_RANK:
        return HandKind.ROYAL_FLUSH
    return _TREYS_CLASS_TO_KIND[evaluator.class_to_string(evaluator.get_rank_class(rank))]
