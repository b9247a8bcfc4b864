"""
Exact hand frequency enumeration.

For a game state and a perspective, every way of completing the known
cards to a five-card hand is enumerated and the resulting categories
are counted. Results are exact occurrence counts, not estimates: the
table total always equals C(unused cards, missing cards).
"""

from collections import Counter
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass, field
from itertools import combinations
from math import comb
from typing import Iterator, Optional, Sequence

import numpy as np

from .cards import Card
from .hand_rank import HAND_SIZE, HandCategory, HandKind, best_hand, best_of
from .state import GameState, Perspective


@dataclass
class EngineConfig:
    """Configuration for frequency enumeration."""
    workers: int = 1  # Processes to split the enumeration across (1 = in-process)


@dataclass
class FrequencyTable:
    """Occurrence count per hand category."""
    counts: Counter = field(default_factory=Counter)

    def add(self, category: HandCategory, count: int = 1) -> None:
        """Record count occurrences of a category."""
        if count <= 0:
            raise ValueError(f"Count must be positive, got {count}")
        self.counts[category] += count

    def merge(self, other: "FrequencyTable") -> "FrequencyTable":
        """Add another table's counts into this one."""
        self.counts.update(other.counts)
        return self

    @property
    def total(self) -> int:
        """Number of enumerated hands."""
        return sum(self.counts.values())

    def probability(self, category: HandCategory) -> float:
        """Share of enumerated hands in a category."""
        total = self.total
        if total == 0:
            return 0.0
        return self.counts[category] / total

    def probabilities(self) -> dict[HandCategory, float]:
        """Share of every category, strongest first."""
        total = self.total
        return {category: self.counts[category] / total for category in self}

    def kind_counts(self) -> np.ndarray:
        """Counts summed per HandKind, indexed by HandKind value."""
        counts = np.zeros(len(HandKind), dtype=np.int64)
        for category, count in self.counts.items():
            counts[category.kind] += count
        return counts

    def kind_probabilities(self) -> np.ndarray:
        """Share of enumerated hands per HandKind."""
        counts = self.kind_counts()
        total = counts.sum()
        if total == 0:
            return counts.astype(float)
        return counts / total

    def most_common(self, n: Optional[int] = None) -> list[tuple[HandCategory, int]]:
        return self.counts.most_common(n)

    def __getitem__(self, category: HandCategory) -> int:
        return self.counts[category]

    def __contains__(self, category: HandCategory) -> bool:
        return category in self.counts

    def __iter__(self) -> Iterator[HandCategory]:
        return iter(sorted(self.counts, reverse=True))

    def __len__(self) -> int:
        return len(self.counts)


def missing_cards(state: GameState, perspective: Perspective) -> int:
    """Cards still needed to make a five-card hand from the given perspective."""
    return max(0, HAND_SIZE - len(state.fixed_cards(perspective)))


def completion_count(state: GameState, perspective: Perspective) -> int:
    """Number of distinct completions the enumeration visits."""
    unused = len(state.unused_cards(perspective))
    return comb(unused, missing_cards(state, perspective))


def _count_completions(
    fixed: tuple[Card, ...],
    unused: Sequence[Card],
    k: int,
) -> FrequencyTable:
    table = FrequencyTable()
    for combo in combinations(unused, k):
        table.add(best_hand(fixed + combo))
    return table


def _count_partition(args: tuple[tuple[Card, ...], tuple[Card, ...], int, int]) -> FrequencyTable:
    """Count the completions whose first card is unused[lead] (worker entry point)."""
    fixed, unused, k, lead = args
    return _count_completions(fixed + (unused[lead],), unused[lead + 1:], k - 1)


def best_hand_frequencies(
    state: GameState,
    perspective: Perspective = Perspective.SELF,
    config: Optional[EngineConfig] = None,
) -> FrequencyTable:
    """
    Count the best hand category over every completion of the known cards.

    The fixed cards are the board dealt so far, plus the hole cards from
    the SELF perspective. When fewer than five cards are fixed, every
    combination of the missing cards drawn from the unused cards is
    classified. Otherwise the single known hand is evaluated directly.

    Args:
        state: Cards dealt so far
        perspective: Whether the hole cards are known
        config: Enumeration settings

    Returns:
        Table of category counts summing to completion_count(state, perspective)
    """
    config = config or EngineConfig()
    fixed = state.fixed_cards(perspective)
    k = missing_cards(state, perspective)

    if k == 0:
        table = FrequencyTable()
        table.add(best_of(fixed))
        return table

    unused = tuple(sorted(state.unused_cards(perspective)))

    if config.workers <= 1:
        return _count_completions(fixed, unused, k)

    # Partition by leading card; every combination has exactly one
    work_items = [(fixed, unused, k, lead) for lead in range(len(unused) - k + 1)]
    table = FrequencyTable()
    with ProcessPoolExecutor(max_workers=config.workers) as executor:
        for partial in executor.map(_count_partition, work_items):
            table.merge(partial)
    return table


# Alias matching the public call surface
frequencies = best_hand_frequencies
