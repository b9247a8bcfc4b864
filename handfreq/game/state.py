"""Game state and card visibility."""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional

from .cards import Card, full_deck, parse_cards


class Street(Enum):
    """Community card streets."""
    FLOP = 1
    TURN = 2
    RIVER = 3


class Perspective(Enum):
    """
    Whose knowledge a calculation uses.

    SELF treats the hole cards as known; OPPONENT sees only the board
    and treats the hole cards as still unknown.
    """
    SELF = "self"
    OPPONENT = "opponent"

    @classmethod
    def from_string(cls, s: str) -> "Perspective":
        """Parse perspective from string like 'self' or 'opponent'."""
        s = s.lower().strip()
        for perspective in cls:
            if perspective.value == s:
                return perspective
        raise ValueError(f"Unknown perspective: {s}")


class DuplicateCard(ValueError):
    """Raised when the same physical card appears twice in a game state."""

    def __init__(self, card: Card):
        self.card = card
        super().__init__(f"Duplicate card: {card}")


@dataclass(frozen=True)
class GameState:
    """
    Cards visible during a single hand of hold'em.

    The state only grows: a turn and then a river can be dealt onto it,
    each returning a new state.
    """
    hole: tuple[Card, Card]
    flop: tuple[Card, Card, Card]
    turn: Optional[Card] = None
    river: Optional[Card] = None

    def __post_init__(self):
        object.__setattr__(self, "hole", tuple(self.hole))
        object.__setattr__(self, "flop", tuple(self.flop))

        if len(self.hole) != 2:
            raise ValueError(f"Must have exactly 2 hole cards, got {len(self.hole)}")
        if len(self.flop) != 3:
            raise ValueError(f"Flop must have exactly 3 cards, got {len(self.flop)}")
        if self.river is not None and self.turn is None:
            raise ValueError("River cannot be dealt before the turn")

        seen: set[Card] = set()
        for card in self.hole + self.board:
            if card in seen:
                raise DuplicateCard(card)
            seen.add(card)

    @classmethod
    def build(
        cls,
        hole: tuple[Card, Card],
        flop: tuple[Card, Card, Card],
        turn: Optional[Card] = None,
        river: Optional[Card] = None,
    ) -> "GameState":
        """Build a game state, raising DuplicateCard if any card repeats."""
        return cls(hole=hole, flop=flop, turn=turn, river=river)

    @classmethod
    def from_string(
        cls,
        hole: str,
        flop: str,
        turn: Optional[str] = None,
        river: Optional[str] = None,
    ) -> "GameState":
        """Parse state from strings like 'AsKh', 'Qs7d2c', '9h'."""
        return cls(
            hole=tuple(parse_cards(hole)),
            flop=tuple(parse_cards(flop)),
            turn=Card.from_string(turn) if turn else None,
            river=Card.from_string(river) if river else None,
        )

    @property
    def board(self) -> tuple[Card, ...]:
        """Community cards dealt so far."""
        board = self.flop
        if self.turn is not None:
            board += (self.turn,)
        if self.river is not None:
            board += (self.river,)
        return board

    @property
    def street(self) -> Street:
        if self.river is not None:
            return Street.RIVER
        if self.turn is not None:
            return Street.TURN
        return Street.FLOP

    def deal_turn(self, card: Card) -> "GameState":
        """Return a new state with the turn dealt."""
        if self.turn is not None:
            raise ValueError(f"Turn already dealt: {self.turn}")
        return replace(self, turn=card)

    def deal_river(self, card: Card) -> "GameState":
        """Return a new state with the river dealt."""
        if self.river is not None:
            raise ValueError(f"River already dealt: {self.river}")
        return replace(self, river=card)

    def fixed_cards(self, perspective: Perspective) -> tuple[Card, ...]:
        """Cards known from the given perspective, hole cards first."""
        if perspective is Perspective.SELF:
            return self.hole + self.board
        return self.board

    def used_cards(self, perspective: Perspective) -> set[Card]:
        """Cards out of the deck from the given perspective."""
        return set(self.fixed_cards(perspective))

    def unused_cards(self, perspective: Perspective) -> set[Card]:
        """Cards still unseen from the given perspective."""
        used = self.used_cards(perspective)
        return {card for card in full_deck() if card not in used}

    def __str__(self) -> str:
        hole = "".join(str(c) for c in self.hole)
        board = " ".join(str(c) for c in self.board)
        return f"{hole} | {board}"
