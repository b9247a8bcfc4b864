"""Card representation utilities."""

from dataclasses import dataclass
from enum import IntEnum

from treys import Card as TreysCard


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


MIN_RANK = Rank.TWO
MAX_RANK = Rank.ACE
DECK_SIZE = 52

# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}


class InvalidRank(ValueError):
    """Raised when a card is built with a rank outside [2, 14]."""

    def __init__(self, rank: int, min: int = MIN_RANK, max: int = MAX_RANK):
        self.rank = rank
        self.min = int(min)
        self.max = int(max)
        super().__init__(
            f"Invalid rank {rank}: must be between {self.min} and {self.max} (Ace)"
        )


@dataclass(frozen=True, order=True)
class Card:
    """A playing card.

    Cards order by rank first and suit second, which gives card
    collections a stable enumeration order.
    """
    rank: int  # 2-14
    suit: int  # 0-3

    def __post_init__(self):
        if not MIN_RANK <= self.rank <= MAX_RANK:
            raise InvalidRank(self.rank)
        if self.suit not in SUIT_STR:
            raise ValueError(f"Invalid suit: {self.suit}")

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @classmethod
    def build(cls, suit: Suit, rank: int) -> "Card":
        """Build a card, raising InvalidRank if rank is outside [2, 14]."""
        return cls(rank=rank, suit=suit)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c'."""
        if len(s) != 2:
            raise ValueError(f"Invalid card string: {s}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise ValueError(f"Invalid rank: {rank_char}")
        if suit_char not in STR_SUIT:
            raise ValueError(f"Invalid suit: {suit_char}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


def full_deck() -> list[Card]:
    """Generate the 52 cards of a standard deck, lowest rank first."""
    return [
        Card(rank, suit)
        for rank in range(MIN_RANK, MAX_RANK + 1)
        for suit in range(4)
    ]


def parse_cards(s: str) -> list[Card]:
    """
    Parse a run of card strings.

    Examples:
        "Qs7d2c" -> [Qs, 7d, 2c]
        "Qs 7d 2c" -> [Qs, 7d, 2c]
    """
    s = s.replace(" ", "").replace(",", "")
    if len(s) % 2:
        raise ValueError(f"Invalid card list: {s}")
    return [Card.from_string(s[i:i + 2]) for i in range(0, len(s), 2)]
