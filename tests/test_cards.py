"""Tests for card representation."""

import pytest

from handfreq.game.cards import (
    Card, Rank, Suit, InvalidRank,
    RANK_STR, STR_RANK, DECK_SIZE, full_deck, parse_cards
)


class TestCardBuild:
    @pytest.mark.parametrize("suit", list(Suit))
    def test_every_valid_rank(self, suit):
        for rank in range(2, 15):
            card = Card.build(suit, rank)
            assert card.suit == suit
            assert card.rank == rank

    @pytest.mark.parametrize("rank", [0, 1, 15, 100])
    def test_invalid_rank(self, rank):
        for suit in Suit:
            with pytest.raises(InvalidRank):
                Card.build(suit, rank)

    def test_invalid_rank_bounds(self):
        with pytest.raises(InvalidRank) as exc_info:
            Card.build(Suit.SPADES, 1)

        assert exc_info.value.min == 2
        assert exc_info.value.max == 14
        assert exc_info.value.rank == 1

    def test_invalid_rank_is_value_error(self):
        with pytest.raises(ValueError, match="Invalid rank"):
            Card(15, Suit.HEARTS)

    def test_invalid_suit(self):
        with pytest.raises(ValueError, match="Invalid suit"):
            Card(Rank.ACE, 7)

    def test_immutable(self):
        card = Card.build(Suit.CLUBS, 10)
        with pytest.raises(AttributeError):
            card.rank = 11


class TestCard:
    def test_from_string(self):
        card = Card.from_string("As")
        assert card.rank == Rank.ACE
        assert card.suit == Suit.SPADES

    def test_from_string_ten(self):
        card = Card.from_string("Th")
        assert card.rank == Rank.TEN
        assert card.suit == Suit.HEARTS

    def test_from_string_lowercase(self):
        card = Card.from_string("kd")
        assert card.rank == Rank.KING
        assert card.suit == Suit.DIAMONDS

    def test_str(self):
        card = Card(Rank.ACE, Suit.SPADES)
        assert str(card) == "As"

    def test_from_string_invalid_rank(self):
        with pytest.raises(ValueError):
            Card.from_string("Xs")

    def test_from_string_invalid_suit(self):
        with pytest.raises(ValueError):
            Card.from_string("Ax")

    def test_equality(self):
        card1 = Card.from_string("As")
        card2 = Card.build(Suit.SPADES, 14)
        assert card1 == card2
        assert hash(card1) == hash(card2)

    def test_ordering(self):
        assert Card.from_string("2s") < Card.from_string("3c")
        assert Card.from_string("Ac") < Card.from_string("As")

    def test_to_treys(self):
        card = Card.from_string("As")
        treys_card = card.to_treys()
        assert isinstance(treys_card, int)

    def test_string_maps_roundtrip(self):
        assert all(STR_RANK[RANK_STR[r]] == r for r in range(2, 15))


class TestDeck:
    def test_full_deck(self):
        deck = full_deck()
        assert len(deck) == DECK_SIZE
        assert len(set(deck)) == DECK_SIZE

    def test_full_deck_fresh(self):
        deck = full_deck()
        deck.pop()
        assert len(full_deck()) == DECK_SIZE

    def test_full_deck_sorted(self):
        deck = full_deck()
        assert deck == sorted(deck)


class TestParseCards:
    def test_compact(self):
        assert [str(c) for c in parse_cards("Qs7d2c")] == ["Qs", "7d", "2c"]

    def test_spaced(self):
        assert [str(c) for c in parse_cards("Qs 7d 2c")] == ["Qs", "7d", "2c"]

    def test_odd_length(self):
        with pytest.raises(ValueError):
            parse_cards("Qs7")
