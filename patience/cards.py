"""Playing cards: suits, ranks and the card itself."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum

from patience.geom import Pos

CARD_WIDTH = 120
CARD_HEIGHT = 168

NUMBER_SIZE = 30.0
SUIT_SIZE = 60.0

DEFAULT_CARD_POS = Pos(50.0, 100.0)


class Suit(Enum):
    SPADE = "spade"
    DIAMOND = "diamond"
    CLUB = "club"
    HEART = "heart"

    def is_red(self) -> bool:
        return self in (Suit.HEART, Suit.DIAMOND)

    def is_opposite_color(self, other: Suit) -> bool:
        """True when one suit is red and the other black."""
        return self.is_red() != other.is_red()

    def symbol(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_SYMBOLS = {
    Suit.SPADE: "♠",
    Suit.DIAMOND: "♦",
    Suit.CLUB: "♣",
    Suit.HEART: "♥",
}


class Rank(IntEnum):
    ACE = 1
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

    def is_one_less_than(self, other: Rank) -> bool:
        return self == other - 1

    def is_one_more_than(self, other: Rank) -> bool:
        return self == other + 1

    def symbol(self) -> str:
        return _RANK_SYMBOLS[self]


_RANK_SYMBOLS = {
    Rank.ACE: "A",
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "10",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}

DECK_SUIT_ORDER = (Suit.HEART, Suit.DIAMOND, Suit.CLUB, Suit.SPADE)


@dataclass(eq=False)
class Card:
    """A single card with its place on the board; compared by identity."""

    rank: Rank
    suit: Suit
    is_shown: bool = True
    pos: Pos = field(default=DEFAULT_CARD_POS)

    def contains(self, pos: Pos) -> bool:
        """True when ``pos`` lies on this card, edges included."""
        return (
            self.pos.x <= pos.x <= self.pos.x + CARD_WIDTH
            and self.pos.y <= pos.y <= self.pos.y + CARD_HEIGHT
        )

    def __str__(self) -> str:
        return self.rank.symbol() + self.suit.symbol()


def full_deck() -> list[Card]:
    """Return an unshuffled 52-card deck, face up, suit by suit from ace to king."""
    return [Card(rank, suit) for suit in DECK_SUIT_ORDER for rank in Rank]