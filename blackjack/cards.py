"""Card and Deck classes - immutable card representations."""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from random import Random
from typing import Iterator

from blackjack.errors import EmptyDeckError

logger = logging.getLogger(__name__)

CARDS_PER_DECK = 52


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

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

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10

    @property
    def hard_value(self) -> int:
        """Return the point value with an Ace counted as 1."""
        return 1 if self.is_ace else self.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.blackjack_value == 10


_RANK_CODES = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_CODES = {
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """
    Immutable playing card.

    Visibility is carried by ``face_up`` but is not part of the card's
    identity: a turned card still compares equal to its face-up self.
    Turning a card yields a new value instead of mutating a shared one.
    """

    rank: Rank
    suit: Suit
    face_up: bool = field(default=True, compare=False)

    def __str__(self) -> str:
        if not self.face_up:
            return "??"
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        state = "" if self.face_up else ", face_down"
        return f"Card({self.rank.name}, {self.suit.name}{state})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def hard_value(self) -> int:
        """Return the point value with an Ace counted as 1."""
        return self.rank.hard_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    def turned_down(self) -> "Card":
        """Return this card lying face down."""
        return replace(self, face_up=False)

    def turned_up(self) -> "Card":
        """Return this card lying face up."""
        return replace(self, face_up=True)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


class Deck:
    """One or more 52-card decks, rebuilt and shuffled for every round."""

    def __init__(self, num_decks: int = 1, rng: Random | None = None) -> None:
        """
        Initialize an empty deck manager.

        Args:
            num_decks: Number of full 52-card decks per build
            rng: Random number generator for shuffling
        """
        if num_decks < 1:
            raise ValueError("Deck must have at least 1 deck")

        self._num_decks = num_decks
        self._rng = rng or Random()
        self._cards: list[Card] = []

    def build(self) -> None:
        """Discard all cards, create fresh decks and shuffle them."""
        self._cards.clear()
        for _ in range(self._num_decks):
            for suit in Suit:
                for rank in Rank:
                    self._cards.append(Card(rank, suit))
        self._rng.shuffle(self._cards)
        logger.debug("Built and shuffled %d deck(s)", self._num_decks)

    def draw(self) -> Card:
        """Remove and return the first card."""
        if not self._cards:
            raise EmptyDeckError(f"No cards left in {self._num_decks}-deck build")
        return self._cards.pop(0)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return a snapshot of the remaining cards, front first."""
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def total_cards(self) -> int:
        """Return the number of cards in a full build."""
        return self._num_decks * CARDS_PER_DECK

    @property
    def num_decks(self) -> int:
        """Return the number of decks per build."""
        return self._num_decks

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(tuple(self._cards))
