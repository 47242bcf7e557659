"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.game import BlackjackGame, new_game


class StackedRandom:
    """Random source whose shuffle puts chosen cards on top of the deck."""

    def __init__(self, top: list[Card]) -> None:
        self._top = top

    def shuffle(self, x) -> None:
        for card in reversed(self._top):
            x.remove(card)
            x.insert(0, card)


def make_hand(*codes: str) -> Hand:
    """Build a hand from card codes like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A built single deck."""
    d = Deck(rng=rng)
    d.build()
    return d


@pytest.fixture
def empty_hand():
    """An empty player hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("KS", "QH", "5C")


@pytest.fixture
def game(rng):
    """A new game with the default account and bet."""
    return new_game(rng=rng, num_decks=1)


@pytest.fixture
def stacked_game():
    """
    Factory for a game whose deck starts with the given cards.

    Deal order is player, dealer (hole), player, dealer; later cards go to
    player hits and then dealer draws.
    """

    def _make(*codes: str, **kwargs) -> BlackjackGame:
        top = [Card.from_string(code) for code in codes]
        return BlackjackGame(rng=StackedRandom(top), num_decks=1, **kwargs)

    return _make


@pytest.fixture
def hand_of():
    """Factory for hands built from card codes."""
    return make_hand
