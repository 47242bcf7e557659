"""Blackjack round engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.errors import BlackjackError, EmptyDeckError, InvalidBetAmountError
from blackjack.hand import (
    Bust,
    Candidates,
    Hand,
    HandClass,
    Totals,
    classify,
    evaluate,
    evaluate_hands,
    hand_totals,
)

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Bust",
    "Candidates",
    "Hand",
    "HandClass",
    "Totals",
    "classify",
    "evaluate",
    "evaluate_hands",
    "hand_totals",
    "BlackjackError",
    "EmptyDeckError",
    "InvalidBetAmountError",
]
