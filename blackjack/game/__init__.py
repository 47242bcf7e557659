"""Game engine and state management."""

from blackjack.game.events import GameEvent, EventType, EventEmitter
from blackjack.game.state import GameStatus
from blackjack.game.engine import BlackjackGame, new_game

__all__ = [
    "GameEvent",
    "EventType",
    "EventEmitter",
    "GameStatus",
    "BlackjackGame",
    "new_game",
]
