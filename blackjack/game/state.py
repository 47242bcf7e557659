"""Game status enumeration."""

from enum import Enum, auto


class GameStatus(Enum):
    """
    Round status.

    Flow: IN_PROGRESS → PLAYER_WON | DEALER_WON | DRAW
    """

    # Cards dealt, waiting for the player
    IN_PROGRESS = auto()

    # Terminal outcomes
    PLAYER_WON = auto()
    DEALER_WON = auto()
    DRAW = auto()

    @property
    def is_terminal(self) -> bool:
        """Check if the round has been decided."""
        return self != GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()
