"""House rules and bankroll defaults with environment variable support."""

import os
from dataclasses import dataclass, field


def env_flag(name: str, default: str = "false") -> bool:
    """Read a boolean environment variable."""
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class GameConfig:
    """Default house rules and bankroll."""

    num_decks: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_NUM_DECKS", "1"))
    )
    starting_account: int = 200
    default_bet: int = 5
    dealer_stands_on: int = 16  # Dealer draws on 15 or less
    enforce_bet_limit: bool = field(
        default_factory=lambda: env_flag("BLACKJACK_ENFORCE_BET_LIMIT")
    )

    def __post_init__(self) -> None:
        if self.num_decks < 1:
            raise ValueError("num_decks must be at least 1")
