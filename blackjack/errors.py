"""Exceptions raised by the blackjack engine."""


class BlackjackError(Exception):
    """Base class for engine errors."""


class EmptyDeckError(BlackjackError, IndexError):
    """Raised when drawing from a deck with no cards left."""


class InvalidBetAmountError(BlackjackError, ValueError):
    """Raised when a bet is negative or, if limits are enforced, above the account."""

    def __init__(self, amount: int, account: int | None = None) -> None:
        self.amount = amount
        self.account = account
        if account is None:
            message = f"Bet must not be negative, got {amount}"
        else:
            message = f"Bet of {amount} exceeds account balance of {account}"
        super().__init__(message)
