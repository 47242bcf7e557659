"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, Sequence, Union

from blackjack.cards import Card

BLACKJACK_TOTAL = 21

# The first Ace may count 11 instead of 1; later Aces always count 1.
SOFT_ACE_BONUS = 10


@dataclass(frozen=True)
class Bust:
    """Every interpretation of the hand is over 21."""

    def __str__(self) -> str:
        return "BUST"


@dataclass(frozen=True)
class Candidates:
    """
    Legal totals of a hand, lowest first.

    Holds ``(low,)`` or ``(low, high)`` where ``high`` counts the first Ace
    as 11. Every value is at most 21.
    """

    values: tuple[int, ...]

    @property
    def best(self) -> int:
        """Return the total used for comparisons (the last candidate)."""
        return self.values[-1]

    @property
    def is_soft(self) -> bool:
        """Check if an Ace is being counted as 11."""
        return len(self.values) > 1

    def __str__(self) -> str:
        return "/".join(str(v) for v in self.values)


Totals = Union[Bust, Candidates]


class HandClass(Enum):
    """
    Hand classification.

    Values are ordered so that a smaller value is the stronger 21:
    a natural beats a 21 reached by hitting.
    """

    BLACKJACK = 1
    HAS_21 = 2
    UNDER_21 = 3
    BUST = 4

    @property
    def is_twenty_one(self) -> bool:
        """Check if this is a 21-class hand (natural or hit to 21)."""
        return self in (HandClass.BLACKJACK, HandClass.HAS_21)

    def beats(self, other: "HandClass") -> bool:
        """Check if this 21 class outranks another."""
        return self.value < other.value

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def hand_totals(cards: Iterable[Card]) -> Totals:
    """
    Compute the legal totals of a hand.

    Only the first Ace may count as 11. The low total is checked for a bust
    before the high total is considered.

    Args:
        cards: Cards in the order they were dealt

    Returns:
        Bust if even the low total is over 21, otherwise the candidates
    """
    low = 0
    has_ace = False
    for card in cards:
        low += card.hard_value
        has_ace = has_ace or card.is_ace

    if low > BLACKJACK_TOTAL:
        return Bust()

    high = low + SOFT_ACE_BONUS
    if not has_ace or high > BLACKJACK_TOTAL:
        return Candidates((low,))

    return Candidates((low, high))


def classify(totals: Totals, num_cards: int) -> HandClass:
    """
    Classify a hand from its totals and size.

    Args:
        totals: Result of hand_totals
        num_cards: Number of cards in the hand

    Returns:
        The hand classification
    """
    if isinstance(totals, Bust):
        return HandClass.BUST

    if totals.best == BLACKJACK_TOTAL:
        if num_cards == 2:
            return HandClass.BLACKJACK
        return HandClass.HAS_21

    return HandClass.UNDER_21


def evaluate(cards: Sequence[Card]) -> HandClass:
    """Classify a sequence of cards."""
    return classify(hand_totals(cards), len(cards))


@dataclass
class Hand:
    """A blackjack hand in dealing order."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def reveal_hole_card(self) -> Card | None:
        """
        Turn the face-down card face up.

        Returns:
            The revealed card, or None if no card was face down
        """
        for i, card in enumerate(self.cards):
            if not card.face_up:
                self.cards[i] = card.turned_up()
                return self.cards[i]
        return None

    @property
    def totals(self) -> Totals:
        """Return the legal totals of the hand."""
        return hand_totals(self.cards)

    @property
    def evaluation(self) -> HandClass:
        """Return the classification of the hand."""
        return classify(self.totals, len(self.cards))

    @property
    def best_total(self) -> int | None:
        """Return the highest legal total, or None when busted."""
        totals = self.totals
        if isinstance(totals, Bust):
            return None
        return totals.best

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted."""
        return isinstance(self.totals, Bust)

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return self.evaluation == HandClass.BLACKJACK

    @property
    def has_hole_card(self) -> bool:
        """Check if any card is face down."""
        return any(not card.face_up for card in self.cards)

    @property
    def visible_cards(self) -> tuple[Card, ...]:
        """Return the face-up cards."""
        return tuple(card for card in self.cards if card.face_up)

    @property
    def num_cards(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        if self.has_hole_card:
            return cards_str
        evaluation = self.evaluation
        if evaluation == HandClass.BUST:
            value_str = "(BUST)"
        elif evaluation == HandClass.BLACKJACK:
            value_str = "(BLACKJACK)"
        else:
            value_str = f"({self.totals})"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, totals={self.totals})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> int:
    """
    Compare player and dealer hands.

    Returns:
        1 if player wins
        -1 if dealer wins
        0 if push (tie)
    """
    # Player busts always loses
    if player_hand.is_busted:
        return -1

    # Dealer busts, player wins
    if dealer_hand.is_busted:
        return 1

    player_class = player_hand.evaluation
    dealer_class = dealer_hand.evaluation

    # Both at 21: a natural outranks a hit 21
    if player_class.is_twenty_one and dealer_class.is_twenty_one:
        if player_class.beats(dealer_class):
            return 1
        if dealer_class.beats(player_class):
            return -1
        return 0

    # Compare best totals
    player_value = player_hand.best_total
    dealer_value = dealer_hand.best_total
    if player_value > dealer_value:
        return 1
    if dealer_value > player_value:
        return -1
    return 0
