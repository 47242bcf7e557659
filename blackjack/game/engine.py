"""Blackjack round engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.config import GameConfig
from blackjack.errors import InvalidBetAmountError
from blackjack.hand import Bust, Hand, HandClass, Totals, evaluate_hands
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameStatus

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    Single-player blackjack engine using a state machine.

    Each deal rebuilds and reshuffles the deck, takes the bet from the
    account and starts a round. The round ends when the player busts or
    stands and the dealer has finished drawing.

    This is the core game logic, completely UI-agnostic.
    Communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameStatus]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_round", "source": "*", "dest": "in_progress"},
        {"trigger": "player_busts", "source": "in_progress", "dest": "dealer_won"},
        {"trigger": "player_wins", "source": "in_progress", "dest": "player_won"},
        {"trigger": "dealer_wins", "source": "in_progress", "dest": "dealer_won"},
        {"trigger": "push", "source": "in_progress", "dest": "draw"},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        num_decks: int | None = None,
        game_config: GameConfig | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        The deck stays empty until the first deal.

        Args:
            rng: Random number generator for reproducible games
            num_decks: Number of decks per round (defaults to the config value)
            game_config: House rules and bankroll defaults
        """
        self.game_config = game_config or GameConfig()
        self._deck = Deck(
            num_decks=num_decks if num_decks is not None else self.game_config.num_decks,
            rng=rng,
        )

        self._player_hand = Hand()
        self._dealer_hand = Hand()
        self._account = self.game_config.starting_account
        self._bet = self.game_config.default_bet
        self._stake = 0
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="in_progress",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def status(self) -> GameStatus:
        """Get current round status as enum."""
        return GameStatus[self._machine_state.upper()]  # type: ignore

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal(self) -> None:
        """
        Start a new round.

        Drops the previous round's events, clears both hands, rebuilds the
        deck, deals player, dealer (face down), player, dealer and takes the
        bet from the account.

        Raises:
            InvalidBetAmountError: If the bet limit is enforced and the bet
                exceeds the account
        """
        self._check_bet(self._bet)

        self.events.clear_history()
        self._player_hand.clear()
        self._dealer_hand.clear()
        self.start_round()

        self._deck.build()
        self.events.emit_new(EventType.DECK_SHUFFLED, num_decks=self._deck.num_decks)

        self._deal_card_to_hand(self._player_hand)
        self._deal_card_to_hand(self._dealer_hand, face_up=False)
        self._deal_card_to_hand(self._player_hand)
        self._deal_card_to_hand(self._dealer_hand)

        self._stake = self._bet
        self._account -= self._stake
        self.events.emit_new(EventType.BET_PLACED, amount=self._stake, account=self._account)
        self.events.emit_new(EventType.ROUND_STARTED)
        logger.debug("Round dealt: player %s, dealer %s", self._player_hand, self._dealer_hand)

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card:
        """Deal a card to a hand."""
        card = self._deck.draw()
        if not face_up:
            card = card.turned_down()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card),
            hand="dealer" if hand is self._dealer_hand else "player",
        )
        return card

    def _can_act(self, action: str) -> bool:
        """Check that a player action is allowed, reporting it if not."""
        if self.status != GameStatus.IN_PROGRESS or not self._player_hand:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=f"Cannot {action} in current state",
                state=self.status.name,
            )
            return False
        return True

    def hit(self) -> bool:
        """
        Player hits (takes another card).

        A bust ends the round for the dealer without the dealer playing.

        Returns:
            True if the card was dealt
        """
        if not self._can_act("hit"):
            return False

        self._deal_card_to_hand(self._player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, totals=str(self._player_hand.totals))

        if self._player_hand.evaluation == HandClass.BUST:
            self.events.emit_new(EventType.PLAYER_BUSTS)
            self.player_busts()
            self._finish_round(credit=0)
        return True

    def stand(self) -> bool:
        """
        Player stands; the dealer reveals and plays, then the round resolves.

        Returns:
            True if the stand was accepted
        """
        if not self._can_act("stand"):
            return False

        self.events.emit_new(EventType.PLAYER_STAND, totals=str(self._player_hand.totals))
        self._play_dealer()
        self._resolve_round()
        return True

    def _play_dealer(self) -> None:
        """Dealer reveals the hole card and draws until standing or busting."""
        card = self._dealer_hand.reveal_hole_card()
        if card is not None:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(card),
                totals=str(self._dealer_hand.totals),
            )

        while self._dealer_should_hit():
            self._deal_card_to_hand(self._dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, totals=str(self._dealer_hand.totals))

        if self._dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, total=self._dealer_hand.best_total)

    def _dealer_should_hit(self) -> bool:
        """Dealer draws while the best total is below the stand threshold."""
        totals = self._dealer_hand.totals
        if isinstance(totals, Bust):
            return False
        return totals.best < self.game_config.dealer_stands_on

    def _resolve_round(self) -> None:
        """Compare hands, move to the outcome state and pay out."""
        outcome = evaluate_hands(self._player_hand, self._dealer_hand)

        if outcome == 1:
            self.player_wins()
            credit = self._stake * 2
            self.events.emit_new(EventType.PLAYER_WINS, amount=self._stake)
        elif outcome == -1:
            self.dealer_wins()
            credit = 0
            self.events.emit_new(EventType.PLAYER_LOSES, amount=self._stake)
        else:
            self.push()
            credit = self._stake
            self.events.emit_new(EventType.PUSH)

        self._finish_round(credit)

    def _finish_round(self, credit: int) -> None:
        """Credit the account and announce the result."""
        self._account += credit
        self.events.emit_new(
            EventType.ROUND_ENDED,
            status=self.status.name,
            credit=credit,
            account=self._account,
        )
        logger.debug("Round ended: %s, account %d", self.status, self._account)

    def _check_bet(self, amount: int) -> None:
        """Validate a bet amount."""
        if amount < 0:
            raise InvalidBetAmountError(amount)
        if self.game_config.enforce_bet_limit and amount > self._account:
            raise InvalidBetAmountError(amount, self._account)

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.status == GameStatus.IN_PROGRESS and bool(self._player_hand)

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.can_hit

    @property
    def player_cards(self) -> tuple[Card, ...]:
        """Return the player's cards in dealing order."""
        return tuple(self._player_hand.cards)

    @property
    def dealer_cards(self) -> tuple[Card, ...]:
        """Return the dealer's cards in dealing order, hole card included."""
        return tuple(self._dealer_hand.cards)

    @property
    def player_totals(self) -> Totals:
        return self._player_hand.totals

    @property
    def dealer_totals(self) -> Totals:
        return self._dealer_hand.totals

    @property
    def player_evaluation(self) -> HandClass:
        return self._player_hand.evaluation

    @property
    def dealer_evaluation(self) -> HandClass:
        return self._dealer_hand.evaluation

    @property
    def deck(self) -> tuple[Card, ...]:
        """Return the undealt cards, next card first."""
        return self._deck.cards

    @property
    def num_decks(self) -> int:
        return self._deck.num_decks

    @property
    def account(self) -> int:
        return self._account

    @account.setter
    def account(self, amount: int) -> None:
        self._account = amount

    @property
    def bet(self) -> int:
        return self._bet

    @bet.setter
    def bet(self, amount: int) -> None:
        self._check_bet(amount)
        self._bet = amount


def new_game(rng: Random | None = None, num_decks: int | None = None) -> BlackjackGame:
    """Create a game with the default account of 200 and bet of 5."""
    return BlackjackGame(rng=rng, num_decks=num_decks)
