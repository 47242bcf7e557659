"""Tests for the event emitter."""

from blackjack.game.events import EventEmitter, EventType, GameEvent


class TestEventEmitter:
    """Tests for EventEmitter."""

    def test_typed_subscription(self):
        """Test that handlers only see their event type."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PLAYER_HIT)

        emitter.emit_new(EventType.PLAYER_HIT, totals="12")
        emitter.emit_new(EventType.PLAYER_STAND)

        assert [e.event_type for e in seen] == [EventType.PLAYER_HIT]
        assert seen[0].data == {"totals": "12"}

    def test_catch_all_subscription(self):
        """Test that a handler without a type sees everything."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append)

        emitter.emit_new(EventType.PLAYER_HIT)
        emitter.emit_new(EventType.PUSH)

        assert len(seen) == 2

    def test_unsubscribe(self):
        """Test removing a handler."""
        emitter = EventEmitter()
        seen = []
        emitter.subscribe(seen.append, EventType.PUSH)

        assert emitter.unsubscribe(seen.append, EventType.PUSH)
        assert not emitter.unsubscribe(seen.append, EventType.PUSH)

        emitter.emit_new(EventType.PUSH)
        assert seen == []

    def test_history(self):
        """Test history snapshot and clearing."""
        emitter = EventEmitter()
        emitter.emit_new(EventType.ROUND_STARTED)
        emitter.emit(GameEvent(EventType.ROUND_ENDED, {"account": 195}))

        history = emitter.history
        assert [e.event_type for e in history] == [
            EventType.ROUND_STARTED,
            EventType.ROUND_ENDED,
        ]
        assert emitter.of_type(EventType.ROUND_ENDED)[0].data["account"] == 195

        emitter.clear_history()
        assert emitter.history == []
        assert len(history) == 2

    def test_event_str(self):
        """Test event rendering."""
        event = GameEvent(EventType.PLAYER_WINS, {"amount": 5})
        assert str(event) == "PLAYER_WINS: {'amount': 5}"
