"""Tests for src/engine/events.py and the game's turn history."""

from src.engine.base import GameOutcome
from src.engine.dice import RandomDieSource
from src.engine.events import TERMINAL_EVENTS, EventPayload, GameEvent
from src.engine.game import HISTORY_LIMIT, ShutTheBoxGame


def _events(game):
    return [entry.event for entry in game.history]


# ── GameEvent enum ──────────────────────────────────────────────────────

class TestGameEvent:
    def test_all_events_defined(self):
        expected = {
            "DICE_ROLLED", "TILE_FLIPPED", "MOVE_APPLIED",
            "GAME_WON", "GAME_LOST", "GAME_RESET",
        }
        assert {e.name for e in GameEvent} == expected

    def test_terminal_events(self):
        assert TERMINAL_EVENTS == {GameEvent.GAME_WON, GameEvent.GAME_LOST}


# ── EventPayload ────────────────────────────────────────────────────────

class TestEventPayload:
    def test_minimal_payload(self):
        p = EventPayload(event=GameEvent.GAME_RESET)
        assert p.data == {}
        assert p.is_terminal is False

    def test_terminal_payload(self):
        p = EventPayload(event=GameEvent.GAME_LOST, data={"score": 9})
        assert p.is_terminal is True
        assert p.data["score"] == 9


# ── Recorded history ────────────────────────────────────────────────────

class TestHistory:
    def test_fresh_game_is_empty(self, game):
        assert game.history == ()

    def test_roll_recorded(self, scripted_game):
        game = scripted_game(2, 5)
        game.roll_dice()
        (entry,) = game.history
        assert entry.event == GameEvent.DICE_ROLLED
        assert entry.data == {"dice": [2, 5], "current_sum": 7, "injected": False}

    def test_injection_flagged(self, game):
        game.set_dice_values(1, 2)
        assert game.history[0].data["injected"] is True

    def test_move_recorded(self, game):
        game.set_dice_values(1, 2)
        game.make_move([1, 2])
        entry = game.history[-1]
        assert entry.event == GameEvent.MOVE_APPLIED
        assert entry.data == {"tiles": [1, 2], "score": 42}

    def test_rejected_operations_not_recorded(self, game):
        game.flip_tile(0)
        game.make_move([3])
        game.set_dice_values(1, 2)
        game.make_move([9])
        assert _events(game) == [GameEvent.DICE_ROLLED]

    def test_flip_recorded(self, game):
        game.flip_tile(4)
        assert game.history[-1].data == {"tile": 4}

    def test_loss_sequence(self, nine_only_game):
        nine_only_game.set_dice_values(1, 1)
        nine_only_game.roll_dice()
        assert _events(nine_only_game)[-2:] == [GameEvent.DICE_ROLLED, GameEvent.GAME_LOST]
        assert nine_only_game.history[-1].data == {"current_sum": 2, "score": 9}

    def test_win_sequence(self, nine_only_game):
        nine_only_game.set_dice_values(4, 5)
        nine_only_game.make_move([9])
        assert _events(nine_only_game)[-2:] == [GameEvent.MOVE_APPLIED, GameEvent.GAME_WON]
        assert nine_only_game.history[-1].is_terminal is True

    def test_reset_clears_history(self, nine_only_game):
        nine_only_game.reset()
        assert _events(nine_only_game) == [GameEvent.GAME_RESET]

    def test_history_is_read_only_view(self, game):
        game.flip_tile(1)
        history = game.history
        game.flip_tile(2)
        assert len(history) == 1
        assert len(game.history) == 2

    def test_outcome_agrees_with_terminal_event(self, scripted_game):
        game = scripted_game(3)
        for tile in range(1, 10):
            game.flip_tile(tile)
        game.roll_dice()
        assert game.history[-1].event == GameEvent.GAME_LOST
        assert game.history[-1].data == {"current_sum": 3, "score": 0}
        assert game.outcome == GameOutcome.LOST

    def test_history_is_capped(self):
        game = ShutTheBoxGame(RandomDieSource(seed=1), history_limit=5)
        for _ in range(20):
            game.roll_dice()
        assert len(game.history) == 5
        assert all(entry.event == GameEvent.DICE_ROLLED for entry in game.history)

    def test_default_cap(self, game):
        for _ in range(HISTORY_LIMIT + 10):
            game.set_dice_values(1, 1)
        assert len(game.history) == HISTORY_LIMIT
