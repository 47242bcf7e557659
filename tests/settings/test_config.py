"""Tests for configuration classes."""

import logging
import os
from unittest.mock import patch

import pytest

import config as app_config
from blackjack.config import GameConfig
from config import AppConfig, configure_logging


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        """Test the default house rules and bankroll."""
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

        assert config.num_decks == 1
        assert config.starting_account == 200
        assert config.default_bet == 5
        assert config.dealer_stands_on == 16
        assert config.enforce_bet_limit is False

    def test_num_decks_from_env(self):
        """Test that the deck count is read from the environment."""
        with patch.dict(os.environ, {"BLACKJACK_NUM_DECKS": "6"}):
            config = GameConfig()

        assert config.num_decks == 6

    def test_bet_limit_from_env(self):
        """Test that the bet limit flag is read from the environment."""
        with patch.dict(os.environ, {"BLACKJACK_ENFORCE_BET_LIMIT": "TRUE"}):
            config = GameConfig()

        assert config.enforce_bet_limit is True

    def test_invalid_num_decks(self):
        """Test that a deck count below one is rejected."""
        with pytest.raises(ValueError):
            GameConfig(num_decks=0)

    def test_frozen(self):
        """Test that the configuration cannot be changed."""
        config = GameConfig()
        with pytest.raises(AttributeError):
            config.default_bet = 10


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_defaults(self):
        """Test application defaults."""
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

        assert config.debug is False
        assert config.log_level == "WARNING"

    def test_env_overrides(self):
        """Test debug and log level from the environment."""
        with patch.dict(os.environ, {"DEBUG": "true", "LOG_LEVEL": "info"}):
            config = AppConfig()

        assert config.debug is True
        assert config.log_level == "INFO"

    def test_configure_logging_level(self):
        """Test that the configured level reaches the root logger."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers.clear()
        try:
            configure_logging(AppConfig(debug=False, log_level="ERROR"))
            assert root.level == logging.ERROR
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_configure_logging_debug(self):
        """Test that debug mode forces DEBUG level."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        root.handlers.clear()
        try:
            configure_logging(AppConfig(debug=True, log_level="ERROR"))
            assert root.level == logging.DEBUG
        finally:
            root.handlers[:] = saved_handlers
            root.setLevel(saved_level)

    def test_reexports_game_config(self):
        """Test that the application module exposes the engine's GameConfig."""
        assert app_config.GameConfig is GameConfig
