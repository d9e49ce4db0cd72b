"""Startup wiring: context creation and fatal startup errors."""
import pytest
from telebot.apihelper import ApiException

import app
from ..config import RelayConfig
from ..context import create_listener
from ..entrypoint_layer.listener import MessageListener
from ..reporitory_layer.telegram import telegram_bot
from .test_telegram_bot import FakeTeleBot


@pytest.fixture
def config():
    return RelayConfig(telegram_bot_token="123:abc", rapidapi_key="rapid-key")


def test_create_listener(monkeypatch, config):
    monkeypatch.setattr(telegram_bot.telebot, "TeleBot", FakeTeleBot)

    listener = create_listener(config)

    assert isinstance(listener, MessageListener)
    assert listener.config is config
    assert listener.bot.username == "relay_test_bot"
    assert listener.bot.poll_timeout == 60


def test_start_exits_on_configuration_error(monkeypatch):
    def missing():
        raise app.ConfigurationError("TELEGRAM_BOT_TOKEN is not set")
    monkeypatch.setattr(app, "load_config", missing)

    with pytest.raises(SystemExit) as exc_info:
        app.start()
    assert exc_info.value.code == 1


def test_start_exits_on_auth_failure(monkeypatch, config):
    def reject(self):
        raise ApiException("Unauthorized", "getMe", None)
    monkeypatch.setattr(app, "load_config", lambda: config)
    monkeypatch.setattr(telegram_bot.telebot, "TeleBot", FakeTeleBot)
    monkeypatch.setattr(FakeTeleBot, "get_me", reject)

    with pytest.raises(SystemExit) as exc_info:
        app.start()
    assert exc_info.value.code == 1


def test_start_stops_on_keyboard_interrupt(monkeypatch, config):
    def interrupt(self):
        raise KeyboardInterrupt
    monkeypatch.setattr(app, "load_config", lambda: config)
    monkeypatch.setattr(telegram_bot.telebot, "TeleBot", FakeTeleBot)
    monkeypatch.setattr(MessageListener, "run", interrupt)

    app.start()
