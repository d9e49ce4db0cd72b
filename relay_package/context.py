# --- Application Context / Shared Resources ---
import logging

from .config import RelayConfig
from .entrypoint_layer.listener import MessageListener
from .reporitory_layer.telegram.telegram_bot import TelegramBot
from .utils.logger import configure_logging, logger


def create_listener(config: RelayConfig) -> MessageListener:
    """
    Applies logging settings, authorizes the Telegram bot and wires the listener.

    Raises whatever TelegramBot raises when authorization fails; callers treat it as fatal.
    """
    configure_logging(
        config.log_level,
        intercept_level=logging.DEBUG if config.telegram_debug else logging.WARNING,
    )
    bot = TelegramBot(config.telegram_bot_token, poll_timeout=config.poll_timeout)
    logger.info("✅ Application context initialized (Telegram client ready).")
    return MessageListener(config, bot)
