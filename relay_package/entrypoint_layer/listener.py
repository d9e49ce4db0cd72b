from typing import Callable, Optional

import requests
from telebot import types
from telebot.apihelper import ApiException

from ..config import RelayConfig
from ..reporitory_layer.telegram.telegram_bot import TelegramBot
from ..service_layer.responder import respond
from ..utils.logger import logger

Responder = Callable[..., str]


class MessageListener:
    """Relays every inbound text message to the responder and replies in the same chat."""

    def __init__(self, config: RelayConfig, bot: TelegramBot, responder: Responder = respond):
        self.config = config
        self.bot = bot
        self.responder = responder

    def handle_update(self, update: types.Update) -> Optional[str]:
        """
        Processes a single update. Returns the reply text, or None if the
        update carried no text message.
        """
        message = update.message
        if message is None or not message.text:
            logger.debug(f"Skipping update {update.update_id}: no text message.")
            return None

        username = message.from_user.username if message.from_user else None
        logger.info(f"[{username}] {message.text}")

        reply = self.responder(message.text, self.config.rapidapi_key, timeout=self.config.request_timeout)

        try:
            self.bot.send_message(message.chat.id, reply)
        except (ApiException, requests.RequestException) as e:
            logger.error(f"❌ Failed to send reply to chat {message.chat.id}: {type(e).__name__} - {e}")
        return reply

    def run(self) -> None:
        """Consumes the update stream sequentially until interrupted."""
        logger.info(f"👂 Listening for messages as @{self.bot.username} (poll timeout {self.bot.poll_timeout}s)")
        for update in self.bot.iter_updates():
            try:
                self.handle_update(update)
            except Exception as e:
                logger.error(f"❌ Unexpected error while handling update {update.update_id}: {e}")
                logger.exception(e)
