import time
from typing import Iterator, Optional

import requests
import telebot
from telebot import types
from telebot.apihelper import ApiException

from ...utils.logger import logger

# Pause before polling again after a failed getUpdates call
POLL_RETRY_DELAY = 3


class TelegramBot:
    """Encapsulates Telegram Bot API interactions (long polling and sending)."""
    def __init__(self, token: str, poll_timeout: int = 60):
        """
        Initializes the TelegramBot client and verifies the token with getMe.

        Args:
            token: The Telegram bot token.
            poll_timeout: Long-poll timeout for getUpdates, in seconds.

        Raises:
            ValueError: If the token is empty.
            ApiException: If Telegram rejects the token.
        """
        if not token:
            logger.error("❌ Error: TELEGRAM_BOT_TOKEN is required for TelegramBot.")
            raise ValueError("TELEGRAM_BOT_TOKEN is required.")

        self.poll_timeout = poll_timeout
        # Updates are consumed by our own loop, so no handler worker threads
        self.client = telebot.TeleBot(token, threaded=False)
        self.me: types.User = self.client.get_me()
        logger.info(f"✅ Authorized on account {self.me.username}")

    @property
    def username(self) -> Optional[str]:
        return self.me.username

    def iter_updates(self, offset: int = 0) -> Iterator[types.Update]:
        """
        Yields inbound updates forever, in arrival order.

        The offset is advanced past every yielded update so Telegram does not
        redeliver it. Failed polls are logged and retried after a short pause.
        """
        while True:
            try:
                updates = self.client.get_updates(
                    offset=offset,
                    timeout=self.poll_timeout,
                    long_polling_timeout=self.poll_timeout,
                )
            except (ApiException, requests.RequestException) as e:
                logger.warning(f"⚠️ Failed to get updates: {type(e).__name__} - {e}. Retrying in {POLL_RETRY_DELAY} seconds...")
                time.sleep(POLL_RETRY_DELAY)
                continue

            for update in updates:
                offset = max(offset, update.update_id + 1)
                yield update

    def send_message(self, chat_id: int, text: str) -> types.Message:
        """Raises ApiException or requests.RequestException if Telegram rejects or cannot be reached."""
        return self.client.send_message(chat_id, text)
