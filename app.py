import sys

import requests
from telebot.apihelper import ApiException

# --- Import logger and configuration ---
from relay_package.config import ConfigurationError, load_config
from relay_package.context import create_listener
from relay_package.utils.logger import logger


# --- Bot Start Function ---
def start() -> None:
    # .env loading and validation happen inside load_config
    try:
        config = load_config()
    except ConfigurationError as e:
        logger.critical(f"❌ Cannot start: {e}")
        sys.exit(1)

    try:
        listener = create_listener(config)
    except (ValueError, ApiException, requests.RequestException) as e:
        logger.critical(f"❌ Telegram authorization failed: {e}")
        sys.exit(1)

    try:
        listener.run()
    except KeyboardInterrupt:
        logger.info("👋 Interrupted, shutting down.")

if __name__ == "__main__":
    start()
