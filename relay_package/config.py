# --- Configuration Loading ---
import os
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from .utils.logger import logger

# Telegram long-poll timeout in seconds
TELEGRAM_POLL_TIMEOUT = 60


class ConfigurationError(Exception):
    """Raised when the process cannot start with the current environment."""


class RelayConfig(BaseModel):
    telegram_bot_token: str = Field(..., min_length=1, repr=False, description="Telegram bot token from @BotFather.")
    rapidapi_key: str = Field(..., min_length=1, repr=False, description="RapidAPI key for the completion provider.")
    poll_timeout: int = Field(TELEGRAM_POLL_TIMEOUT, ge=0, description="Long-poll timeout for getUpdates, in seconds.")
    request_timeout: Optional[float] = Field(None, gt=0, description="HTTP timeout for completion calls. None waits forever.")
    log_level: str = Field("INFO", description="loguru level for the application log.")
    telegram_debug: bool = Field(False, description="Forward the Telegram client's debug logging.")


def _mask(secret: str) -> str:
    return secret[:4] + "****" + secret[-4:] if len(secret) > 8 else "****"


def load_config(env_file: Optional[str] = None) -> RelayConfig:
    """
    Loads the optional .env file, reads the environment and validates it.

    Args:
        env_file: Explicit path to a .env file. Defaults to python-dotenv's lookup.

    Returns:
        The validated RelayConfig.

    Raises:
        ConfigurationError: If a required variable is missing or a value is malformed.
    """
    # --- Load environment variables ---
    # Variables already set in the environment win over the .env file.
    if load_dotenv(dotenv_path=env_file):
        logger.info("✅ Loaded environment variables from .env file.")
    else:
        logger.info("ℹ️ No .env file found, relying on system environment variables.")

    # --- Read Configuration ---
    bot_token = os.environ.get("TELEGRAM_BOT_TOKEN", "")
    if not bot_token:
        logger.error("❌ TELEGRAM_BOT_TOKEN is not set")
        raise ConfigurationError("TELEGRAM_BOT_TOKEN is not set")

    rapidapi_key = os.environ.get("RAPIDAPI_KEY", "")
    if not rapidapi_key:
        logger.error("❌ RAPIDAPI_KEY is not set")
        raise ConfigurationError("RAPIDAPI_KEY is not set")

    raw_timeout = os.environ.get("RAPIDAPI_TIMEOUT", "").strip()
    try:
        config = RelayConfig(
            telegram_bot_token=bot_token,
            rapidapi_key=rapidapi_key,
            request_timeout=float(raw_timeout) if raw_timeout else None,
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            telegram_debug=os.environ.get("TELEGRAM_DEBUG", "false").lower() == "true",
        )
    except (ValueError, ValidationError) as e:
        logger.error(f"❌ Invalid configuration: {e}")
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    # --- Log loaded configuration ---
    logger.info(f"🔧 Configuration Loaded:")
    logger.info(f"   - TELEGRAM_BOT_TOKEN: Loaded")
    logger.info(f"   - RAPIDAPI_KEY: Loaded ({_mask(config.rapidapi_key)})")
    logger.info(f"   - Poll Timeout: {config.poll_timeout}s")
    if config.request_timeout is None:
        logger.warning("⚠️ RAPIDAPI_TIMEOUT not set, completion requests will wait indefinitely.")
    else:
        logger.info(f"   - Request Timeout: {config.request_timeout}s")
    return config
