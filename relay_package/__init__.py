from .config import ConfigurationError, RelayConfig, load_config
from .service_layer.responder import respond

# --- Import logger ---
from .utils.logger import logger

__all__ = ["ConfigurationError", "RelayConfig", "load_config", "respond", "logger"]
