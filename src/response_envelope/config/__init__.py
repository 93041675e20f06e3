from response_envelope.config.config import Config, MessagesConfig
from response_envelope.config.constants import (
    CONFIG_DIR,
    CONFIG_FILE,
    GENERIC_FAILURE_CODE,
    LOCALIZED_MESSAGES,
    SUCCESS_CODE,
)

# Load once at import time.
configuration: Config = Config.load_from_file(file_path=CONFIG_FILE)

__all__ = [
    "Config",
    "MessagesConfig",
    "configuration",
    "CONFIG_DIR",
    "CONFIG_FILE",
    "SUCCESS_CODE",
    "GENERIC_FAILURE_CODE",
    "LOCALIZED_MESSAGES",
]
