import ipaddress
from pathlib import Path
from typing import Union

import yaml
from pydantic import BaseModel, Field, field_validator

from response_envelope.config.constants import LOCALIZED_MESSAGES


# =============================================================================
#   LogConfig
# =============================================================================
class LogConfig(BaseModel):
    """Logging configuration."""

    log_level: str
    file_log_level: str
    file_log_dir: str
    file_log_max_files: int = Field(ge=0)
    file_log_file_size_mb: int = Field(gt=0)

    @field_validator("log_level", "file_log_level")
    def check_log_level(cls, v: str) -> str:
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Unrecognized log level: {v}")
        return v.upper()

    @property
    def resolved_log_dir(self) -> Path:
        """Return absolute path to the log directory, creating it if needed.

        Relative paths are resolved against the current working directory.
        """
        p = Path(self.file_log_dir)
        if not p.is_absolute():
            p = (Path.cwd() / p).resolve()
        p.mkdir(parents=True, exist_ok=True)
        return p


# =============================================================================
#   ServerConfig
# =============================================================================
class ServerConfig(BaseModel):
    """HTTP server configuration for the demo application."""

    host: str
    port: int = Field(gt=0, le=65535)

    @field_validator("host")
    def check_host(cls, v: str) -> str:
        try:
            ipaddress.ip_address(v)
        except ValueError as exc:
            raise ValueError("host must be a valid IP address") from exc
        return v


# =============================================================================
#   MessagesConfig
# =============================================================================
class MessagesConfig(BaseModel):
    """Selects the language of the fixed envelope messages."""

    locale: str = "en"

    @field_validator("locale")
    def check_locale(cls, v: str) -> str:
        v = v.strip().lower()
        if v not in LOCALIZED_MESSAGES:
            raise ValueError(
                f"Unsupported locale: {v}. Available: {', '.join(sorted(LOCALIZED_MESSAGES))}"
            )
        return v

    def text(self, key: str) -> str:
        """Return the localized message for ``key`` (success, failure, unauthorized)."""
        return LOCALIZED_MESSAGES[self.locale][key]


# =============================================================================
#   Config  (root)
# =============================================================================
class Config(BaseModel):
    """Root configuration loaded from config.yml."""

    server: ServerConfig
    logging: LogConfig
    messages: MessagesConfig = MessagesConfig()

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "Config":
        """Load and validate configuration from a YAML file.

        Args:
            file_path: Path to config.yml.

        Returns:
            Validated Config instance.
        """
        file_path = Path(file_path)

        if not file_path.exists() or not file_path.is_file():
            raise FileNotFoundError(f"Config file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)

        return cls(**raw)
