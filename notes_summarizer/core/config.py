"""
Configuration management for the Meeting Notes Summarizer.

Loads configuration from:
1. .env file (provider credentials - never committed)
2. config.yaml (runtime settings)
"""

from dataclasses import dataclass
from typing import List, Optional
import logging
import os
import yaml
from dotenv import load_dotenv


logger = logging.getLogger(__name__)


@dataclass
class CompletionConfig:
    """Chat-completion provider configuration (OpenAI-compatible endpoint)."""

    api_key: str
    api_url: str = "https://api.groq.com/openai/v1/chat/completions"
    model: str = "llama-3.3-70b-versatile"
    timeout_seconds: float = 60.0


@dataclass
class EmailConfig:
    """SMTP relay configuration used to send summaries."""

    user: str
    password: str
    host: str = "smtp.gmail.com"
    port: int = 587
    use_tls: bool = True
    timeout_seconds: float = 30.0

    @property
    def sender(self) -> str:
        """Fixed sender identity (the authenticated mailbox)."""
        return self.user


@dataclass
class AppConfig:
    """Runtime application configuration (from config.yaml)."""

    # Return a hard error instead of a placeholder summary when the
    # completion response has no choices
    strict_summary_responses: bool = False

    # Base URL of a separately deployed relay server for the page to call;
    # unset runs the relays in-process
    relay_base_url: Optional[str] = None
    relay_timeout_seconds: float = 90.0

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None
    log_format: str = "standard"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("true", "1", "yes")


class ConfigManager:
    """Central configuration manager.

    Loads configuration from:
    - .env file for provider credentials (completion API key, SMTP login)
    - config.yaml for runtime settings
    """

    def __init__(self, env_file: Optional[str] = None, config_file: Optional[str] = None):
        """
        Initialize configuration manager.

        Args:
            env_file: Path to .env file (default: .env in working directory)
            config_file: Path to config.yaml file (default: config.yaml in working directory)
        """
        if env_file is None:
            env_file = ".env"
        load_dotenv(env_file)

        if config_file is None:
            config_file = "config.yaml"
        self.config_file = config_file

        self._load_env_config()
        self._load_yaml_config()

    def _load_env_config(self):
        """Load provider credentials from the environment."""

        self.completion = CompletionConfig(
            api_key=os.getenv("GROQ_API_KEY", ""),
            api_url=os.getenv("COMPLETION_API_URL", "https://api.groq.com/openai/v1/chat/completions"),
            model=os.getenv("COMPLETION_MODEL", "llama-3.3-70b-versatile"),
            timeout_seconds=float(os.getenv("COMPLETION_TIMEOUT_SECONDS", "60")),
        )

        self.email = EmailConfig(
            user=os.getenv("EMAIL_USER", ""),
            password=os.getenv("EMAIL_PASS", ""),
            host=os.getenv("SMTP_HOST", "smtp.gmail.com"),
            port=int(os.getenv("SMTP_PORT", "587")),
            use_tls=_env_bool("SMTP_USE_TLS", "true"),
            timeout_seconds=float(os.getenv("SMTP_TIMEOUT_SECONDS", "30")),
        )

    def _load_yaml_config(self):
        """Load runtime configuration from config.yaml."""
        if os.path.exists(self.config_file):
            try:
                with open(self.config_file, "r") as f:
                    data = yaml.safe_load(f) or {}
                self.app = AppConfig(**data)
            except (OSError, TypeError, yaml.YAMLError) as e:
                logger.warning(f"Failed to load {self.config_file}: {e}; using default configuration")
                self.app = AppConfig()
        else:
            self.app = AppConfig()

    def validate(self) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if not self.completion.api_key:
            errors.append("GROQ_API_KEY not set in .env")

        if not self.email.user:
            errors.append("EMAIL_USER not set in .env")
        if not self.email.password:
            errors.append("EMAIL_PASS not set in .env")
        if not (0 < self.email.port < 65536):
            errors.append(f"SMTP_PORT out of range: {self.email.port}")

        if self.app.relay_base_url and not self.app.relay_base_url.startswith(("http://", "https://")):
            errors.append("relay_base_url must be an http(s) URL")

        return errors


# Global singleton instance
_config: Optional[ConfigManager] = None


def get_config(env_file: Optional[str] = None, config_file: Optional[str] = None) -> ConfigManager:
    """
    Get global configuration manager instance (singleton).

    Args:
        env_file: Path to .env file (only used on first call)
        config_file: Path to config.yaml file (only used on first call)

    Returns:
        ConfigManager instance
    """
    global _config
    if _config is None:
        _config = ConfigManager(env_file=env_file, config_file=config_file)
    return _config


def reset_config():
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config
    _config = None
