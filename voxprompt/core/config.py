"""
Configuration management for VoxPrompt.

This module handles environment variables, API keys and model settings for the
AI-enhanced generation path. Environment files are loaded explicitly with
python-dotenv; nothing is loaded implicitly at import time. The deterministic
prompt builder does not read any of this configuration.
"""

import logging
import os
from functools import lru_cache
from typing import Optional

import httpx
from dotenv import load_dotenv
from openai import OpenAI

logger = logging.getLogger(__name__)

PLACEHOLDER_API_KEY = "sk-..."
ENV_FILE_ENV_VAR = "VP_ENV_FILE"
PROXY_ENV_VARS = ("HTTPS_PROXY", "HTTP_PROXY", "https_proxy", "http_proxy")


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""

    pass


@lru_cache(maxsize=32)
def load_env_file(env_path: Optional[str] = None, override: bool = False) -> Optional[str]:
    """
    Explicitly load environment variables from a .env file.

    When env_path is None, the path named by VP_ENV_FILE is used if set.

    Returns:
        The path that was loaded, or None if nothing was loaded
    """
    path = env_path or os.getenv(ENV_FILE_ENV_VAR)
    if path and os.path.isfile(path):
        load_dotenv(dotenv_path=path, override=override)
        return path
    return None


def is_usable_api_key(key: Optional[str]) -> bool:
    """False for missing keys and for the placeholder value shipped in example env files."""
    return bool(key) and not key.startswith(PLACEHOLDER_API_KEY)


class Config:
    """Configuration settings for VoxPrompt, read from the environment on access."""

    @property
    def openai_api_key(self) -> str:
        """Get OpenAI API key from environment."""
        key = os.getenv("OPENAI_API_KEY")
        if not key:
            raise ConfigError("OPENAI_API_KEY not found in environment. Set it in your environment or pass --env-file.")
        if not is_usable_api_key(key):
            raise ConfigError(f'OPENAI_API_KEY is still set to the placeholder value "{PLACEHOLDER_API_KEY}". Replace it with a real key.')
        return key

    @property
    def llm_model(self) -> str:
        """Get the model name for AI-enhanced generation (default: gpt-4o-mini)."""
        return os.getenv("LLM_MODEL", "gpt-4o-mini")

    @property
    def is_reasoning_model(self) -> bool:
        """Check if the configured model is a reasoning model (default: False)."""
        value = os.getenv("IS_REASONING_MODEL", "false").lower()
        return value in ("true", "1", "yes", "on")

    @property
    def model_temperature(self) -> float:
        """Get sampling temperature (default: 0.4, valid range 0.0-2.0)."""
        raw = os.getenv("MODEL_TEMPERATURE", "0.4")
        try:
            temperature = float(raw)
        except ValueError:
            logger.warning(f"Invalid MODEL_TEMPERATURE format: {raw}. Using 0.4 as default.")
            return 0.4
        if not 0.0 <= temperature <= 2.0:
            logger.warning(f"Invalid MODEL_TEMPERATURE value: {temperature}. Using 0.4 as default.")
            return 0.4
        return temperature

    @property
    def openai_timeout(self) -> int:
        """Get OpenAI API timeout in seconds (default: 90)."""
        return int(os.getenv("OPENAI_TIMEOUT", "90"))

    @property
    def max_retries(self) -> int:
        """Get maximum number of automatic retries for API calls (default: 1)."""
        return int(os.getenv("MAX_RETRIES", "1"))

    @property
    def proxy_url(self) -> Optional[str]:
        """Get the HTTP(S) proxy for OpenAI requests, if any."""
        for var in PROXY_ENV_VARS:
            value = os.getenv(var)
            if value:
                return value
        return None

    @property
    def debug(self) -> bool:
        """Check if debug logging is enabled via VP_DEBUG=1."""
        return os.getenv("VP_DEBUG", "0") == "1"


# Global config instance
config = Config()


@lru_cache(maxsize=8)
def get_client(api_key: Optional[str] = None) -> OpenAI:
    """
    Get a configured OpenAI client.

    A user-supplied key takes precedence over OPENAI_API_KEY. Requests are
    routed through HTTPS_PROXY/HTTP_PROXY when one is set.

    Args:
        api_key: Optional key supplied by the caller

    Returns:
        OpenAI client instance

    Raises:
        ConfigError: If no usable API key is available or the client cannot be created
    """
    if api_key is not None and not is_usable_api_key(api_key):
        raise ConfigError("The supplied API key is empty or a placeholder.")
    key = api_key or config.openai_api_key

    http_client = None
    proxy = config.proxy_url
    if proxy:
        logger.info(f"Routing OpenAI requests through proxy: {proxy}")
        http_client = httpx.Client(proxy=proxy)

    try:
        return OpenAI(
            api_key=key,
            timeout=config.openai_timeout,
            max_retries=config.max_retries,
            http_client=http_client,
        )
    except Exception as e:
        raise ConfigError(f"Failed to create OpenAI client: {e}")
