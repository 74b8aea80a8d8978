"""Handles the parsing and validation of JsonTrans settings."""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .batching import DEFAULT_BATCH_SIZE
from .errors import ConfigurationError
from .types import Formality

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "DEEPL_API_KEY"
DEFAULT_PROVIDER = "deepl"
DEFAULT_TARGET_LANG = "FR"

# Providers that cannot run without an API key.
_PROVIDERS_REQUIRING_KEY = frozenset({"deepl"})


class ProviderSettings(BaseModel):
    """Settings for a specific translation provider."""

    api_key: str | None = None
    server_url: str | None = None
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=1)
    extra: dict[str, Any] | None = None


class JsonTransConfig(BaseModel):
    """The optional configuration file, providing defaults for command-line flags."""

    model_config = ConfigDict(extra="forbid")

    provider: str = DEFAULT_PROVIDER
    providers: dict[str, ProviderSettings] = Field(default_factory=dict)
    source_lang: str | None = None
    target_lang: str = DEFAULT_TARGET_LANG
    formal: bool = False
    translate_keys: bool = False

    def settings_for(self, provider_name: str) -> ProviderSettings:
        """Return the settings of ``provider_name``, or defaults if it is not configured."""
        return self.providers.get(provider_name) or ProviderSettings()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "JsonTransConfig":
        """
        Create a JsonTransConfig from a dictionary.

        Raises:
            ConfigurationError: If the data does not describe a valid configuration.

        """
        try:
            return cls(**data)
        except ValidationError as e:
            msg = f"Invalid or missing configuration: {e}"
            raise ConfigurationError(msg) from e


class TranslationJob(BaseModel):
    """Everything needed to translate one JSON document."""

    model_config = ConfigDict(frozen=True)

    input_path: Path
    output_path: Path
    provider: str = DEFAULT_PROVIDER
    source_lang: str | None = None
    target_lang: str = DEFAULT_TARGET_LANG
    formality: Formality = Formality.PREFER_LESS
    translate_keys: bool = False
    confirm: bool = False
    show_usage: bool = False
    dry_run: bool = False
    batch_size: int = Field(default=DEFAULT_BATCH_SIZE, ge=1)


def load_config(config_path: str | Path) -> JsonTransConfig:
    """
    Load, parse, and validate a YAML configuration file.

    Args:
        config_path: The path to the configuration file.

    Returns:
        A validated JsonTransConfig.

    Raises:
        ConfigurationError: If the file is missing, is not valid YAML, or is not a valid configuration.

    """
    path = Path(config_path)
    if not path.is_file():
        msg = f"Configuration file not found at: {config_path}"
        raise ConfigurationError(msg)

    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        msg = f"Error parsing YAML config file {config_path}: {e}"
        raise ConfigurationError(msg) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        msg = f"Config file {config_path} must be a YAML mapping (dictionary)."
        raise ConfigurationError(msg)

    logger.debug("Loaded configuration from %s: %s", path, data)
    return JsonTransConfig.from_dict(data)


def resolve_api_key(provider_name: str, cli_key: str | None, settings: ProviderSettings) -> str | None:
    """
    Pick the API key for a provider: command line, then config file, then environment.

    Raises:
        ConfigurationError: If the provider requires a key and none is available.

    """
    api_key = cli_key or settings.api_key or os.environ.get(API_KEY_ENV_VAR)
    if not api_key and provider_name in _PROVIDERS_REQUIRING_KEY:
        msg = f"Specify a DeepL API key as {API_KEY_ENV_VAR} environment variable, or using the --key or -k parameter."
        raise ConfigurationError(msg)
    return api_key
