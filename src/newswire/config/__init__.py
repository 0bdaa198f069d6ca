"""Configuration module for newswire."""

from newswire.config.loader import (
    API_KEY_ENV_VAR,
    get_default_config_path,
    get_default_configuration,
    load_api_key,
    load_config,
)
from newswire.config.models import NEWS_API_BASE_URL, NewsApiConfig, RequestDefaults

__all__ = [
    "API_KEY_ENV_VAR",
    "NEWS_API_BASE_URL",
    "NewsApiConfig",
    "RequestDefaults",
    "get_default_config_path",
    "get_default_configuration",
    "load_api_key",
    "load_config",
]
