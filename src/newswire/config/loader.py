"""Configuration loading from YAML files and the environment."""

import logging
import os
from functools import lru_cache
from pathlib import Path

import yaml
from dotenv import load_dotenv

from newswire.config.models import NewsApiConfig

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "NEWS_API_TOKEN"


def load_api_key() -> str | None:
    """Read the NewsAPI key from the environment, loading a ``.env`` file first.

    Variables already set in the environment take precedence over ``.env``.
    """
    load_dotenv()
    return os.environ.get(API_KEY_ENV_VAR) or None


def load_config(path: Path | str) -> NewsApiConfig:
    """Load configuration from YAML file.

    An API key missing from the file is filled in from ``NEWS_API_TOKEN``.

    Args:
        path: Path to YAML config file.

    Returns:
        Validated NewsApiConfig.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        pydantic.ValidationError: If config is invalid.
    """
    path = Path(path)
    with path.open() as f:
        raw = yaml.safe_load(f) or {}

    defaults = raw.setdefault("defaults", {}) or {}
    if not defaults.get("api_key"):
        defaults["api_key"] = load_api_key()
    raw["defaults"] = defaults

    return NewsApiConfig.model_validate(raw)


def get_default_config_path() -> Path:
    """Get path to default config file."""
    return Path(__file__).parent.parent.parent.parent / "configs" / "default.yaml"


@lru_cache(maxsize=1)
def get_default_configuration() -> NewsApiConfig:
    """Build the process-wide default configuration, once.

    Uses the bundled YAML file when present, otherwise built-in defaults with
    the API key taken from the environment.
    """
    path = get_default_config_path()
    if path.exists():
        logger.debug("Loading default configuration from %s", path)
        return load_config(path)
    return NewsApiConfig.model_validate({"defaults": {"api_key": load_api_key()}})
