"""newswire: a small async client for the NewsAPI REST service."""

from newswire.client import NewsApi
from newswire.config import (
    NewsApiConfig,
    RequestDefaults,
    get_default_configuration,
    load_config,
)
from newswire.data import (
    Article,
    ArticleSource,
    Endpoint,
    Language,
    RequestConfig,
    ResponseData,
    ResponseStatus,
    SortBy,
)
from newswire.errors import InvalidRequestError, RequestErrorKind
from newswire.request import build_url

__all__ = [
    # Models
    "Article",
    "ArticleSource",
    "Endpoint",
    "Language",
    "RequestConfig",
    "ResponseData",
    "ResponseStatus",
    "SortBy",
    # Errors
    "InvalidRequestError",
    "RequestErrorKind",
    # Client
    "NewsApi",
    "build_url",
    # Config
    "NewsApiConfig",
    "RequestDefaults",
    "get_default_configuration",
    "load_config",
]
