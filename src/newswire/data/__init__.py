"""Data models for newswire."""

from newswire.data.models import (
    Article,
    ArticleSource,
    Endpoint,
    Language,
    RequestConfig,
    ResponseData,
    ResponseStatus,
    SortBy,
)

__all__ = [
    "Article",
    "ArticleSource",
    "Endpoint",
    "Language",
    "RequestConfig",
    "ResponseData",
    "ResponseStatus",
    "SortBy",
]
