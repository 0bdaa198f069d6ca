"""Pydantic configuration models for newswire."""

from typing import Any

from pydantic import BaseModel, Field

from newswire.data.models import Endpoint, Language, SortBy

NEWS_API_BASE_URL = "https://newsapi.org/v2"


class RequestDefaults(BaseModel):
    """Baseline request options merged underneath every caller config.

    Field order is the order defaults appear in the query string.
    """

    q: str = ""
    endpoint: Endpoint = Endpoint.EVERYTHING
    language: Language = Language.ENGLISH
    sort_by: SortBy = SortBy.PUBLISHED_AT
    page_size: int = Field(default=100, ge=1, le=100)
    page: int = Field(default=1, ge=1)
    api_key: str | None = Field(default=None, repr=False)

    model_config = {"frozen": True}

    def as_request_config(self) -> dict[str, Any]:
        """Return the defaults as a plain dict, ready to be merged."""
        return dict(self)


class NewsApiConfig(BaseModel):
    """Root configuration for the NewsAPI client."""

    base_url: str = NEWS_API_BASE_URL
    timeout: float | None = 30.0
    defaults: RequestDefaults = Field(default_factory=RequestDefaults)

    model_config = {"frozen": True}
