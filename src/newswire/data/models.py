"""Core data models for newswire."""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import StrEnum
from typing import Any, TypedDict


class Endpoint(StrEnum):
    """NewsAPI endpoints, used as the URL path segment."""

    EVERYTHING = "everything"
    TOP_HEADLINES = "top-headlines"


class Language(StrEnum):
    """2-letter ISO-639-1 language codes accepted by NewsAPI."""

    ARABIC = "ar"
    GERMAN = "de"
    ENGLISH = "en"
    SPANISH = "es"
    FRENCH = "fr"
    HEBREW = "he"
    ITALIAN = "it"
    DUTCH = "nl"
    NORWEGIAN = "no"
    PORTUGUESE = "pt"
    RUSSIAN = "ru"
    NORTHERN_SAMI = "se"
    CHINESE = "zh"
    # Listed by NewsAPI but not an ISO-639-1 code.
    UD = "ud"


class SortBy(StrEnum):
    """Article sort orders."""

    RELEVANCY = "relevancy"
    POPULARITY = "popularity"
    PUBLISHED_AT = "publishedAt"


class ResponseStatus(StrEnum):
    OK = "ok"
    ERROR = "error"


Domains = str | list[str]
DateLike = date | datetime | str


class RequestConfig(TypedDict, total=False):
    """Caller-supplied request options, merged over the default configuration.

    Every key is optional. A key set to ``None`` clears the default value
    rather than falling back to it.
    """

    endpoint: Endpoint
    q: str
    q_in_title: str | None
    domains: Domains | None
    exclude_domains: Domains | None
    from_date: DateLike | None
    to_date: DateLike | None
    language: Language
    sort_by: SortBy
    page_size: int | None
    page: int
    api_key: str | None


@dataclass(frozen=True)
class ArticleSource:
    """The publisher an article came from."""

    id: str | None
    name: str


@dataclass(frozen=True)
class Article:
    """A news article as returned by NewsAPI.

    ``content`` is truncated by the API to 200 characters.
    """

    source: ArticleSource
    title: str
    url: str
    author: str | None = None
    description: str | None = None
    url_to_image: str | None = None
    published_at: str | None = None
    content: str | None = None

    @classmethod
    def from_dict(cls, item: dict[str, Any]) -> "Article":
        source = item.get("source") or {}
        return cls(
            source=ArticleSource(id=source.get("id"), name=source.get("name", "")),
            title=item.get("title") or "",
            url=item.get("url") or "",
            author=item.get("author"),
            description=item.get("description"),
            url_to_image=item.get("urlToImage"),
            published_at=item.get("publishedAt"),
            content=item.get("content"),
        )


@dataclass(frozen=True)
class ResponseData:
    """Decoded NewsAPI response body.

    ``code`` and ``message`` are only set when ``status`` is ``error``.
    """

    status: ResponseStatus
    total_results: int = 0
    articles: list[Article] = field(default_factory=list)
    code: str | None = None
    message: str | None = None

    @property
    def is_error(self) -> bool:
        return self.status == ResponseStatus.ERROR

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ResponseData":
        total = data.get("totalResults", data.get("totalResult", 0))
        return cls(
            status=ResponseStatus(data.get("status", ResponseStatus.ERROR)),
            total_results=int(total or 0),
            articles=[Article.from_dict(item) for item in data.get("articles") or []],
            code=data.get("code"),
            message=data.get("message"),
        )
