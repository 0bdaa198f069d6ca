"""Request construction: merge, validate, normalize and serialize NewsAPI queries."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import UTC, date, datetime
from enum import Enum
from typing import Any

import httpx

from newswire.config.models import NEWS_API_BASE_URL, RequestDefaults
from newswire.data.models import DateLike, Endpoint, RequestConfig
from newswire.errors import InvalidRequestError, RequestErrorKind

MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 100

# Python keys whose query parameter name differs.
WIRE_NAMES = {
    "q_in_title": "qInTitle",
    "exclude_domains": "excludeDomains",
    "from_date": "from",
    "to_date": "to",
    "sort_by": "sortBy",
    "page_size": "pageSize",
    "api_key": "apiKey",
}

PYTHON_KEYS = {wire: key for key, wire in WIRE_NAMES.items()}

DOMAIN_SEPARATOR = ","


def canonicalize_keys(config: Mapping[str, Any]) -> dict[str, Any]:
    """Map query parameter names (``pageSize``, ``from``) onto ``RequestConfig`` keys.

    Raises:
        TypeError: On an unknown option, or one given under both of its names.
    """
    canonical: dict[str, Any] = {}
    for name, value in config.items():
        key = PYTHON_KEYS.get(name, name)
        if key not in RequestConfig.__annotations__:
            raise TypeError(f"Unknown request option: {name!r}")
        if key in canonical:
            raise TypeError(f"Request option {key!r} given more than once")
        canonical[key] = value
    return canonical


def merge_config(
    defaults: RequestDefaults | Mapping[str, Any],
    config: RequestConfig | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Shallow-merge a caller config over the defaults.

    Caller keys win, including keys explicitly set to ``None``. Lists are
    replaced, never appended to. Caller keys may use either the Python or
    the query parameter name.

    Raises:
        TypeError: If the caller config holds an unknown option.
    """
    if isinstance(defaults, RequestDefaults):
        defaults = defaults.as_request_config()
    return {**defaults, **canonicalize_keys(config or {})}


def _is_absent(value: Any) -> bool:
    return value is None or value == ""


def parse_date(value: DateLike) -> date:
    """Parse a date, datetime or ISO-8601 string into a calendar date.

    Timezone-aware datetimes are converted to UTC first.

    Raises:
        InvalidRequestError: If the value is not a valid ISO-8601 date.
    """
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value)
        except ValueError as e:
            raise InvalidRequestError(RequestErrorKind.INVALID_DATE_FORMAT) from e
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            try:
                value = value.astimezone(UTC)
            except OverflowError as e:
                raise InvalidRequestError(RequestErrorKind.INVALID_DATE_FORMAT) from e
        return value.date()
    if isinstance(value, date):
        return value
    raise InvalidRequestError(RequestErrorKind.INVALID_DATE_FORMAT)


def normalize_date(value: DateLike) -> str:
    """Return the ``YYYY-MM-DD`` form of a date-like value."""
    return parse_date(value).isoformat()


def validate_config(request: Mapping[str, Any]) -> None:
    """Validate a merged request config.

    Rules are checked in a fixed order and the first failure is raised:
    API key, page size presence, page size bounds, ``to_date``, ``from_date``.

    Raises:
        InvalidRequestError: Carrying the failed rule's kind.
    """
    if not request.get("api_key"):
        raise InvalidRequestError(RequestErrorKind.API_KEY_MISSING)

    page_size = request.get("page_size")
    if page_size is None:
        raise InvalidRequestError(RequestErrorKind.PAGE_SIZE_UNDEFINED)
    if not MIN_PAGE_SIZE <= page_size <= MAX_PAGE_SIZE:
        raise InvalidRequestError(RequestErrorKind.PAGE_SIZE_OUT_OF_BOUNDS)

    for key in ("to_date", "from_date"):
        value = request.get(key)
        if not _is_absent(value):
            parse_date(value)


def _format_value(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (list, tuple)):
        return DOMAIN_SEPARATOR.join(str(item).strip() for item in value)
    return str(value)


def serialize_params(request: Mapping[str, Any]) -> list[tuple[str, str]]:
    """Turn a validated request into ordered ``(name, value)`` query params.

    ``endpoint`` is left out since it selects the URL path. Dates are
    normalized to ``YYYY-MM-DD`` and ``None`` values are dropped.
    """
    params: list[tuple[str, str]] = []
    for key, value in request.items():
        if key == "endpoint" or value is None:
            continue
        if key in ("from_date", "to_date"):
            if _is_absent(value):
                continue
            value = normalize_date(value)
        params.append((WIRE_NAMES.get(key, key), _format_value(value)))
    return params


def build_url(
    config: RequestConfig | Mapping[str, Any] | None = None,
    *,
    defaults: RequestDefaults | None = None,
    base_url: str = NEWS_API_BASE_URL,
) -> httpx.URL:
    """Build the full request URL for a caller config.

    Args:
        config: Caller options, merged over ``defaults``.
        defaults: Baseline options (defaults to ``RequestDefaults()``).
        base_url: API root, without a trailing endpoint.

    Returns:
        The URL to GET, with percent-encoded query parameters.

    Raises:
        InvalidRequestError: If the merged config fails validation.
        TypeError: If the config holds an unknown option.
    """
    request = merge_config(defaults or RequestDefaults(), config)
    validate_config(request)

    endpoint = Endpoint(request.get("endpoint") or Endpoint.EVERYTHING)
    return httpx.URL(f"{base_url.rstrip('/')}/{endpoint.value}", params=serialize_params(request))
