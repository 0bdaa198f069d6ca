"""Async NewsAPI client built on httpx."""

import logging

import httpx

from newswire.config.loader import get_default_configuration
from newswire.config.models import NewsApiConfig
from newswire.data.models import RequestConfig, ResponseData
from newswire.request.builder import build_url

logger = logging.getLogger(__name__)


def _redact(url: httpx.URL) -> httpx.URL:
    """Hide the API key before a URL is logged."""
    if "apiKey" not in url.params:
        return url
    return url.copy_set_param("apiKey", "***")


class NewsApi:
    """Issue validated requests against the NewsAPI REST service.

    Each call merges the caller's options over ``config.defaults``, validates
    them and performs a single GET. Calls share no mutable state.

    Args:
        config: Client configuration (defaults to the process-wide default
            configuration, whose API key comes from NEWS_API_TOKEN).
        client: Optional shared ``httpx.AsyncClient``. When omitted, each call
            opens and closes its own client.
    """

    def __init__(
        self,
        config: NewsApiConfig | None = None,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._config = config or get_default_configuration()
        self._client = client

    @property
    def config(self) -> NewsApiConfig:
        return self._config

    def build_url(self, config: RequestConfig | None = None) -> httpx.URL:
        """Build the request URL without sending it."""
        return build_url(
            config,
            defaults=self._config.defaults,
            base_url=self._config.base_url,
        )

    async def make_request(self, config: RequestConfig | None = None) -> httpx.Response:
        """Send a GET request for the given options.

        Args:
            config: Caller options merged over the configured defaults.

        Returns:
            The raw response. HTTP error statuses are returned, not raised.

        Raises:
            InvalidRequestError: If validation fails. No request is sent.
            httpx.HTTPError: Transport failures, propagated unchanged.
        """
        url = self.build_url(config)
        logger.debug(f"NewsAPI GET {_redact(url)}")

        if self._client is not None:
            return await self._client.get(url)
        async with httpx.AsyncClient(timeout=self._config.timeout) as client:
            return await client.get(url)

    async def fetch_articles(self, config: RequestConfig | None = None) -> ResponseData:
        """Send a request and decode the JSON body.

        An upstream ``status: "error"`` body is returned as-is; check
        ``ResponseData.is_error``.
        """
        response = await self.make_request(config)
        data = ResponseData.from_dict(response.json())
        if data.is_error:
            logger.warning(f"NewsAPI returned error {data.code}: {data.message}")
        else:
            logger.info(f"NewsAPI returned {len(data.articles)} of {data.total_results} articles")
        return data
