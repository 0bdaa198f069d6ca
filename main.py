#!/usr/bin/env python
"""CLI for listing NewsAPI articles."""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

import httpx
from pydantic import BaseModel, field_validator

from newswire.client import NewsApi
from newswire.config import get_default_configuration, load_config
from newswire.data import Endpoint, Language, RequestConfig, SortBy
from newswire.errors import InvalidRequestError

logger = logging.getLogger(__name__)


class CLIArgs(BaseModel):
    """Validated CLI arguments."""

    query: str
    config: Path | None = None
    endpoint: Endpoint = Endpoint.EVERYTHING
    language: Language | None = None
    sort_by: SortBy | None = None
    page_size: int | None = None
    page: int | None = None
    from_date: str | None = None
    to_date: str | None = None

    @field_validator("config")
    @classmethod
    def config_must_exist(cls, v: Path | None) -> Path | None:
        if v is not None and not v.exists():
            raise ValueError(f"Config file not found: {v}")
        return v

    def to_request_config(self) -> RequestConfig:
        """Only options given on the command line override the defaults."""
        request: RequestConfig = {"q": self.query, "endpoint": self.endpoint}
        for key in ("language", "sort_by", "page_size", "page", "from_date", "to_date"):
            value = getattr(self, key)
            if value is not None:
                request[key] = value  # type: ignore[literal-required]
        return request


async def run(args: CLIArgs) -> None:
    """Fetch articles for the query and log them.

    Args:
        args: Validated CLI arguments.
    """
    config = load_config(args.config) if args.config else get_default_configuration()
    api = NewsApi(config)

    logger.info(f"Searching {args.endpoint.value} for: {args.query}")
    data = await api.fetch_articles(args.to_request_config())

    if data.is_error:
        logger.error(f"NewsAPI error ({data.code}): {data.message}")
        sys.exit(1)

    print(f"\nFound {data.total_results} articles, showing {len(data.articles)}:\n")
    for i, article in enumerate(data.articles, 1):
        logger.info(f"{i}. {article.title}")
        if article.description:
            logger.info(f"   {article.description}")
        if article.author:
            logger.info(f"   Author: {article.author}")
        logger.info(f"   Source: {article.source.name}")
        if article.published_at:
            logger.info(f"   Published: {article.published_at}")
        logger.info(f"   URL: {article.url}")


def main() -> None:
    """Entry point for the CLI."""
    parser = argparse.ArgumentParser(description="List news articles from NewsAPI.")
    parser.add_argument("query", help="Keywords or phrase to search for")
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        help="Path to YAML config file (default: configs/default.yaml if present)",
    )
    parser.add_argument(
        "--endpoint",
        choices=[e.value for e in Endpoint],
        default=Endpoint.EVERYTHING.value,
        help="NewsAPI endpoint (default: everything)",
    )
    parser.add_argument("--language", choices=[lang.value for lang in Language])
    parser.add_argument("--sort-by", choices=[s.value for s in SortBy])
    parser.add_argument("--page-size", type=int, help="Results per page (1-100)")
    parser.add_argument("--page", type=int)
    parser.add_argument("--from", dest="from_date", help="Oldest article date (ISO 8601)")
    parser.add_argument("--to", dest="to_date", help="Newest article date (ISO 8601)")

    logging.basicConfig(level=logging.INFO, format="%(message)s")

    ns = parser.parse_args()

    try:
        args = CLIArgs(
            query=ns.query,
            config=ns.config,
            endpoint=ns.endpoint,
            language=ns.language,
            sort_by=ns.sort_by,
            page_size=ns.page_size,
            page=ns.page,
            from_date=ns.from_date,
            to_date=ns.to_date,
        )
    except Exception as e:
        logger.error(str(e))
        sys.exit(1)

    try:
        asyncio.run(run(args))
    except InvalidRequestError as e:
        logger.error(f"Invalid request: {e}")
        sys.exit(1)
    except httpx.HTTPError as e:
        logger.error(f"Request failed: {e}")
        sys.exit(1)
    except ValueError as e:
        # Non-JSON body, e.g. an HTML error page from a proxy.
        logger.error(f"Could not decode NewsAPI response: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
