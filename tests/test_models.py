"""Tests for data models."""

from newswire.data import Article, ArticleSource, Endpoint, Language, ResponseData, ResponseStatus, SortBy
from newswire.errors import InvalidRequestError, RequestErrorKind


def test_enum_values_match_api() -> None:
    assert Endpoint.EVERYTHING == "everything"
    assert Endpoint.TOP_HEADLINES == "top-headlines"
    assert Language.ENGLISH == "en"
    assert Language.NORTHERN_SAMI == "se"
    assert SortBy.PUBLISHED_AT == "publishedAt"
    assert len(Language) == 14


def test_article_from_dict() -> None:
    article = Article.from_dict(
        {
            "source": {"id": None, "name": "Example News"},
            "author": "Jane Doe",
            "title": "A headline",
            "description": "Short description",
            "url": "https://example.com/a",
            "urlToImage": "https://example.com/a.jpg",
            "publishedAt": "2021-07-21T10:00:00Z",
            "content": "Body [+123 chars]",
        }
    )
    assert article.source == ArticleSource(id=None, name="Example News")
    assert article.author == "Jane Doe"
    assert article.url_to_image == "https://example.com/a.jpg"
    assert article.published_at == "2021-07-21T10:00:00Z"


def test_article_from_dict_tolerates_missing_fields() -> None:
    article = Article.from_dict({"title": None, "url": "https://example.com"})
    assert article.title == ""
    assert article.source.name == ""
    assert article.author is None


def test_response_data_ok() -> None:
    data = ResponseData.from_dict(
        {
            "status": "ok",
            "totalResults": 2,
            "articles": [
                {"source": {"id": "bbc", "name": "BBC"}, "title": "One", "url": "https://a"},
                {"source": {"id": None, "name": "CNN"}, "title": "Two", "url": "https://b"},
            ],
        }
    )
    assert data.status == ResponseStatus.OK
    assert not data.is_error
    assert data.total_results == 2
    assert [a.title for a in data.articles] == ["One", "Two"]


def test_response_data_accepts_total_result_key() -> None:
    data = ResponseData.from_dict({"status": "ok", "totalResult": 7, "articles": []})
    assert data.total_results == 7


def test_response_data_error() -> None:
    data = ResponseData.from_dict(
        {"status": "error", "code": "apiKeyInvalid", "message": "Your API key is invalid."}
    )
    assert data.is_error
    assert data.code == "apiKeyInvalid"
    assert data.articles == []


def test_invalid_request_error_carries_kind() -> None:
    err = InvalidRequestError(RequestErrorKind.PAGE_SIZE_OUT_OF_BOUNDS)
    assert isinstance(err, ValueError)
    assert err.kind is RequestErrorKind.PAGE_SIZE_OUT_OF_BOUNDS
    assert str(err) == "pageSize out of bounds"
