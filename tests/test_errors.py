"""
Error-shape tests: every failure, including datastore faults and
framework-level errors, leaves the API as {"error": {"message": ...}}.
"""
import logging

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError

from blogful.config import settings
from blogful.dependencies import parse_id
from blogful.log import JSONFormatter, setup_logging
from blogful.main import app
from blogful.services import article_service


async def _broken_query(*args, **kwargs):
    raise OperationalError("SELECT 1", {}, Exception("connection refused"))


@pytest.fixture
def raw_client():
    """A client that receives the 500 response instead of the re-raised error."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    return AsyncClient(transport=transport, base_url="http://test")


@pytest.mark.asyncio
async def test_datastore_failure_is_a_generic_500(raw_client: AsyncClient, monkeypatch):
    monkeypatch.setattr(article_service, "get_all_articles", _broken_query)
    monkeypatch.setattr(settings, "APP_ENV", "production")

    async with raw_client:
        resp = await raw_client.get("/api/articles")
    assert resp.status_code == 500
    assert resp.json() == {"error": {"message": "server error"}}


@pytest.mark.asyncio
async def test_datastore_failure_shows_detail_outside_production(raw_client: AsyncClient, monkeypatch):
    monkeypatch.setattr(article_service, "get_by_id", _broken_query)
    monkeypatch.setattr(settings, "APP_ENV", "development")

    async with raw_client:
        resp = await raw_client.get("/api/articles/1")
    assert resp.status_code == 500
    assert "connection refused" in resp.json()["error"]["message"]


@pytest.mark.asyncio
async def test_unknown_route_uses_error_shape(async_client: AsyncClient):
    resp = await async_client.get("/api/nothing-here")
    assert resp.status_code == 404
    assert resp.json() == {"error": {"message": "Not Found"}}


@pytest.mark.asyncio
async def test_unsupported_method_uses_error_shape(async_client: AsyncClient):
    resp = await async_client.put("/api/articles", json={})
    assert resp.status_code == 405
    assert resp.json() == {"error": {"message": "Method Not Allowed"}}


@pytest.mark.asyncio
async def test_malformed_json_is_a_400(async_client: AsyncClient):
    resp = await async_client.post(
        "/api/articles",
        content=b"{not json",
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


@pytest.mark.parametrize("raw, expected", [
    ("1", 1),
    ("2147483647", 2147483647),
    ("2147483648", None),
    ("0", None),
    ("-3", None),
    ("1.5", None),
    ("١٢", None),
    ("abc", None),
])
def test_parse_id(raw, expected):
    assert parse_id(raw) == expected


def test_json_log_format():
    logger = setup_logging("INFO", "json")
    record = logger.makeRecord(
        logger.name, logging.INFO, __file__, 1, "GET %s", ("/api/articles",), None,
        extra={"status": 200},
    )
    formatted = JSONFormatter().format(record)
    assert '"message": "GET /api/articles"' in formatted
    assert '"status": 200' in formatted
    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
