# tests/conftest.py
import asyncio
import copy

import httpx
import pytest

from news_reader.client import NewsClient
from news_reader.schemas import FetchResult

BASE_URL = "https://news.test/api/1/news"
API_KEY = "test-key"

SAMPLE_PAYLOAD = {
    "status": "success",
    "totalResults": 37,
    "results": [
        {
            "article_id": "a1",
            "title": "Rates held steady",
            "link": "https://example.com/rates",
            "keywords": ["economy"],
            "description": "The central bank left rates unchanged.",
            "image_url": "https://example.com/rates.jpg",
            "pubDate": "2024-05-01 10:20:30",
            "pubDateTZ": "UTC",
            "source_id": "example",
            "source_name": "Example News",
            "source_url": "https://example.com",
            "source_priority": 1200,
            "country": ["united states of america"],
        },
        {"title": "Second story"},
        {},
    ],
    "nextPage": "17148930",
}


@pytest.fixture()
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture()
def make_client():
    """Build a NewsClient whose transport is a stub handler; requests are recorded."""

    def _make(handler, requests=None):
        def _handle(request):
            if requests is not None:
                requests.append(request)
            return handler(request)

        http_client = httpx.AsyncClient(transport=httpx.MockTransport(_handle))
        return NewsClient(api_key=API_KEY, base_url=BASE_URL, http_client=http_client)

    return _make


class StubNewsClient:
    """Controller-side stand-in whose fetches complete only when the test says so."""

    def __init__(self):
        self.calls = []
        self.pending = []

    async def fetch_parameters(self, params):
        future = asyncio.get_running_loop().create_future()
        self.calls.append(params)
        self.pending.append(future)
        return await future

    def resolve(self, index, titles):
        result = FetchResult.model_validate(
            {
                "status": "success",
                "totalResults": len(titles),
                "results": [{"title": t} for t in titles],
            }
        )
        self.pending[index].set_result(result)

    def fail(self, index, exc):
        self.pending[index].set_exception(exc)


@pytest.fixture()
def stub_client():
    return StubNewsClient()


@pytest.fixture()
def settle():
    """Let freshly scheduled tasks run up to their next suspension point."""

    async def _settle():
        for _ in range(5):
            await asyncio.sleep(0)

    return _settle
