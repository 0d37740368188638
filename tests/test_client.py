# tests/test_client.py
import httpx
import pytest

from news_reader.client import NewsClient, build_query_params
from news_reader.config import ReaderConfig
from news_reader.exceptions import DecodeError, NetworkError
from news_reader.models import FilterParameters


def test_query_omits_empty_category_and_missing_country():
    params = build_query_params("k", "", "en", None)
    assert params == {"apikey": "k", "language": "en"}


def test_query_omits_blank_category_and_country():
    params = build_query_params("k", "   ", "de", "  ")
    assert params == {"apikey": "k", "language": "de"}


def test_query_with_all_filters():
    params = build_query_params("k", "sports", "fr", "fr")
    assert params == {"apikey": "k", "language": "fr", "q": "sports", "country": "fr"}


async def test_fetch_sends_exact_query(make_client, sample_payload):
    requests = []
    client = make_client(lambda r: httpx.Response(200, json=sample_payload), requests)

    await client.fetch("sports", "fr", "fr")

    assert len(requests) == 1
    sent = requests[0]
    assert sent.method == "GET"
    assert sent.url.path == "/api/1/news"
    assert dict(sent.url.params) == {
        "apikey": "test-key",
        "language": "fr",
        "q": "sports",
        "country": "fr",
    }
    assert sent.headers["accept"] == "application/json"


async def test_fetch_parameters_without_filters(make_client, sample_payload):
    requests = []
    client = make_client(lambda r: httpx.Response(200, json=sample_payload), requests)

    await client.fetch_parameters(FilterParameters())

    query = dict(requests[0].url.params)
    assert query == {"apikey": "test-key", "language": "en"}


async def test_fetch_decodes_results_in_order(make_client, sample_payload):
    client = make_client(lambda r: httpx.Response(200, json=sample_payload))

    result = await client.fetch("", "en")

    assert result.status == "success"
    assert result.succeeded
    assert result.total_results == 37
    assert [a.title for a in result.results] == ["Rates held steady", "Second story", None]
    first = result.results[0]
    assert first.pub_date == "2024-05-01 10:20:30"
    assert first.source_name == "Example News"
    assert first.country == ["united states of america"]


async def test_transport_failure_is_network_error(make_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    client = make_client(handler)

    with pytest.raises(NetworkError) as excinfo:
        await client.fetch("", "en")
    assert isinstance(excinfo.value.cause, httpx.ConnectError)
    assert excinfo.value.__cause__ is excinfo.value.cause


async def test_timeout_is_network_error(make_client):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    client = make_client(handler)

    with pytest.raises(NetworkError):
        await client.fetch("", "en")


async def test_http_error_status_is_network_error(make_client):
    body = {"status": "error", "results": {"message": "API key invalid"}}
    client = make_client(lambda r: httpx.Response(401, json=body))

    with pytest.raises(NetworkError) as excinfo:
        await client.fetch("", "en")
    assert "401" in str(excinfo.value)


async def test_non_json_body_is_decode_error(make_client):
    client = make_client(lambda r: httpx.Response(200, text="<html>oops</html>"))

    with pytest.raises(DecodeError):
        await client.fetch("", "en")


async def test_missing_required_field_is_decode_error(make_client):
    client = make_client(lambda r: httpx.Response(200, json={"status": "success", "results": []}))

    with pytest.raises(DecodeError) as excinfo:
        await client.fetch("", "en")
    assert excinfo.value.cause is not None


async def test_owned_http_client_is_closed():
    client = NewsClient(api_key="k")
    async with client:
        pass
    assert client._http_client.is_closed


async def test_injected_http_client_is_left_open():
    http_client = httpx.AsyncClient()
    client = NewsClient(api_key="k", http_client=http_client)
    await client.aclose()
    assert not http_client.is_closed
    await http_client.aclose()


def test_from_config_uses_configured_endpoint():
    config = ReaderConfig(api_key="abc", base_url="https://news.test/x")
    http_client = httpx.AsyncClient()
    client = NewsClient.from_config(config, http_client=http_client)
    assert client.api_key == "abc"
    assert client.base_url == "https://news.test/x"


def test_empty_api_key_rejected():
    with pytest.raises(ValueError):
        NewsClient(api_key="")
