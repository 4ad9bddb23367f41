from __future__ import annotations

from urllib.parse import parse_qs

import httpx
import pytest

from tradier_sdk import Client, ErrorCode, TradierError


def _recording_transport(
    requests: list[httpx.Request],
    *,
    status_code: int = 200,
    body: bytes = b'{"ok": true}',
) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status_code, content=body)

    return httpx.MockTransport(handler)


def _form(request: httpx.Request) -> dict[str, list[str]]:
    return parse_qs(request.content.decode())


@pytest.mark.asyncio
async def test_get_sends_auth_headers_and_returns_raw_bytes() -> None:
    requests: list[httpx.Request] = []
    body = b'{"balances": {"total_equity": 1}}'
    async with Client("https://api.tradier.com/", "secret", transport=_recording_transport(requests, body=body)) as client:
        data = await client.get_balances("6YA00001")

    assert data == body
    request = requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://api.tradier.com/v1/accounts/6YA00001/balances"
    assert request.headers["Authorization"] == "Bearer secret"
    assert request.headers["Accept"] == "application/json"


@pytest.mark.asyncio
async def test_unset_query_params_are_dropped() -> None:
    requests: list[httpx.Request] = []
    async with Client("https://api.tradier.com", "k", transport=_recording_transport(requests)) as client:
        await client.get_gain_loss("A1", page="2", limit="", sort_by="closedate")

    params = dict(requests[0].url.params)
    assert params == {"page": "2", "sortBy": "closedate"}


@pytest.mark.asyncio
async def test_market_endpoints_use_tradier_parameter_names() -> None:
    requests: list[httpx.Request] = []
    async with Client("https://sandbox.tradier.com", "k", transport=_recording_transport(requests)) as client:
        await client.get_quotes("AAPL,MSFT", greeks="true")
        await client.get_option_expirations("SPY", include_all_roots="true", expiration_type="true")
        await client.get_option_lookup("SPY", option_type="put")
        await client.get_price_history("AAPL", interval="daily")
        await client.get_easy_to_borrow()
        await client.lookup_symbols("goog", types="stock")

    assert [request.url.path for request in requests] == [
        "/v1/markets/quotes",
        "/v1/markets/options/expirations",
        "/v1/markets/options/lookup",
        "/v1/markets/history",
        "/v1/markets/etb",
        "/v1/markets/lookup",
    ]
    assert dict(requests[0].url.params) == {"symbols": "AAPL,MSFT", "greeks": "true"}
    assert dict(requests[1].url.params) == {"symbol": "SPY", "includeAllRoots": "true", "expirationType": "true"}
    assert dict(requests[2].url.params) == {"underlying": "SPY", "type": "put"}
    assert dict(requests[5].url.params) == {"q": "goog", "types": "stock"}


@pytest.mark.asyncio
async def test_post_quotes_is_form_encoded() -> None:
    requests: list[httpx.Request] = []
    async with Client("https://api.tradier.com", "k", transport=_recording_transport(requests)) as client:
        await client.post_quotes("AAPL")

    request = requests[0]
    assert request.method == "POST"
    assert request.headers["Content-Type"] == "application/x-www-form-urlencoded"
    assert _form(request) == {"symbols": ["AAPL"]}


@pytest.mark.asyncio
async def test_place_order_sends_indexed_leg_fields() -> None:
    requests: list[httpx.Request] = []
    params = {
        "class": "multileg",
        "symbol": "SPY",
        "option_symbol[0]": "SPY240119C00470000",
        "side[0]": "buy_to_open",
        "quantity[0]": "1",
    }
    async with Client("https://api.tradier.com", "k", transport=_recording_transport(requests)) as client:
        await client.place_order("A1", params)

    request = requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1/accounts/A1/orders"
    assert _form(request)["option_symbol[0]"] == ["SPY240119C00470000"]
    assert _form(request)["class"] == ["multileg"]


@pytest.mark.asyncio
async def test_change_and_cancel_order_methods() -> None:
    requests: list[httpx.Request] = []
    async with Client("https://api.tradier.com", "k", transport=_recording_transport(requests)) as client:
        await client.change_order("A1", "99", {"price": "1.10"})
        await client.cancel_order("A1", "99")

    assert [(r.method, r.url.path) for r in requests] == [
        ("PUT", "/v1/accounts/A1/orders/99"),
        ("DELETE", "/v1/accounts/A1/orders/99"),
    ]
    assert _form(requests[0]) == {"price": ["1.10"]}


@pytest.mark.asyncio
async def test_watchlist_and_session_paths() -> None:
    requests: list[httpx.Request] = []
    async with Client("https://api.tradier.com", "k", transport=_recording_transport(requests)) as client:
        await client.update_watchlist("tech", "Tech")
        await client.add_watchlist_symbols("tech", "AAPL,MSFT")
        await client.remove_watchlist_symbol("tech", "AAPL")
        await client.get_profile()
        await client.create_market_session()
        await client.create_account_session()

    assert [(r.method, r.url.path) for r in requests] == [
        ("PUT", "/v1/watchlists/tech"),
        ("POST", "/v1/watchlists/tech/symbols"),
        ("DELETE", "/v1/watchlists/tech/symbols/AAPL"),
        ("GET", "/v1/user/profile"),
        ("POST", "/v1/markets/events/session"),
        ("POST", "/v1/accounts/events/session"),
    ]
    assert _form(requests[0]) == {"name": ["Tech"]}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("status_code", "code"),
    [
        (401, ErrorCode.UNAUTHORIZED),
        (403, ErrorCode.UNAUTHORIZED),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMITED),
        (500, ErrorCode.API_ERROR),
        (400, ErrorCode.API_ERROR),
    ],
)
async def test_http_errors_map_to_error_codes(status_code: int, code: ErrorCode) -> None:
    requests: list[httpx.Request] = []
    transport = _recording_transport(requests, status_code=status_code, body=b"Invalid Access Token")
    async with Client("https://api.tradier.com", "k", transport=transport) as client:
        with pytest.raises(TradierError) as exc_info:
            await client.get_clock()

    assert exc_info.value.code == code
    assert str(status_code) in exc_info.value.message
    assert "Invalid Access Token" in exc_info.value.message
    assert exc_info.value.details["path"] == "/v1/markets/clock"
    assert len(requests) == 1


@pytest.mark.asyncio
async def test_timeout_maps_to_timeout_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("slow", request=request)

    async with Client("https://api.tradier.com", "k", transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TradierError) as exc_info:
            await client.get_clock()

    assert exc_info.value.code == ErrorCode.TIMEOUT
    assert exc_info.value.exit_code == 10


@pytest.mark.asyncio
async def test_connection_failure_maps_to_network_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    async with Client("https://api.tradier.com", "k", transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TradierError) as exc_info:
            await client.get_watchlists()

    assert exc_info.value.code == ErrorCode.NETWORK_ERROR
    assert exc_info.value.details["error_type"] == "ConnectError"
