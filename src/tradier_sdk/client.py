"""Async HTTP client for the Tradier brokerage REST API.

Every endpoint returns the raw response body so callers can choose between the
formatted views in ``tradier_cli.display`` and raw JSON output.
"""

from __future__ import annotations

import logging
from typing import Mapping

import httpx

from tradier_sdk.exceptions import ErrorCode, TradierError

logger = logging.getLogger(__name__)

AUTH_SUGGESTION = "Check the API key in ~/.config/tradier/config.json (or TRADIER_API_* env vars) and --sandbox."


class Client:
    """Thin async wrapper over ``httpx.AsyncClient`` with bearer-token auth.

    Use as an async context manager so the underlying connection pool is closed.
    """

    def __init__(
        self,
        base_url: str,
        api_key: str,
        *,
        timeout_seconds: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = httpx.AsyncClient(
            base_url=self._base_url,
            headers={"Accept": "application/json", "Authorization": f"Bearer {api_key}"},
            timeout=timeout_seconds,
            transport=transport,
        )

    async def __aenter__(self) -> "Client":
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- accounts -----------------------------------------------------------

    async def get_balances(self, account_id: str) -> bytes:
        return await self._get(f"/v1/accounts/{account_id}/balances")

    async def get_gain_loss(
        self,
        account_id: str,
        *,
        page: str | None = None,
        limit: str | None = None,
        sort_by: str | None = None,
        sort: str | None = None,
    ) -> bytes:
        params = {"page": page, "limit": limit, "sortBy": sort_by, "sort": sort}
        return await self._get(f"/v1/accounts/{account_id}/gainloss", params)

    async def get_historical_balances(self, account_id: str, *, period: str | None = None) -> bytes:
        return await self._get(f"/v1/accounts/{account_id}/historical-balances", {"period": period})

    async def get_history(
        self,
        account_id: str,
        *,
        page: str | None = None,
        limit: str | None = None,
        activity_type: str | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> bytes:
        params = {"page": page, "limit": limit, "type": activity_type, "start": start, "end": end}
        return await self._get(f"/v1/accounts/{account_id}/history", params)

    async def get_order(self, account_id: str, order_id: str, *, include_tags: str | None = None) -> bytes:
        return await self._get(f"/v1/accounts/{account_id}/orders/{order_id}", {"includeTags": include_tags})

    async def get_orders(
        self,
        account_id: str,
        *,
        page: str | None = None,
        limit: str | None = None,
        include_tags: str | None = None,
    ) -> bytes:
        params = {"page": page, "limit": limit, "includeTags": include_tags}
        return await self._get(f"/v1/accounts/{account_id}/orders", params)

    async def get_positions(self, account_id: str) -> bytes:
        return await self._get(f"/v1/accounts/{account_id}/positions")

    async def get_position_groups(self, account_id: str) -> bytes:
        return await self._get(f"/v1/accounts/{account_id}/position-groups")

    async def create_position_group(self, account_id: str, *, label: str, symbols: str) -> bytes:
        return await self._post(f"/v1/accounts/{account_id}/position-groups", {"label": label, "symbols": symbols})

    async def update_position_group(self, account_id: str, group_id: str, *, label: str, symbols: str) -> bytes:
        path = f"/v1/accounts/{account_id}/position-groups/{group_id}"
        return await self._put(path, {"label": label, "symbols": symbols})

    async def delete_position_group(self, account_id: str, group_id: str) -> bytes:
        return await self._delete(f"/v1/accounts/{account_id}/position-groups/{group_id}")

    # -- markets ------------------------------------------------------------

    async def get_quotes(self, symbols: str, *, greeks: str | None = None) -> bytes:
        return await self._get("/v1/markets/quotes", {"symbols": symbols, "greeks": greeks})

    async def post_quotes(self, symbols: str, *, greeks: str | None = None) -> bytes:
        """Same as :meth:`get_quotes` but form-encoded, for symbol lists too long for a URL."""
        return await self._post("/v1/markets/quotes", {"symbols": symbols, "greeks": greeks})

    async def get_option_chains(self, symbol: str, expiration: str, *, greeks: str | None = None) -> bytes:
        params = {"symbol": symbol, "expiration": expiration, "greeks": greeks}
        return await self._get("/v1/markets/options/chains", params)

    async def get_option_expirations(
        self,
        symbol: str,
        *,
        include_all_roots: str | None = None,
        strikes: str | None = None,
        contract_size: str | None = None,
        expiration_type: str | None = None,
    ) -> bytes:
        params = {
            "symbol": symbol,
            "includeAllRoots": include_all_roots,
            "strikes": strikes,
            "contractSize": contract_size,
            "expirationType": expiration_type,
        }
        return await self._get("/v1/markets/options/expirations", params)

    async def get_option_strikes(self, symbol: str, expiration: str) -> bytes:
        return await self._get("/v1/markets/options/strikes", {"symbol": symbol, "expiration": expiration})

    async def get_option_lookup(
        self,
        underlying: str,
        *,
        strike: str | None = None,
        expiration: str | None = None,
        option_type: str | None = None,
    ) -> bytes:
        params = {"underlying": underlying, "strike": strike, "expiration": expiration, "type": option_type}
        return await self._get("/v1/markets/options/lookup", params)

    async def get_price_history(
        self,
        symbol: str,
        *,
        interval: str | None = None,
        start: str | None = None,
        end: str | None = None,
    ) -> bytes:
        params = {"symbol": symbol, "interval": interval, "start": start, "end": end}
        return await self._get("/v1/markets/history", params)

    async def get_time_sales(
        self,
        symbol: str,
        *,
        interval: str | None = None,
        start: str | None = None,
        end: str | None = None,
        session_filter: str | None = None,
    ) -> bytes:
        params = {"symbol": symbol, "interval": interval, "start": start, "end": end, "session_filter": session_filter}
        return await self._get("/v1/markets/timesales", params)

    async def get_calendar(self, *, month: str | None = None, year: str | None = None) -> bytes:
        return await self._get("/v1/markets/calendar", {"month": month, "year": year})

    async def get_clock(self) -> bytes:
        return await self._get("/v1/markets/clock")

    async def get_easy_to_borrow(self) -> bytes:
        return await self._get("/v1/markets/etb")

    async def lookup_symbols(self, query: str, *, exchanges: str | None = None, types: str | None = None) -> bytes:
        return await self._get("/v1/markets/lookup", {"q": query, "exchanges": exchanges, "types": types})

    async def search_companies(self, query: str, *, indexes: str | None = None) -> bytes:
        return await self._get("/v1/markets/search", {"q": query, "indexes": indexes})

    # -- trading ------------------------------------------------------------

    async def place_order(self, account_id: str, params: Mapping[str, str]) -> bytes:
        """Submit an order; ``params`` are Tradier form fields, including indexed leg fields like ``side[0]``."""
        return await self._post(f"/v1/accounts/{account_id}/orders", params)

    async def change_order(self, account_id: str, order_id: str, params: Mapping[str, str]) -> bytes:
        return await self._put(f"/v1/accounts/{account_id}/orders/{order_id}", params)

    async def cancel_order(self, account_id: str, order_id: str) -> bytes:
        return await self._delete(f"/v1/accounts/{account_id}/orders/{order_id}")

    # -- watchlists ---------------------------------------------------------

    async def get_watchlists(self) -> bytes:
        return await self._get("/v1/watchlists")

    async def get_watchlist(self, watchlist_id: str) -> bytes:
        return await self._get(f"/v1/watchlists/{watchlist_id}")

    async def create_watchlist(self, name: str, symbols: str) -> bytes:
        return await self._post("/v1/watchlists", {"name": name, "symbols": symbols})

    async def update_watchlist(self, watchlist_id: str, name: str, *, symbols: str | None = None) -> bytes:
        return await self._put(f"/v1/watchlists/{watchlist_id}", {"name": name, "symbols": symbols})

    async def delete_watchlist(self, watchlist_id: str) -> bytes:
        return await self._delete(f"/v1/watchlists/{watchlist_id}")

    async def add_watchlist_symbols(self, watchlist_id: str, symbols: str) -> bytes:
        return await self._post(f"/v1/watchlists/{watchlist_id}/symbols", {"symbols": symbols})

    async def remove_watchlist_symbol(self, watchlist_id: str, symbol: str) -> bytes:
        return await self._delete(f"/v1/watchlists/{watchlist_id}/symbols/{symbol}")

    # -- user / streaming ---------------------------------------------------

    async def get_profile(self) -> bytes:
        return await self._get("/v1/user/profile")

    async def create_market_session(self) -> bytes:
        return await self._post("/v1/markets/events/session")

    async def create_account_session(self) -> bytes:
        return await self._post("/v1/accounts/events/session")

    # -- plumbing -----------------------------------------------------------

    async def _get(self, path: str, params: Mapping[str, str | None] | None = None) -> bytes:
        return await self._request("GET", path, params=_compact(params))

    async def _post(self, path: str, form: Mapping[str, str | None] | None = None) -> bytes:
        return await self._request("POST", path, data=_compact(form))

    async def _put(self, path: str, form: Mapping[str, str | None] | None = None) -> bytes:
        return await self._request("PUT", path, data=_compact(form))

    async def _delete(self, path: str) -> bytes:
        return await self._request("DELETE", path)

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        data: dict[str, str] | None = None,
    ) -> bytes:
        logger.debug("%s %s%s params=%s", method, self._base_url, path, sorted((params or data or {}).keys()))
        try:
            response = await self._http.request(method, path, params=params, data=data)
        except httpx.TimeoutException as exc:
            raise TradierError(
                ErrorCode.TIMEOUT,
                f"{method} {path} timed out",
                details={"path": path, "error": str(exc)},
                suggestion="Retry or increase runtime.request_timeout_seconds in config.",
            ) from exc
        except httpx.RequestError as exc:
            raise TradierError(
                ErrorCode.NETWORK_ERROR,
                f"request failed: {exc}",
                details={"path": path, "error_type": type(exc).__name__},
                suggestion="Check network connectivity and Tradier API availability.",
            ) from exc

        if response.status_code < 200 or response.status_code >= 300:
            self._raise_http_error(response, method=method, path=path)
        return response.content

    def _raise_http_error(self, response: httpx.Response, *, method: str, path: str) -> None:
        status_code = response.status_code
        body = response.text.strip()
        logger.warning("%s %s returned HTTP %d", method, path, status_code)

        code = ErrorCode.API_ERROR
        suggestion: str | None = None
        if status_code in {401, 403}:
            code = ErrorCode.UNAUTHORIZED
            suggestion = AUTH_SUGGESTION
        elif status_code == 404:
            code = ErrorCode.NOT_FOUND
            suggestion = "Confirm the account, order, or watchlist id."
        elif status_code == 429:
            code = ErrorCode.RATE_LIMITED
            suggestion = "Retry with lower request frequency."

        raise TradierError(
            code,
            f"API error (HTTP {status_code}): {body or response.reason_phrase}",
            details={"status_code": status_code, "method": method, "path": path},
            suggestion=suggestion,
        )


def _compact(values: Mapping[str, str | None] | None) -> dict[str, str]:
    """Drop unset parameters; Tradier treats an empty value differently from an absent one."""
    if not values:
        return {}
    return {key: value for key, value in values.items() if value not in {None, ""}}
