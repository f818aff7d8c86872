from __future__ import annotations

import itertools
from typing import Any, Optional

import httpx

from namespace_api.config import Settings, load_settings
from namespace_api.errors import RpcCallError, ShapeMismatch, TransportFailure

_settings: Optional[Settings] = None
_client: Optional[RpcClient] = None


class RpcClient:
    """JSON-RPC 1.0 client for the currency daemon.

    Returns the ``result`` member of each reply. Network failures, HTTP error
    statuses and daemon-reported errors raise ``TransportFailure`` (the latter
    as ``RpcCallError``); bodies that are not JSON-RPC replies raise
    ``ShapeMismatch``.
    """

    def __init__(self, http: httpx.AsyncClient, url: str) -> None:
        self._http = http
        self._url = url
        self._ids = itertools.count(1)

    async def call(self, method: str, params: list[Any] | None = None) -> Any:
        payload = {
            "jsonrpc": "1.0",
            "id": next(self._ids),
            "method": method,
            "params": params or [],
        }
        try:
            response = await self._http.post(self._url, json=payload)
        except httpx.HTTPError as exc:
            raise TransportFailure(f"{method} request failed: {exc}") from exc

        try:
            body = response.json()
        except ValueError as exc:
            if response.is_error:
                raise TransportFailure(
                    f"{method} returned HTTP {response.status_code}"
                ) from exc
            raise ShapeMismatch(f"{method} returned a non-JSON body") from exc

        if not isinstance(body, dict):
            if response.is_error:
                raise TransportFailure(f"{method} returned HTTP {response.status_code}")
            raise ShapeMismatch(f"{method} returned a non-object reply")

        error = body.get("error")
        if error:
            if isinstance(error, dict):
                raise RpcCallError(
                    method, error.get("code"), str(error.get("message", error))
                )
            raise RpcCallError(method, None, str(error))
        if response.is_error:
            raise TransportFailure(f"{method} returned HTTP {response.status_code}")
        if "result" not in body:
            raise ShapeMismatch(f"{method} reply has no result member")
        return body["result"]

    async def aclose(self) -> None:
        await self._http.aclose()


def create_client(settings: Settings) -> RpcClient:
    http = httpx.AsyncClient(
        auth=(settings.rpc_user, settings.rpc_password),
        timeout=settings.rpc_timeout,
    )
    return RpcClient(http, settings.rpc_url)


def init_client(settings: Settings) -> None:
    global _settings, _client
    _settings = settings
    _client = create_client(settings)


def init_from_env() -> None:
    init_client(load_settings())


def get_settings() -> Settings:
    if _settings is None:
        init_from_env()
    return _settings


async def get_client() -> RpcClient:
    if _client is None:
        init_from_env()
    return _client


async def close_client() -> None:
    if _client is not None:
        await _client.aclose()
    reset_client()


def reset_client() -> None:
    global _settings, _client
    _settings = None
    _client = None
