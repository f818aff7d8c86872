from __future__ import annotations

from typing import Any, TypeVar

from fastapi import Depends
from pydantic import TypeAdapter, ValidationError

from namespace_api import rpc
from namespace_api.errors import ShapeMismatch
from namespace_api.models import CurrencyDetail, CurrencyInfo, RootCurrency

T = TypeVar("T")

_CURRENCY_LIST = TypeAdapter(list[CurrencyInfo])
_CURRENCY_DETAIL = TypeAdapter(CurrencyDetail)
_ROOT_CURRENCY = TypeAdapter(RootCurrency)


class CurrenciesDataAccess:
    def __init__(self, client: rpc.RpcClient = Depends(rpc.get_client)) -> None:
        self._client = client

    async def list_currencies(self) -> list[CurrencyInfo]:
        result = await self._client.call("listcurrencies")
        return _parse(_CURRENCY_LIST, result, "listcurrencies")

    async def get_currency(self, name_or_id: str) -> CurrencyDetail:
        result = await self._client.call("getcurrency", [name_or_id])
        return _parse(_CURRENCY_DETAIL, result, f"getcurrency {name_or_id}")

    async def get_root_currency(self, ticker: str) -> RootCurrency:
        result = await self._client.call("getcurrency", [ticker])
        return _parse(_ROOT_CURRENCY, result, f"getcurrency {ticker}")


def _parse(adapter: TypeAdapter[T], payload: Any, context: str) -> T:
    try:
        return adapter.validate_python(payload)
    except ValidationError as exc:
        raise ShapeMismatch(
            f"Failed to parse {context} response: {exc.error_count()} error(s)\n{exc}"
        ) from exc
