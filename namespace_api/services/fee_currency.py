"""Resolve which currency a namespace charges its identity registration fee in.

``idimportfees`` doubles as a selector: a value of 0 to 9 satoshis is not a
fee fraction but the position of one of the namespace's reserve currencies,
and the fee is paid in that reserve. Any other value means the fee is paid in
the namespace currency itself.
"""

from __future__ import annotations

import logging
import math
from typing import Final

from namespace_api.data_access import CurrenciesDataAccess
from namespace_api.errors import IndexResolutionMiss
from namespace_api.models import (
    CurrencyDefinition,
    CurrencyDetail,
    NamespaceOption,
    ReserveCurrency,
)

SATOSHIS_PER_COIN: Final[int] = 100_000_000
MAX_RESERVE_INDEX: Final[int] = 9

UNKNOWN_CURRENCY: Final[str] = "UnknownCurrency"
UNKNOWN_RESERVE: Final[str] = "UnknownReserve"
NO_RESERVES: Final[str] = "NoReserves"


def decode_fee_indicator(idimportfees: float) -> int | None:
    """Return the reserve index encoded in ``idimportfees``, or ``None``."""
    scaled = idimportfees * SATOSHIS_PER_COIN
    if not math.isfinite(scaled):
        return None
    satoshis = int(math.copysign(math.floor(abs(scaled) + 0.5), scaled))
    if 0 <= satoshis <= MAX_RESERVE_INDEX:
        return satoshis
    return None


def _currency_names(detail: CurrencyDetail) -> dict[str, str]:
    if detail.currencynames is None:
        raise IndexResolutionMiss(
            UNKNOWN_CURRENCY, f"{detail.name}: no currencynames in getcurrency reply"
        )
    return detail.currencynames


def _reserve_list(detail: CurrencyDetail) -> list[ReserveCurrency]:
    state = detail.bestcurrencystate
    if state is None:
        raise IndexResolutionMiss(
            UNKNOWN_RESERVE, f"{detail.name}: no bestcurrencystate in getcurrency reply"
        )
    if state.reservecurrencies is None:
        raise IndexResolutionMiss(
            NO_RESERVES, f"{detail.name}: no reservecurrencies in bestcurrencystate"
        )
    return state.reservecurrencies


def _reserve_at(reserves: list[ReserveCurrency], index: int) -> ReserveCurrency:
    if index >= len(reserves):
        raise IndexResolutionMiss(
            f"InvalidIndex_{index}",
            f"reserve index {index} out of range ({len(reserves)} reserves)",
        )
    return reserves[index]


def _display_name(names: dict[str, str], currency_id: str, index: int) -> str:
    name = names.get(currency_id)
    if not name:
        raise IndexResolutionMiss(
            f"Unknown_{index}", f"no display name for reserve currency {currency_id}"
        )
    return name


def reserve_currency_name(detail: CurrencyDetail, index: int) -> str:
    names = _currency_names(detail)
    reserve = _reserve_at(_reserve_list(detail), index)
    return _display_name(names, reserve.currencyid, index)


class FeeCurrencyResolver:
    def __init__(
        self, currencies_store: CurrenciesDataAccess, logger: logging.Logger
    ) -> None:
        self._currencies_store = currencies_store
        self._logger = logger

    def fee_currency_name(
        self, definition: CurrencyDefinition, detail: CurrencyDetail
    ) -> str:
        index = decode_fee_indicator(definition.idimportfees)
        if index is None:
            self._logger.debug(
                "%s pays fees in itself (idimportfees %s)",
                definition.name,
                definition.idimportfees,
            )
            return definition.name
        self._logger.debug(
            "%s pays fees in reserve %d (idimportfees %s)",
            definition.name,
            index,
            definition.idimportfees,
        )
        try:
            return reserve_currency_name(detail, index)
        except IndexResolutionMiss as exc:
            # Kept with a placeholder name rather than dropped.
            self._logger.warning(
                "Fee currency of %s unresolved, using %s: %s",
                definition.name,
                exc.sentinel,
                exc,
            )
            return exc.sentinel

    async def resolve(self, definition: CurrencyDefinition) -> NamespaceOption:
        detail = await self._currencies_store.get_currency(definition.currencyid)
        return NamespaceOption(
            name=definition.name,
            currency_id=definition.currencyid,
            registration_fee=definition.idregistrationfees,
            fully_qualified_name=definition.fullyqualifiedname,
            fee_currency_name=self.fee_currency_name(definition, detail),
            options=definition.options,
            id_referral_levels=definition.idreferrallevels,
        )
