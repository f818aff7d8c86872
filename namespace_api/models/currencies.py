"""Schemas for the currency daemon's ``listcurrencies`` and ``getcurrency`` replies.

Every reply is validated in a single step against these models. The default
policy is the same for all of them:

* fields the namespace pipeline reads are required, so a reply without them
  is rejected as a whole;
* every other field is optional and defaults to ``None``;
* ``currencynames`` and ``bestcurrencystate`` on a ``getcurrency`` reply are
  optional; the fee-currency resolver handles their absence explicitly;
* keys the models do not name are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class _Snapshot(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class CurrencyDefinition(_Snapshot):
    name: str
    currencyid: str
    options: int
    proofprotocol: int
    idregistrationfees: float
    idimportfees: float
    idreferrallevels: int
    fullyqualifiedname: str
    parent: str | None = None
    systemid: str | None = None
    version: int | None = None
    notarizationprotocol: int | None = None
    launchsystemid: str | None = None
    startblock: int | None = None
    endblock: int | None = None
    currencies: list[str] | None = None
    weights: list[float] | None = None
    conversions: list[float] | None = None
    initialsupply: float | None = None
    prelaunchcarveout: float | None = None
    initialcontributions: list[float] | None = None
    currencyidhex: str | None = None
    definitiontxid: str | None = None
    definitiontxout: int | None = None


class ReserveCurrency(_Snapshot):
    currencyid: str
    weight: float
    reserves: float
    priceinreserve: float


class CurrencyState(_Snapshot):
    flags: int | None = None
    version: int | None = None
    currencyid: str | None = None
    initialsupply: float | None = None
    emitted: float | None = None
    supply: float | None = None
    reservecurrencies: list[ReserveCurrency] | None = None
    currencies: Any = None
    primarycurrencyfees: float | None = None
    primarycurrencyconversionfees: float | None = None
    primarycurrencyout: float | None = None
    preconvertedout: float | None = None


class CurrencyInfo(_Snapshot):
    currencydefinition: CurrencyDefinition
    bestcurrencystate: CurrencyState | None = None
    bestheight: int | None = None


class CurrencyDetail(_Snapshot):
    name: str
    currencyid: str
    idregistrationfees: float
    idimportfees: float
    currencynames: dict[str, str] | None = None
    bestcurrencystate: CurrencyState | None = None
    options: int | None = None
    proofprotocol: int | None = None
    parent: str | None = None
    systemid: str | None = None
    version: int | None = None
    notarizationprotocol: int | None = None
    launchsystemid: str | None = None
    startblock: int | None = None
    endblock: int | None = None
    idreferrallevels: int | None = None
    fullyqualifiedname: str | None = None
    currencies: list[str] | None = None
    weights: list[float] | None = None
    conversions: list[float] | None = None
    initialsupply: float | None = None
    prelaunchcarveout: float | None = None
    initialcontributions: list[float] | None = None
    currencyidhex: str | None = None
    magicnumber: int | None = None
    definitiontxid: str | None = None
    definitiontxout: int | None = None
    bestheight: int | None = None
    lastconfirmedheight: int | None = None
    lastconfirmedcurrencystate: Any = None


class RootCurrency(_Snapshot):
    name: str
    currencyid: str
    idregistrationfees: float
    idreferrallevels: int
