from __future__ import annotations

import logging
from operator import attrgetter
from typing import Sequence

from fastapi import Depends

from namespace_api import rpc
from namespace_api.config import Settings
from namespace_api.data.chains import ROOT_CURRENCY_TICKERS
from namespace_api.data_access import CurrenciesDataAccess
from namespace_api.errors import ShapeMismatch, TransportFailure, UnsupportedChain
from namespace_api.logging_config import get_logger
from namespace_api.models import (
    CurrencyDefinition,
    CurrencyDetail,
    CurrencyInfo,
    NamespaceOption,
)
from namespace_api.services.batching import run_in_groups
from namespace_api.services.eligibility import ROOT_CURRENCY_OPTIONS, rejection_reason
from namespace_api.services.fee_currency import FeeCurrencyResolver


def select_candidates(
    catalog: Sequence[CurrencyInfo], logger: logging.Logger
) -> list[CurrencyDefinition]:
    candidates: list[CurrencyDefinition] = []
    for info in catalog:
        definition = info.currencydefinition
        reason = rejection_reason(definition, info.bestcurrencystate)
        if reason is None:
            candidates.append(definition)
        else:
            logger.debug("Skipping %s: %s", definition.name, reason)
    return candidates


def aggregate_namespaces(
    candidates: Sequence[CurrencyDefinition],
    outcomes: Sequence[NamespaceOption | Exception],
    logger: logging.Logger,
) -> list[NamespaceOption]:
    """Keep resolved namespaces, drop failed ones, and sort by name."""
    namespaces: list[NamespaceOption] = []
    for candidate, outcome in zip(candidates, outcomes, strict=True):
        if isinstance(outcome, (TransportFailure, ShapeMismatch)):
            logger.warning("Dropping namespace %s: %s", candidate.name, outcome)
            continue
        if isinstance(outcome, Exception):
            raise outcome
        logger.debug(
            "Resolved namespace %s (fee: %s %s)",
            outcome.name,
            outcome.registration_fee,
            outcome.fee_currency_name,
        )
        namespaces.append(outcome)
    return sorted(namespaces, key=attrgetter("name"))


class NamespacesService:
    def __init__(
        self,
        currencies_store: CurrenciesDataAccess = Depends(),
        settings: Settings = Depends(rpc.get_settings),
        logger: logging.Logger = Depends(get_logger),
    ) -> None:
        self._currencies_store = currencies_store
        self._settings = settings
        self._logger = logger

    async def discover_namespaces(self) -> list[NamespaceOption]:
        self._logger.info("Fetching currency catalog")
        catalog = await self._currencies_store.list_currencies()
        candidates = select_candidates(catalog, self._logger)
        self._logger.info(
            "%d of %d currencies are eligible namespaces", len(candidates), len(catalog)
        )
        if not candidates:
            return []

        resolver = FeeCurrencyResolver(self._currencies_store, self._logger)
        outcomes = await run_in_groups(
            candidates,
            resolver.resolve,
            group_size=self._settings.batch_size,
            pause=self._settings.batch_pause,
            logger=self._logger,
        )
        namespaces = aggregate_namespaces(candidates, outcomes, self._logger)
        self._logger.info(
            "Resolved %d of %d namespaces", len(namespaces), len(candidates)
        )
        return namespaces

    async def resolve_root_currency(self, chain_id: str) -> NamespaceOption:
        ticker = ROOT_CURRENCY_TICKERS.get(chain_id)
        if ticker is None:
            raise UnsupportedChain(chain_id)
        self._logger.info("Fetching root currency %s for %s", ticker, chain_id)
        root = await self._currencies_store.get_root_currency(ticker)
        return NamespaceOption(
            name=root.name,
            currency_id=root.currencyid,
            registration_fee=root.idregistrationfees,
            fully_qualified_name=root.name,
            fee_currency_name=root.name,
            options=ROOT_CURRENCY_OPTIONS,
            id_referral_levels=root.idreferrallevels,
        )

    async def get_currency_detail(self, name_or_id: str) -> CurrencyDetail:
        return await self._currencies_store.get_currency(name_or_id)
