from __future__ import annotations

from typing import Final

from namespace_api.models import CurrencyDefinition, CurrencyState

OPTION_FRACTIONAL: Final[int] = 0x01
OPTION_ID_REFERRALS: Final[int] = 0x08
OPTION_TOKEN: Final[int] = 0x20

NAMESPACE_OPTIONS: Final[frozenset[int]] = frozenset(
    {
        OPTION_TOKEN | OPTION_FRACTIONAL,
        OPTION_TOKEN | OPTION_FRACTIONAL | OPTION_ID_REFERRALS,
    }
)
ROOT_CURRENCY_OPTIONS: Final[int] = OPTION_TOKEN | OPTION_FRACTIONAL | OPTION_ID_REFERRALS

PROOF_PROTOCOL_PBAAS_MMR: Final[int] = 1


def rejection_reason(
    definition: CurrencyDefinition, state: CurrencyState | None
) -> str | None:
    """Return why a currency cannot host identities, or ``None`` if it can."""
    if definition.options not in NAMESPACE_OPTIONS:
        return f"options {definition.options} is not a namespace flag combination"
    if definition.proofprotocol != PROOF_PROTOCOL_PBAAS_MMR:
        return f"proofprotocol {definition.proofprotocol} is not supported"
    reserves = state.reservecurrencies if state is not None else None
    if reserves is None:
        return "no reserve currencies"
    if not reserves:
        return "empty reserve currencies"
    for index, reserve in enumerate(reserves):
        if reserve.reserves <= 0:
            return f"reserve {index} ({reserve.currencyid}) holds {reserve.reserves}"
    return None


def is_eligible(definition: CurrencyDefinition, state: CurrencyState | None) -> bool:
    return rejection_reason(definition, state) is None
