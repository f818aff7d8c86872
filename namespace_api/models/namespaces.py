from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel


@dataclass(frozen=True, slots=True)
class NamespaceOption:
    name: str
    currency_id: str
    registration_fee: float
    fully_qualified_name: str
    fee_currency_name: str
    options: int
    id_referral_levels: int


class NamespaceOptionResponse(BaseModel):
    name: str
    currency_id: str
    registration_fee: float
    fully_qualified_name: str
    fee_currency_name: str
    options: int
    id_referral_levels: int
