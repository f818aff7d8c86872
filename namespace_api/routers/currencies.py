from fastapi import APIRouter, Depends

from namespace_api.models import CurrencyDetail
from namespace_api.services import NamespacesService

router = APIRouter(prefix="/currencies")


@router.get("/{name_or_id}", response_model=CurrencyDetail)
async def get_currency(
    name_or_id: str,
    namespaces_service: NamespacesService = Depends(),
) -> CurrencyDetail:
    return await namespaces_service.get_currency_detail(name_or_id)
