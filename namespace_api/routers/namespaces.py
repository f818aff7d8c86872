from fastapi import APIRouter, Depends

from namespace_api.models import NamespaceOption, NamespaceOptionResponse
from namespace_api.services import NamespacesService

router = APIRouter()


@router.get("/namespaces", response_model=list[NamespaceOptionResponse])
async def list_namespaces(
    namespaces_service: NamespacesService = Depends(),
) -> list[NamespaceOption]:
    return await namespaces_service.discover_namespaces()


@router.get("/chains/{chain_id}/root-currency", response_model=NamespaceOptionResponse)
async def get_root_currency(
    chain_id: str,
    namespaces_service: NamespacesService = Depends(),
) -> NamespaceOption:
    return await namespaces_service.resolve_root_currency(chain_id)
