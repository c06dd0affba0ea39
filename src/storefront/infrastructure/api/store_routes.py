"""Store routes. Every route is scoped to the calling owner."""

from typing import List

from fastapi import APIRouter, Depends

from storefront.application.create_store import CreateStoreHandler
from storefront.application.delete_store import DeleteStoreHandler
from storefront.application.list_stores import ListStoresHandler
from storefront.application.show_store import ShowStoreHandler
from storefront.application.update_store import UpdateStoreHandler
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository
from storefront.infrastructure.api.dependencies import (
    get_current_owner,
    get_product_repository,
    get_store_repository,
)
from storefront.infrastructure.api.schemas import (
    MessageOut,
    StoreIn,
    StoreOut,
    StoreUpdate,
)

router = APIRouter(prefix="/api/stores", tags=["stores"])


@router.post("", response_model=StoreOut, status_code=201)
def create_store(
    body: StoreIn,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
):
    dto = CreateStoreHandler(store_repo).handle(
        owner_id=owner, name=body.name, address=body.address, phone=body.phone
    )
    return StoreOut.from_dto(dto)


@router.get("", response_model=List[StoreOut])
def list_stores(
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
):
    return [StoreOut.from_dto(d) for d in ListStoresHandler(store_repo).handle(owner)]


@router.get("/{store_id}", response_model=StoreOut)
def get_store(
    store_id: str,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
):
    return StoreOut.from_dto(ShowStoreHandler(store_repo).handle(owner, store_id))


@router.put("/{store_id}", response_model=StoreOut)
def update_store(
    store_id: str,
    body: StoreUpdate,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
):
    dto = UpdateStoreHandler(store_repo).handle(
        owner_id=owner,
        store_id=store_id,
        name=body.name,
        address=body.address,
        phone=body.phone,
    )
    return StoreOut.from_dto(dto)


@router.delete("/{store_id}", response_model=MessageOut)
def delete_store(
    store_id: str,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    message = DeleteStoreHandler(store_repo, product_repo).handle(owner, store_id)
    return MessageOut(message=message)
