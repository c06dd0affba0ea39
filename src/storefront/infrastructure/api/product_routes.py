"""Product routes.

Products are reached through their store, so each route checks that the
store belongs to the calling owner.
"""

from typing import List

from fastapi import APIRouter, Depends

from storefront.application.create_product import CreateProductHandler
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.list_products import ListProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.store_repository import StoreRepository
from storefront.infrastructure.api.dependencies import (
    get_current_owner,
    get_product_repository,
    get_store_repository,
)
from storefront.infrastructure.api.schemas import (
    MessageOut,
    ProductIn,
    ProductOut,
    ProductUpdate,
)

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/{store_id}", response_model=List[ProductOut])
def list_products(
    store_id: str,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    handler = ListProductsHandler(product_repo, store_repo)
    return [ProductOut.from_dto(d) for d in handler.handle(owner, store_id)]


@router.post("", response_model=ProductOut, status_code=201)
def create_product(
    body: ProductIn,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    dto = CreateProductHandler(product_repo, store_repo).handle(
        owner_id=owner,
        name=body.name,
        description=body.description,
        price=str(body.price),
        category=body.category,
        store=body.store,
        stock=body.stock,
        image=body.image,
        modifiers=[m.to_spec() for m in body.modifiers],
        discounts=[d.to_spec() for d in body.discounts],
    )
    return ProductOut.from_dto(dto)


@router.put("/{product_id}", response_model=ProductOut)
def update_product(
    product_id: str,
    body: ProductUpdate,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    dto = UpdateProductHandler(product_repo, store_repo).handle(
        owner_id=owner,
        product_id=product_id,
        name=body.name,
        description=body.description,
        price=str(body.price) if body.price is not None else None,
        category=body.category,
        stock=body.stock,
        image=body.image,
        store=body.store,
        modifiers=[m.to_spec() for m in body.modifiers] if body.modifiers is not None else None,
        discounts=[d.to_spec() for d in body.discounts] if body.discounts is not None else None,
    )
    return ProductOut.from_dto(dto)


@router.delete("/{product_id}", response_model=MessageOut)
def delete_product(
    product_id: str,
    owner: str = Depends(get_current_owner),
    store_repo: StoreRepository = Depends(get_store_repository),
    product_repo: ProductRepository = Depends(get_product_repository),
):
    message = DeleteProductHandler(product_repo, store_repo).handle(owner, product_id)
    return MessageOut(message=message)
