# File: store_backend/api/routes_products.py

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse

from store_backend.api.deps import get_product_service
from store_backend.core.exceptions import StoreError
from store_backend.schemas.product import ProductCreate, ProductRead, ProductUpdate
from store_backend.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter()


def _server_error(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=message,
    )


@router.get("", response_model=list[ProductRead], summary="List products")
def list_products(products: ProductService = Depends(get_product_service)):
    try:
        return products.list_products()
    except StoreError:
        raise _server_error("Error retrieving products")


@router.post("", response_class=PlainTextResponse, summary="Add a product")
def add_product(
    payload: ProductCreate,
    products: ProductService = Depends(get_product_service),
):
    try:
        products.add_product(
            payload.name, payload.description, payload.price, payload.quantity
        )
    except StoreError:
        raise _server_error("Error adding product")
    return "Product added successfully!"


@router.put("/{product_id}", response_class=PlainTextResponse, summary="Replace a product")
def update_product(
    product_id: int,
    payload: ProductUpdate,
    products: ProductService = Depends(get_product_service),
):
    try:
        touched = products.update_product(
            product_id,
            payload.name,
            payload.description,
            payload.price,
            payload.quantity,
        )
    except StoreError:
        raise _server_error("Error updating product")
    if not touched:
        logger.info("Update of product %s matched no row", product_id)
    return "Product updated successfully!"


@router.delete("/{product_id}", response_class=PlainTextResponse, summary="Delete a product")
def delete_product(
    product_id: int,
    products: ProductService = Depends(get_product_service),
):
    try:
        touched = products.delete_product(product_id)
    except StoreError:
        raise _server_error("Error deleting product")
    if not touched:
        logger.info("Delete of product %s matched no row", product_id)
    return "Product deleted successfully!"
