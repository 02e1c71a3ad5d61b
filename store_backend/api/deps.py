# File: store_backend/api/deps.py

from fastapi import Depends, Request

from store_backend.db.gateway import DatabaseGateway
from store_backend.services.product_service import ProductService
from store_backend.services.user_service import UserService


def get_gateway(request: Request) -> DatabaseGateway:
    """
    FastAPI dependency returning the gateway the application was built with.

    Usage in route functions:
        gateway: DatabaseGateway = Depends(get_gateway)
    """
    return request.app.state.gateway


def get_user_service(gateway: DatabaseGateway = Depends(get_gateway)) -> UserService:
    return UserService(gateway)


def get_product_service(gateway: DatabaseGateway = Depends(get_gateway)) -> ProductService:
    return ProductService(gateway)
