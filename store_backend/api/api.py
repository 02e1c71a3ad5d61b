from fastapi import APIRouter

from store_backend.api.routes_auth import router as auth_router
from store_backend.api.routes_products import router as products_router
from store_backend.api.routes_users import router as users_router


api_router = APIRouter()

api_router.include_router(auth_router, tags=["auth"])
api_router.include_router(users_router, prefix="/users", tags=["users"])
api_router.include_router(products_router, prefix="/products", tags=["products"])
