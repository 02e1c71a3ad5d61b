# File: store_backend/api/routes_root.py

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()


@router.get("/", response_class=PlainTextResponse, summary="Welcome message")
def root():
    return "Welcome to the backend API"
