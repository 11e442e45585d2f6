# backend/app/api/v1/router.py
from fastapi import APIRouter
from .endpoints import health, compare

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(compare.router, prefix="/compare", tags=["compare"])
