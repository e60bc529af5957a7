"""APIRouter registration for the reorder service."""

from __future__ import annotations

from fastapi import APIRouter

from docorder.routes.reorder import router as reorder_router

api_router = APIRouter()
api_router.include_router(reorder_router, tags=["Reorder", "Ranks"])

__all__ = ["api_router"]
