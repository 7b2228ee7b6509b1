"""Application pages generated from the page registry.

Exports:
    page_router: Router with every registered page
"""

from fastapi import APIRouter

from src.presentation.routers.pages.generator import register_pages_from_registry
from src.presentation.routers.pages.registry import PAGE_REGISTRY

page_router = APIRouter()
register_pages_from_registry(page_router, PAGE_REGISTRY)

__all__ = ["page_router"]
