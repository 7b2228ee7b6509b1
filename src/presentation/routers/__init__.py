"""External-facing routers.

- system: health and diagnostics endpoints
- pages: application pages generated from the page registry
- api.v1: versioned JSON API
"""

from src.presentation.routers.pages import page_router
from src.presentation.routers.system import system_router

__all__ = ["page_router", "system_router"]
