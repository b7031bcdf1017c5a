"""API routes package."""

from .health_routes import router as health_router
from .produto_routes import router as produto_router, get_registry
from .preco_routes import router as preco_router, get_resolver, get_shopping_client

__all__ = [
    "health_router",
    "produto_router",
    "preco_router",
    "get_registry",
    "get_resolver",
    "get_shopping_client",
]
