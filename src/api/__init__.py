"""API 엔드포인트 패키지 - export only."""

from .routes import (
    health_router,
    produto_router,
    preco_router,
    get_registry,
    get_resolver,
    get_shopping_client,
)

__all__ = [
    "health_router",
    "produto_router",
    "preco_router",
    "get_registry",
    "get_resolver",
    "get_shopping_client",
]
