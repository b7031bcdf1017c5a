"""FastAPI 앱 팩토리"""
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager

from src.core.config import settings
from src.core.logging import logger
from src.api import health_router, produto_router, preco_router
from src.repositories import ProductRegistry


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기"""
    logger.info("Starting application...")
    if not settings.serpapi_api_key:
        logger.warning("SERPAPI_API_KEY is not set; price lookups will fail until it is configured")
    logger.info(f"Application started: products={len(app.state.registry)}")
    yield
    logger.info("Shutting down application...")
    from src.crawlers.http_client import shutdown_shared_http_client
    await shutdown_shared_http_client()


def create_app(registry: Optional[ProductRegistry] = None) -> FastAPI:
    """
    FastAPI 앱 생성 (Factory Pattern)

    Args:
        registry: 사용할 상품 목록. 없으면 설정에 따라 새로 만들고 예시 상품을 등록

    Returns:
        FastAPI 앱 인스턴스
    """
    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan
    )

    if registry is None:
        registry = ProductRegistry(duplicate_policy=settings.registry_duplicate_policy)
        if settings.registry_seed_samples:
            registry.seed()
    app.state.registry = registry

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(produto_router)
    app.include_router(preco_router)

    return app

# 앱 인스턴스 생성 (uvicorn이 로드할 수 있도록)
app = create_app()
