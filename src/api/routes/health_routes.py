"""헬스 체크 엔드포인트"""
from fastapi import APIRouter, Depends
from datetime import datetime

from src.core.config import settings
from src.repositories import ProductRegistry
from src.schemas.price_schema import HealthResponse
from src import __version__

from .produto_routes import get_registry

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(registry: ProductRegistry = Depends(get_registry)):
    """
    헬스 체크 엔드포인트

    - 서버 상태
    - 등록된 상품 수
    - 외부 API 키 설정 여부 (키 값은 노출하지 않음)
    """
    credential_configured = bool(settings.serpapi_api_key)
    status = "ok" if credential_configured else "degraded"

    return HealthResponse(
        status=status,
        timestamp=datetime.now(),
        version=__version__,
        produtos=len(registry),
        credential_configured=credential_configured,
    )


@router.get("/")
async def root():
    """루트 엔드포인트"""
    return {
        "service": settings.api_title,
        "version": __version__,
        "docs": "/docs"
    }
