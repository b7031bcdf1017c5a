"""Preco Routes (Engine Layer)

HTTP Layer가 PriceResolver로 요청을 위임하는 단순한 Translator 역할만 수행합니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from src.core.config import settings
from src.crawlers import ShoppingSearchClient
from src.engine import BudgetConfig, PriceMode, PriceResolver, ResolutionStatus
from src.repositories import ProductRegistry
from src.schemas.price_schema import PrecoResponse, ProdutoStatusResponse, StatusReportResponse

from .produto_routes import get_registry

router = APIRouter(tags=["precos"])

# 싱글톤 서비스
_shopping_client: Optional[ShoppingSearchClient] = None


def get_shopping_client() -> ShoppingSearchClient:
    """ShoppingSearchClient 싱글톤"""
    global _shopping_client
    if _shopping_client is None:
        _shopping_client = ShoppingSearchClient()
    return _shopping_client


def get_resolver(
    registry: ProductRegistry = Depends(get_registry),
    shopping_client: ShoppingSearchClient = Depends(get_shopping_client),
) -> PriceResolver:
    """요청 단위 PriceResolver"""
    budget_config = BudgetConfig(
        total_budget=settings.api_price_resolve_timeout_s,
        lookup_timeout=settings.http_timeout_s,
    )
    return PriceResolver(
        registry=registry,
        search_executor=shopping_client,
        budget_config=budget_config,
        concurrency=settings.resolver_concurrency,
    )


@router.get("/precos", response_model=list[PrecoResponse])
async def melhores_precos(resolver: PriceResolver = Depends(get_resolver)):
    """상품별 최저가 1건 (파싱 가능한 결과가 없는 상품은 제외)"""
    offers = await resolver.resolve_all(PriceMode.BEST)
    return [PrecoResponse.from_offer(offer) for offer in offers]


@router.get("/precos/todos", response_model=list[PrecoResponse])
async def todos_precos(resolver: PriceResolver = Depends(get_resolver)):
    """모든 상품의 파싱된 결과 전체 (라벨은 판매 상품명)"""
    offers = await resolver.resolve_all(PriceMode.ALL)
    return [PrecoResponse.from_offer(offer) for offer in offers]


@router.get("/precos/status", response_model=StatusReportResponse)
async def status_precos(resolver: PriceResolver = Depends(get_resolver)):
    """상품별 조회 상태 (등록 없음 / 조회 실패 / 결과 없음 구분용)"""
    report = await resolver.resolve_report(PriceMode.BEST)
    return StatusReportResponse(
        total=len(report),
        ok=sum(1 for r in report if r.status == ResolutionStatus.OK),
        produtos=[ProdutoStatusResponse.from_resolution(r) for r in report],
    )
