"""Price Resolver - Main Engine Entry Point

Coordinates one price resolution request:
1. Registry snapshot
2. One shopping search per product (sequential or bounded concurrency)
3. Price normalization and best/all reduction
4. Per-product failure isolation
"""

import asyncio
from typing import Optional

from src.core.exceptions import CollaboratorException
from src.core.logging import logger
from src.crawlers.executor import ShoppingSearchExecutor
from src.repositories import Product, ProductRegistry

from .budget import BudgetConfig, BudgetManager
from .result import NormalizedOffer, PriceMode, ProductResolution, ResolutionStatus
from .selection import normalize_offers, select_best_offer


class PriceResolver:
    """등록된 상품 전체의 가격 조회기

    - 요청 시작 시점의 상품 목록 복사본을 순회합니다
    - 상품 1건의 실패는 해당 상품만 결과 0건으로 처리합니다
    - 예산이 소진되면 남은 상품은 조회하지 않고 부분 결과를 반환합니다
    """

    def __init__(
        self,
        registry: ProductRegistry,
        search_executor: ShoppingSearchExecutor,
        budget_config: Optional[BudgetConfig] = None,
        concurrency: int = 1,
    ):
        """
        Args:
            registry: 상품 목록
            search_executor: 쇼핑 검색 실행자 (search 메서드 구현)
            budget_config: 요청 예산 설정 (기본값: 30초)
            concurrency: 상품별 조회 동시성 (1이면 순차)
        """
        if registry is None:
            raise ValueError("registry must not be None")
        if search_executor is None:
            raise ValueError("search_executor must not be None")
        if concurrency < 1:
            raise ValueError(f"concurrency must be >= 1: {concurrency}")

        self.registry = registry
        self.search_executor = search_executor
        self.budget_config = budget_config or BudgetConfig()
        self.concurrency = concurrency

    async def resolve_all(self, mode: PriceMode = PriceMode.BEST) -> list[NormalizedOffer]:
        """전체 상품 조회 결과를 상품 등록 순서대로 이어붙여 반환"""
        report = await self.resolve_report(mode)
        return [offer for resolution in report for offer in resolution.offers]

    async def resolve_report(self, mode: PriceMode = PriceMode.BEST) -> list[ProductResolution]:
        """상품별 조회 상태 목록 반환 (상품 등록 순서)"""
        products = self.registry.snapshot()
        budget = BudgetManager(self.budget_config)
        budget.start()
        logger.info(f"Resolution started: mode={mode.value}, products={len(products)}")

        if self.concurrency == 1:
            report = []
            for product in products:
                report.append(await self._resolve_within_budget(product, mode, budget))
        else:
            semaphore = asyncio.Semaphore(self.concurrency)

            async def _bounded(product: Product) -> ProductResolution:
                async with semaphore:
                    return await self._resolve_within_budget(product, mode, budget)

            report = list(await asyncio.gather(*(_bounded(p) for p in products)))

        self._log_summary(report, budget)
        return report

    async def resolve_product(
        self,
        product: Product,
        mode: PriceMode = PriceMode.BEST,
        timeout: Optional[float] = None,
    ) -> ProductResolution:
        """상품 1건 조회

        외부 API는 정확히 한 번 호출합니다 (재시도 없음).

        Args:
            product: 등록된 상품
            mode: best | all
            timeout: 조회 타임아웃 (초), None이면 제한 없음

        Returns:
            ProductResolution: 실패해도 예외 대신 COLLABORATOR_ERROR 상태로 반환
        """
        try:
            search = self.search_executor.search(product.name, product.category)
            if timeout is None:
                offers = await search
            else:
                offers = await asyncio.wait_for(search, timeout=timeout)
        except asyncio.TimeoutError:
            logger.warning(f"Lookup timeout: product='{product.name}', timeout={timeout}")
            return ProductResolution.collaborator_error(
                product.name, product.category, f"timeout after {timeout}s"
            )
        except CollaboratorException as e:
            logger.warning(f"Lookup failed: product='{product.name}', error={e}")
            return ProductResolution.collaborator_error(product.name, product.category, str(e))
        except Exception as e:
            logger.error(
                f"Lookup failed: product='{product.name}', error={type(e).__name__}",
                exc_info=True,
            )
            return ProductResolution.collaborator_error(
                product.name, product.category, f"{type(e).__name__}: {e}"
            )

        if mode == PriceMode.BEST:
            best = select_best_offer(normalize_offers(offers, label=product.name))
            selected = [best] if best is not None else []
        else:
            # all 모드는 등록 상품명이 아니라 판매 상품명(title)을 라벨로 사용
            selected = normalize_offers(offers)

        status = ResolutionStatus.OK if selected else ResolutionStatus.NO_OFFERS
        if not selected:
            logger.info(f"No parseable offers: product='{product.name}', raw={len(offers)}")

        return ProductResolution(
            product=product.name,
            category=product.category,
            status=status,
            offers=selected,
            offer_count=len(offers),
        )

    async def _resolve_within_budget(
        self, product: Product, mode: PriceMode, budget: BudgetManager
    ) -> ProductResolution:
        if budget.is_exhausted():
            logger.warning(f"Lookup skipped: budget exhausted, product='{product.name}'")
            return ProductResolution.skipped(product.name, product.category)
        return await self.resolve_product(product, mode, timeout=budget.get_lookup_timeout())

    def _log_summary(self, report: list[ProductResolution], budget: BudgetManager) -> None:
        counts: dict[str, int] = {}
        for resolution in report:
            counts[resolution.status.value] = counts.get(resolution.status.value, 0) + 1
        logger.info(
            f"Resolution finished: elapsed={budget.elapsed():.2f}s, statuses={counts}"
        )
