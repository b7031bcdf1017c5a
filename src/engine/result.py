"""Resolution Result - Standardized result format

Provides the result types produced by the price resolver.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class PriceMode(str, Enum):
    """조회 모드"""

    BEST = "best"  # 상품당 최저가 1건
    ALL = "all"  # 파싱된 모든 결과


class ResolutionStatus(str, Enum):
    """상품 1건의 조회 상태"""

    OK = "ok"  # 1건 이상 파싱 성공
    NO_OFFERS = "no_offers"  # 파싱 가능한 결과 없음
    COLLABORATOR_ERROR = "collaborator_error"  # 외부 API 오류
    SKIPPED = "skipped"  # 예산 소진으로 조회하지 않음


@dataclass(frozen=True)
class NormalizedOffer:
    """가격 파싱에 성공한 검색 결과

    Attributes:
        product: 라벨 (best 모드: 등록 상품명, all 모드: 판매 상품명)
        price: 가격 (Decimal, 0 이상)
        store: 판매처
        link: 상품 링크
    """

    product: str
    price: Decimal
    store: str
    link: str


@dataclass
class ProductResolution:
    """상품 1건의 조회 결과

    Attributes:
        product: 등록된 상품명
        category: 카테고리 태그
        status: 조회 상태
        offers: 결과 (best 모드는 0~1건)
        offer_count: 외부 API가 돌려준 원본 결과 수
        error_message: 오류 메시지 (COLLABORATOR_ERROR일 때)
    """

    product: str
    category: Optional[str] = None
    status: ResolutionStatus = ResolutionStatus.NO_OFFERS
    offers: list[NormalizedOffer] = field(default_factory=list)
    offer_count: int = 0
    error_message: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == ResolutionStatus.OK

    @classmethod
    def skipped(cls, product: str, category: Optional[str] = None) -> "ProductResolution":
        return cls(product=product, category=category, status=ResolutionStatus.SKIPPED)

    @classmethod
    def collaborator_error(
        cls, product: str, category: Optional[str], error: str
    ) -> "ProductResolution":
        return cls(
            product=product,
            category=category,
            status=ResolutionStatus.COLLABORATOR_ERROR,
            error_message=error,
        )
