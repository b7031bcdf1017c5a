"""Budget Manager - Time budget for one price resolution request

예산 구조:
- 전체: api_price_resolve_timeout_s (None이면 무제한)
- 상품 1건 조회: min(lookup_timeout, 남은 예산)
"""

from dataclasses import dataclass
from time import monotonic
from typing import Optional


@dataclass
class BudgetConfig:
    """예산 설정"""

    total_budget: Optional[float] = 30.0  # 전체 예산 (초), None이면 무제한
    lookup_timeout: float = 10.0  # 상품 1건 조회 상한 (초)
    min_remaining: float = 0.05  # 새 조회를 시작할 최소 여유 시간 (초)

    def __post_init__(self):
        """설정 검증"""
        if self.total_budget is not None and self.total_budget <= 0:
            raise ValueError(f"total_budget must be positive: {self.total_budget}")
        if self.lookup_timeout <= 0:
            raise ValueError(f"lookup_timeout must be positive: {self.lookup_timeout}")


class BudgetManager:
    """요청 단위 시간 예산 관리자

    Usage:
        manager = BudgetManager(BudgetConfig(total_budget=20.0))
        manager.start()

        if not manager.is_exhausted():
            timeout = manager.get_lookup_timeout()
            ...

        report = manager.get_report()
    """

    def __init__(self, config: Optional[BudgetConfig] = None):
        self.config = config or BudgetConfig()
        self.start_time: Optional[float] = None

    def start(self) -> None:
        """예산 측정 시작"""
        self.start_time = monotonic()

    def elapsed(self) -> float:
        """경과 시간 (초). start() 전에는 0.0"""
        if self.start_time is None:
            return 0.0
        return monotonic() - self.start_time

    def remaining(self) -> Optional[float]:
        """남은 예산 (초). 무제한이면 None"""
        if self.config.total_budget is None:
            return None
        return max(0.0, self.config.total_budget - self.elapsed())

    def is_exhausted(self) -> bool:
        remaining = self.remaining()
        return remaining is not None and remaining < self.config.min_remaining

    def get_lookup_timeout(self) -> float:
        """상품 1건 조회에 적용할 타임아웃 (초)"""
        remaining = self.remaining()
        if remaining is None:
            return self.config.lookup_timeout
        return min(self.config.lookup_timeout, remaining)

    def get_report(self) -> dict:
        return {
            "total_budget": self.config.total_budget,
            "elapsed": self.elapsed(),
            "remaining": self.remaining(),
            "is_exhausted": self.is_exhausted(),
        }
