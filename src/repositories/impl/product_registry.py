"""상품 목록 리포지토리 - 프로세스 메모리 기반."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import DuplicateProductException, InvalidProductNameException
from src.core.logging import logger
from src.utils.text.cleaning import sanitize_text


@dataclass(frozen=True)
class Product:
    """등록된 상품 (이름이 식별자)"""

    name: str
    category: Optional[str] = None


# 앱 시작 시 미리 등록되는 예시 상품
SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(name="Notebook Dell Inspiron 15"),
    Product(name="Smartphone Samsung Galaxy S24", category="celulares"),
    Product(name="Fone de Ouvido JBL Tune 520BT"),
)


class ProductRegistry:
    """이름 → 카테고리 매핑을 보관하는 스레드 안전 저장소.

    - 등록 순서를 유지합니다 (dict 삽입 순서)
    - 조회는 항상 복사본(snapshot)을 반환하므로 순회 중 등록이 일어나도 안전합니다.
    """

    def __init__(self, duplicate_policy: str = "reject"):
        if duplicate_policy not in ("reject", "overwrite"):
            raise ValueError(f"Unsupported duplicate_policy: {duplicate_policy}")
        self.duplicate_policy = duplicate_policy
        self._lock = threading.Lock()
        self._products: dict[str, Optional[str]] = {}

    def add(self, name: str, category: Optional[str] = None) -> Product:
        """상품 등록

        Args:
            name: 상품명 (sanitize_text로 정규화한 값이 식별자)
            category: 카테고리 태그 (빈 문자열은 None 취급)

        Returns:
            등록된 Product

        Raises:
            InvalidProductNameException: 이름이 비어 있는 경우
            DuplicateProductException: reject 정책에서 같은 이름이 이미 있는 경우
        """
        clean_name = sanitize_text(name)
        if not clean_name:
            raise InvalidProductNameException("product name must not be empty")

        clean_category = (category or "").strip() or None

        with self._lock:
            if clean_name in self._products:
                if self.duplicate_policy == "reject":
                    raise DuplicateProductException(clean_name)
                logger.info(f"[REGISTRY] Overwriting category: name='{clean_name}'")
            self._products[clean_name] = clean_category

        logger.debug(f"[REGISTRY] Registered: name='{clean_name}', category={clean_category}")
        return Product(name=clean_name, category=clean_category)

    def snapshot(self) -> list[Product]:
        """현재 등록된 상품의 복사본 (등록 순서)"""
        with self._lock:
            items = list(self._products.items())
        return [Product(name=n, category=c) for n, c in items]

    def as_mapping(self) -> dict[str, Optional[str]]:
        with self._lock:
            return dict(self._products)

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        with self._lock:
            return sanitize_text(name) in self._products

    def __len__(self) -> int:
        with self._lock:
            return len(self._products)

    def seed(self, products: tuple[Product, ...] = SAMPLE_PRODUCTS) -> None:
        """예시 상품 등록 (이미 있는 이름은 건너뜀)"""
        for product in products:
            if product.name in self:
                continue
            self.add(product.name, product.category)
