"""Shopping search protocol - Interface for the external price source

Defines the interface the price resolver depends on.
"""

from typing import Optional, Protocol

from .result import Offer


class ShoppingSearchExecutor(Protocol):
    """쇼핑 검색 실행자 프로토콜

    구현 예시:
        class ShoppingSearchClient(ShoppingSearchExecutor):
            async def search(self, product_name: str, category: Optional[str] = None) -> list[Offer]:
                # 외부 API 호출
                ...
    """

    async def search(self, product_name: str, category: Optional[str] = None) -> list[Offer]:
        """상품 검색

        Args:
            product_name: 등록된 상품명
            category: 카테고리 태그

        Returns:
            list[Offer]: 검색 결과 (첫 페이지, API 응답 순서)

        Raises:
            CollaboratorException: 네트워크/응답 오류
        """
        ...
