"""Offer Standard Format

쇼핑 검색 API 결과 한 건의 표준 형식을 정의합니다.
"""

from dataclasses import dataclass
from typing import Any, Dict


def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""


@dataclass(frozen=True)
class Offer:
    """정규화 전 검색 결과 한 건

    Attributes:
        title: 판매 상품명
        raw_price: 가격 원문 (예: "R$ 1.709,05")
        store: 판매처
        link: 상품 링크
    """

    title: str
    raw_price: str
    store: str
    link: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Offer":
        """shopping_results 항목에서 Offer 생성

        필드가 없거나 문자열이 아니면 빈 문자열로 채웁니다.
        """
        return cls(
            title=_as_text(data.get("title")),
            raw_price=_as_text(data.get("price")),
            store=_as_text(data.get("source")),
            link=_as_text(data.get("link")),
        )
