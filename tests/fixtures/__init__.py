"""테스트 자산(데이터) 레이어

규칙:
- 로직 없음 (단순 dict/list/primitive)
- 네트워크 의존 없음
"""

from .serpapi_payloads import (
    SERPAPI_EMPTY,
    SERPAPI_ERROR_NO_RESULTS,
    SERPAPI_NOTEBOOK,
    SERPAPI_PARTIAL_FIELDS,
)

__all__ = [
    "SERPAPI_NOTEBOOK",
    "SERPAPI_PARTIAL_FIELDS",
    "SERPAPI_EMPTY",
    "SERPAPI_ERROR_NO_RESULTS",
]
