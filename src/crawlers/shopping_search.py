"""Google Shopping (SerpAPI) 검색 클라이언트"""

from __future__ import annotations

import json
from typing import Any, Optional

from src.core.config import settings
from src.core.exceptions import (
    CollaboratorHTTPException,
    MalformedResponseException,
    MissingCredentialException,
)
from src.core.logging import logger
from src.utils.url_utils import build_search_query, build_search_url

from .http_client import SharedHttpClient, get_shared_http_client
from .result import Offer


class ShoppingSearchClient:
    """SerpAPI google_shopping 엔진으로 상품당 한 번 검색합니다.

    - 재시도 없음 (실패는 예외로 올려 호출자가 상품 단위로 격리)
    - 결과는 첫 페이지(shopping_results)만 사용
    """

    def __init__(
        self,
        http_client: Optional[SharedHttpClient] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        engine: Optional[str] = None,
        category_param: Optional[str] = None,
        timeout_s: Optional[float] = None,
    ):
        self.http = http_client or get_shared_http_client()
        self.api_key = settings.serpapi_api_key if api_key is None else api_key
        self.base_url = base_url or settings.serpapi_base_url
        self.engine = engine or settings.serpapi_engine
        self.category_param = category_param or settings.serpapi_category_param
        self.timeout_s = timeout_s or settings.http_timeout_s

    async def search(self, product_name: str, category: Optional[str] = None) -> list[Offer]:
        """상품명으로 검색

        Raises:
            MissingCredentialException: API 키 미설정
            NetworkTimeoutException: 타임아웃
            CollaboratorHTTPException: 전송 실패 또는 비정상 상태 코드
            MalformedResponseException: JSON/구조 오류
        """
        if not self.api_key:
            raise MissingCredentialException()

        query = build_search_query(
            product_name,
            category,
            engine=self.engine,
            category_param=self.category_param,
        )
        url = build_search_url(self.base_url, query, self.api_key)
        logger.debug(f"[SHOPPING] Searching: {query}")

        response = await self.http.get_text(url, timeout_s=self.timeout_s)
        if response is None:
            raise CollaboratorHTTPException(0, "transport error")

        status, body = response
        if status < 200 or status >= 300:
            raise CollaboratorHTTPException(status, _extract_error(body))

        return parse_shopping_results(body)


def parse_shopping_results(body: str) -> list[Offer]:
    """SerpAPI 응답 본문에서 Offer 목록 추출

    shopping_results가 없으면 빈 목록입니다. 객체가 아닌 항목은 건너뜁니다.

    Raises:
        MalformedResponseException: JSON이 아니거나 구조가 예상과 다른 경우
    """
    try:
        payload: Any = json.loads(body)
    except (TypeError, ValueError) as e:
        raise MalformedResponseException(f"invalid JSON ({type(e).__name__})") from e

    if not isinstance(payload, dict):
        raise MalformedResponseException("top-level value is not an object")

    if "error" in payload and "shopping_results" not in payload:
        # SerpAPI는 결과 없음도 error 필드로 알려줍니다
        logger.info(f"[SHOPPING] API reported: {str(payload.get('error'))[:100]}")
        return []

    items = payload.get("shopping_results")
    if items is None:
        return []
    if not isinstance(items, list):
        raise MalformedResponseException("shopping_results is not a list")

    return [Offer.from_dict(item) for item in items if isinstance(item, dict)]


def _extract_error(body: str) -> str:
    try:
        payload = json.loads(body)
    except (TypeError, ValueError):
        return ""
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"][:200]
    return ""
