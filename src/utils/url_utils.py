"""검색 쿼리/URL 생성 유틸리티"""
from typing import Optional
from urllib.parse import quote

from src.utils.text.cleaning import sanitize_text


def build_search_query(
    product_name: str,
    category: Optional[str] = None,
    *,
    engine: str = "google_shopping",
    category_param: str = "category",
) -> str:
    """
    쇼핑 검색 API용 쿼리스트링 생성

    Examples:
        >>> build_search_query("Notebook Dell")
        'q=Notebook%20Dell&engine=google_shopping'
        >>> build_search_query("Mouse", "eletronicos")
        'q=Mouse&engine=google_shopping&category=eletronicos'

    Args:
        product_name: 상품명 (정규화 후 인코딩)
        category: 카테고리 태그. 비어 있으면 파라미터 자체를 생략
        engine: 검색 엔진 이름
        category_param: 카테고리 필터 파라미터 이름

    Returns:
        API 키를 제외한 쿼리스트링
    """
    term = sanitize_text(product_name)
    query = f"q={quote(term, safe='')}&engine={quote(engine, safe='')}"

    tag = sanitize_text(category)
    if tag:
        query += f"&{category_param}={quote(tag, safe='')}"

    return query


def build_search_url(base_url: str, query: str, api_key: str) -> str:
    """쿼리스트링에 API 키를 붙여 요청 URL 생성"""
    separator = "&" if "?" in base_url else "?"
    return f"{base_url}{separator}{query}&api_key={quote(api_key, safe='')}"
