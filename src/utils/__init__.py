"""Utilities package - Flat structure

- text: 검색어 정규화, 가격 파싱
- url_utils: 검색 쿼리 생성
"""

from .text import format_price, parse_price, sanitize_text
from .url_utils import build_search_query, build_search_url

__all__ = [
    # text
    "sanitize_text",
    "parse_price",
    "format_price",
    # url
    "build_search_query",
    "build_search_url",
]
