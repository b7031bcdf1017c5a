"""Text cleaning helpers."""

from __future__ import annotations

import re

# 화면에 보이지 않지만 검색어를 깨뜨리는 문자들
# NBSP, ZWSP, ZWNJ, ZWJ, BOM
INVISIBLE_CHARS = ("\u00a0", "\u200b", "\u200c", "\u200d", "\ufeff")

_INVISIBLE_RE = re.compile("[" + "".join(INVISIBLE_CHARS) + "]")
_WHITESPACE_RE = re.compile(r"\s+")


def sanitize_text(text: str | None) -> str:
    """
    검색어로 쓰기 전에 표시용 문자열을 정규화합니다.

    예시:
    - "Produto\\u00a0com\\u200b espaços" -> "Produto com espaços"
    - "  Notebook   Dell  " -> "Notebook Dell"

    Args:
        text: 원본 문자열

    Returns:
        보이지 않는 문자를 공백으로 바꾸고 연속 공백을 하나로 줄인 문자열
    """
    if not text or not text.strip():
        return ""

    cleaned = _INVISIBLE_RE.sub(" ", text)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned)

    return cleaned.strip()
