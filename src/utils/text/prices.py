"""Price parsing helpers (pt-BR currency notation)."""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from .cleaning import sanitize_text

CURRENCY_PREFIX = "R$"

_DECIMAL_TOKEN_RE = re.compile(r"^[0-9]+(\.[0-9]+)?$")
_CENTS = Decimal("0.01")


def parse_price(price_text: str | None) -> Decimal | None:
    """가격 문자열을 Decimal로 변환.

    "R$ 1.709,05" -> Decimal("1709.05"), "49,90" -> Decimal("49.90").

    콤마가 없으면 점은 소수점으로 취급합니다. 따라서 "1.709"는 1709가 아니라
    1.709로 해석됩니다.

    Returns:
        파싱 성공 시 Decimal(소수 둘째 자리 이상), 실패 시 None.
        0원은 Decimal("0.00")이므로 실패와 구분됩니다.
    """
    if not price_text or not price_text.strip():
        return None

    cleaned = sanitize_text(price_text)
    if cleaned.startswith(CURRENCY_PREFIX):
        cleaned = cleaned[len(CURRENCY_PREFIX):]
    cleaned = cleaned.strip()

    if "," in cleaned:
        cleaned = cleaned.replace(".", "").replace(",", ".")

    if not _DECIMAL_TOKEN_RE.match(cleaned):
        return None

    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None

    if value.as_tuple().exponent > -2:
        try:
            value = value.quantize(_CENTS)
        except InvalidOperation:
            # 정수부가 Decimal 정밀도를 넘는 경우
            return None
    return value


def format_price(value: Decimal) -> str:
    """Decimal 가격을 "R$ 1.709,05" 형태로 변환."""
    integer_part, _, fraction = f"{value:f}".partition(".")
    return f"{CURRENCY_PREFIX} {_group_thousands(integer_part)},{fraction.ljust(2, '0')}"


def _group_thousands(digits: str) -> str:
    head = len(digits) % 3 or 3
    groups = [digits[:head]] + [digits[i:i + 3] for i in range(head, len(digits), 3)]
    return ".".join(groups)
