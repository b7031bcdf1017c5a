"""Offer selection - price normalization and best-price reduction"""

from typing import Iterable, Optional

from src.core.logging import logger
from src.crawlers.result import Offer
from src.utils.text.prices import parse_price

from .result import NormalizedOffer


def normalize_offers(offers: Iterable[Offer], label: Optional[str] = None) -> list[NormalizedOffer]:
    """가격을 파싱할 수 있는 결과만 NormalizedOffer로 변환 (순서 유지)

    Args:
        offers: 외부 API 결과
        label: 라벨. None이면 각 결과의 title 사용

    Returns:
        파싱 성공한 결과 목록. 실패한 결과는 경고 로그 후 제외
    """
    normalized: list[NormalizedOffer] = []
    for offer in offers:
        price = parse_price(offer.raw_price)
        if price is None:
            logger.warning(
                f"[SELECTION] Unparsable price skipped: price='{offer.raw_price[:40]}', "
                f"store='{offer.store}'"
            )
            continue
        normalized.append(
            NormalizedOffer(
                product=offer.title if label is None else label,
                price=price,
                store=offer.store,
                link=offer.link,
            )
        )
    return normalized


def select_best_offer(offers: Iterable[NormalizedOffer]) -> Optional[NormalizedOffer]:
    """최저가 1건 선택. 동일 가격이면 먼저 나온 결과, 비어 있으면 None"""
    best: Optional[NormalizedOffer] = None
    for offer in offers:
        if best is None or offer.price < best.price:
            best = offer
    return best
