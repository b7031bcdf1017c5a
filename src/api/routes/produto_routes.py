"""Produto Routes - 상품 등록/조회"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request

from src.core.exceptions import DuplicateProductException, InvalidProductNameException
from src.core.logging import logger, sanitize_for_log
from src.repositories import ProductRegistry
from src.schemas.price_schema import ErrorResponse, MessageResponse, ProdutoRequest

router = APIRouter(tags=["produtos"])


def get_registry(request: Request) -> ProductRegistry:
    """앱이 소유한 ProductRegistry"""
    return request.app.state.registry


@router.post(
    "/produtos",
    response_model=MessageResponse,
    responses={409: {"model": ErrorResponse}},
)
async def cadastrar_produto(
    request: ProdutoRequest,
    registry: ProductRegistry = Depends(get_registry),
):
    """상품 등록

    - 이름이 비어 있으면 등록하지 않고 경고 메시지 반환 (200)
    - 같은 이름: reject 정책이면 409, overwrite 정책이면 카테고리 갱신
    """
    try:
        product = registry.add(request.nome, request.categoria)
    except InvalidProductNameException as e:
        logger.warning(f"[API] Empty product name ignored: {e.error_code}")
        return MessageResponse(message="Nome do produto vazio; nada cadastrado")
    except DuplicateProductException as e:
        logger.warning(f"[API] Duplicate product rejected: {sanitize_for_log(request.nome)}")
        raise HTTPException(
            status_code=409,
            detail=ErrorResponse(message=e.message, error_code=e.error_code).model_dump(),
        )

    logger.info(f"[API] Product registered: name='{sanitize_for_log(product.name)}'")
    return MessageResponse(message="Produto cadastrado")


@router.get("/produtos", response_model=dict[str, Optional[str]])
async def listar_produtos(registry: ProductRegistry = Depends(get_registry)):
    """등록된 상품 목록 (상품명 → 카테고리, 등록 순서)"""
    return registry.as_mapping()
