"""Pydantic 스키마 정의"""
from typing import Optional, List
from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from datetime import datetime

from src.engine.result import NormalizedOffer, ProductResolution
from src.utils.text.prices import format_price


class ProdutoRequest(BaseModel):
    """상품 등록 요청 ({"Nome": ..., "Categoria": ...})"""
    model_config = ConfigDict(populate_by_name=True)

    nome: Optional[str] = Field(
        "",
        max_length=500,
        validation_alias=AliasChoices("Nome", "nome"),
        description="상품명",
    )
    categoria: Optional[str] = Field(
        None,
        max_length=200,
        validation_alias=AliasChoices("Categoria", "categoria"),
        description="카테고리 태그 (선택)",
    )


class MessageResponse(BaseModel):
    """단순 메시지 응답"""
    message: str


class ErrorResponse(BaseModel):
    """오류 응답"""
    message: str = Field(..., description="오류 메시지")
    error_code: str = Field(..., description="에러 코드")


class PrecoResponse(BaseModel):
    """가격 조회 결과 한 건"""
    produto: str = Field(..., description="상품명 (/precos: 등록명, /precos/todos: 판매 상품명)")
    preco: str = Field(..., description="가격 (예: R$ 1.709,05)")
    loja: str = Field(..., description="판매처")
    link: str = Field(..., description="상품 링크")

    @classmethod
    def from_offer(cls, offer: NormalizedOffer) -> "PrecoResponse":
        return cls(
            produto=offer.product,
            preco=format_price(offer.price),
            loja=offer.store,
            link=offer.link,
        )


class ProdutoStatusResponse(BaseModel):
    """상품별 조회 상태"""
    produto: str = Field(..., description="등록 상품명")
    categoria: Optional[str] = Field(None, description="카테고리 태그")
    status: str = Field(..., description="ok | no_offers | collaborator_error | skipped")
    ofertas_recebidas: int = Field(0, ge=0, description="외부 API가 돌려준 결과 수")
    melhor_preco: Optional[PrecoResponse] = Field(None, description="최저가 (best 모드)")
    erro: Optional[str] = Field(None, description="오류 메시지")

    @classmethod
    def from_resolution(cls, resolution: ProductResolution) -> "ProdutoStatusResponse":
        best = resolution.offers[0] if resolution.offers else None
        return cls(
            produto=resolution.product,
            categoria=resolution.category,
            status=resolution.status.value,
            ofertas_recebidas=resolution.offer_count,
            melhor_preco=PrecoResponse.from_offer(best) if best else None,
            erro=resolution.error_message,
        )


class HealthResponse(BaseModel):
    """헬스 체크 응답"""
    status: str
    timestamp: datetime
    version: str
    produtos: int
    credential_configured: bool


class StatusReportResponse(BaseModel):
    """전체 조회 상태 리포트"""
    total: int
    ok: int
    produtos: List[ProdutoStatusResponse]
