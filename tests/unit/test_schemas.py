"""Pydantic 스키마 테스트."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from src.engine import NormalizedOffer, ProductResolution, ResolutionStatus
from src.schemas.price_schema import PrecoResponse, ProdutoRequest, ProdutoStatusResponse


def test_produto_request_aliases():
    request = ProdutoRequest.model_validate({"Nome": "Mouse", "Categoria": "perifericos"})
    assert request.nome == "Mouse"
    assert request.categoria == "perifericos"


def test_produto_request_defaults():
    request = ProdutoRequest.model_validate({})
    assert request.nome == ""
    assert request.categoria is None


def test_produto_request_too_long():
    with pytest.raises(ValidationError):
        ProdutoRequest.model_validate({"Nome": "x" * 501})


def test_preco_from_offer():
    offer = NormalizedOffer(product="Mouse", price=Decimal("1709.05"), store="Loja", link="https://l")
    preco = PrecoResponse.from_offer(offer)
    assert preco.model_dump() == {
        "produto": "Mouse",
        "preco": "R$ 1.709,05",
        "loja": "Loja",
        "link": "https://l",
    }


def test_status_from_error_resolution():
    resolution = ProductResolution.collaborator_error("Mouse", None, "boom")
    status = ProdutoStatusResponse.from_resolution(resolution)
    assert status.status == "collaborator_error"
    assert status.melhor_preco is None
    assert status.erro == "boom"


def test_status_from_skipped_resolution():
    status = ProdutoStatusResponse.from_resolution(ProductResolution.skipped("Mouse", "x"))
    assert status.status == ResolutionStatus.SKIPPED.value
    assert status.categoria == "x"
