"""최저가 선택 로직 유닛 테스트"""
from decimal import Decimal

from src.engine.result import NormalizedOffer
from src.engine.selection import normalize_offers, select_best_offer

from tests.fakes import make_offer


def _normalized(price: str, store: str = "Loja") -> NormalizedOffer:
    return NormalizedOffer(product="P", price=Decimal(price), store=store, link="")


class TestSelectBestOffer:
    def test_minimum_price(self):
        offers = [_normalized("120.00"), _normalized("99.90"), _normalized("150.00")]
        assert select_best_offer(offers).price == Decimal("99.90")

    def test_empty_yields_none(self):
        assert select_best_offer([]) is None

    def test_tie_keeps_first(self):
        """동일 가격이면 먼저 나온 결과"""
        offers = [_normalized("50.00", "A"), _normalized("50.00", "B")]
        assert select_best_offer(offers).store == "A"

    def test_numeric_not_lexicographic(self):
        offers = [_normalized("9.99", "nove"), _normalized("10.00", "dez")]
        assert select_best_offer(offers).store == "nove"

    def test_zero_price_is_selectable(self):
        offers = [_normalized("5.00", "A"), _normalized("0.00", "B")]
        assert select_best_offer(offers).store == "B"


class TestNormalizeOffers:
    def test_unparsable_dropped(self):
        offers = [make_offer("R$ 10,00", "A"), make_offer("Consulte", "B"), make_offer("", "C")]
        result = normalize_offers(offers, label="Produto")
        assert [o.store for o in result] == ["A"]

    def test_unparsable_logged(self, caplog):
        caplog.set_level("WARNING", logger="price_scraper")
        normalize_offers([make_offer("Consulte", "B")])
        assert any("Unparsable price" in r.message for r in caplog.records)

    def test_label_uses_registered_name(self):
        offers = [make_offer("R$ 10,00", title="Título da loja")]
        assert normalize_offers(offers, label="Nome cadastrado")[0].product == "Nome cadastrado"

    def test_label_defaults_to_title(self):
        offers = [make_offer("R$ 10,00", title="Título da loja")]
        assert normalize_offers(offers)[0].product == "Título da loja"

    def test_order_preserved(self):
        offers = [make_offer("3,00", "C"), make_offer("1,00", "A"), make_offer("2,00", "B")]
        assert [o.store for o in normalize_offers(offers)] == ["C", "A", "B"]

    def test_price_is_decimal(self):
        result = normalize_offers([make_offer("R$ 1.709,05")])
        assert result[0].price == Decimal("1709.05")
