"""ProductRegistry 유닛 테스트"""
import threading

import pytest

from src.core.exceptions import DuplicateProductException, InvalidProductNameException
from src.repositories import SAMPLE_PRODUCTS, Product, ProductRegistry


class TestProductRegistry:
    def test_add_then_list_once(self, registry):
        registry.add("Mouse Logitech")
        names = [p.name for p in registry.snapshot()]
        assert names.count("Mouse Logitech") == 1

    def test_add_with_category(self, registry):
        product = registry.add("Galaxy S24", "celulares")
        assert product == Product(name="Galaxy S24", category="celulares")
        assert registry.as_mapping() == {"Galaxy S24": "celulares"}

    def test_name_and_category_trimmed(self, registry):
        registry.add("  Monitor LG  ", "  ")
        assert registry.as_mapping() == {"Monitor LG": None}

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_empty_name_rejected(self, registry, name):
        with pytest.raises(InvalidProductNameException):
            registry.add(name)
        assert len(registry) == 0

    def test_duplicate_rejected_without_corruption(self, registry):
        registry.add("Teclado", "perifericos")
        with pytest.raises(DuplicateProductException) as exc:
            registry.add("Teclado", "outra")
        assert exc.value.error_code == "DUPLICATE_PRODUCT"
        assert registry.as_mapping() == {"Teclado": "perifericos"}

    def test_duplicate_after_trim_rejected(self, registry):
        registry.add("Teclado")
        with pytest.raises(DuplicateProductException):
            registry.add(" Teclado ")

    def test_overwrite_policy(self):
        registry = ProductRegistry(duplicate_policy="overwrite")
        registry.add("Teclado", "perifericos")
        registry.add("Teclado", "gamer")
        assert registry.as_mapping() == {"Teclado": "gamer"}
        assert len(registry) == 1

    def test_invalid_policy(self):
        with pytest.raises(ValueError):
            ProductRegistry(duplicate_policy="ignore")

    def test_registration_order_preserved(self, registry):
        for name in ("C", "A", "B"):
            registry.add(name)
        assert [p.name for p in registry.snapshot()] == ["C", "A", "B"]

    def test_snapshot_is_a_copy(self, registry):
        registry.add("A")
        snapshot = registry.snapshot()
        registry.add("B")
        assert [p.name for p in snapshot] == ["A"]
        assert len(registry) == 2

    def test_invisible_characters_share_identity(self, registry):
        """보이지 않는 문자만 다른 이름은 같은 상품"""
        registry.add("Mouse Gamer")
        with pytest.raises(DuplicateProductException):
            registry.add("Mouse\u00a0Gamer")
        with pytest.raises(DuplicateProductException):
            registry.add("Mouse \u200b Gamer")
        assert registry.as_mapping() == {"Mouse Gamer": None}
        assert "Mouse\u00a0Gamer" in registry

    def test_internal_whitespace_collapsed(self, registry):
        registry.add("Monitor   LG\t27")
        assert registry.as_mapping() == {"Monitor LG 27": None}

    def test_contains(self, registry):
        registry.add("Webcam")
        assert "Webcam" in registry
        assert " Webcam " in registry
        assert "Outro" not in registry
        assert 123 not in registry

    def test_seed_samples(self, registry):
        registry.seed()
        assert len(registry) == len(SAMPLE_PRODUCTS) == 3
        categories = [p.category for p in registry.snapshot()]
        assert sum(1 for c in categories if c) == 1

    def test_seed_twice_is_idempotent(self, registry):
        registry.seed()
        registry.seed()
        assert len(registry) == 3

    def test_concurrent_add_while_iterating(self, registry):
        """등록과 snapshot 순회가 동시에 일어나도 손상 없음"""
        errors: list[Exception] = []

        def writer(offset: int):
            try:
                for i in range(200):
                    registry.add(f"produto-{offset}-{i}")
            except Exception as e:  # pragma: no cover
                errors.append(e)

        def reader():
            try:
                for _ in range(200):
                    for product in registry.snapshot():
                        assert product.name
            except Exception as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=writer, args=(n,)) for n in range(4)]
        threads += [threading.Thread(target=reader) for _ in range(2)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert errors == []
        assert len(registry) == 800
