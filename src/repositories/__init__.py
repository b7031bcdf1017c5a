"""저장소 계층 - export only."""

from .impl import SAMPLE_PRODUCTS, Product, ProductRegistry

__all__ = ["Product", "ProductRegistry", "SAMPLE_PRODUCTS"]
