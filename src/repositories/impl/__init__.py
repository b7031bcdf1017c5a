"""Repositories implementation package."""

from .product_registry import SAMPLE_PRODUCTS, Product, ProductRegistry

__all__ = ["Product", "ProductRegistry", "SAMPLE_PRODUCTS"]
