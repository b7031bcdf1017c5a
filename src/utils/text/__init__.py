"""Text utilities."""

from .cleaning import sanitize_text
from .prices import format_price, parse_price

__all__ = [
    "sanitize_text",
    "parse_price",
    "format_price",
]
