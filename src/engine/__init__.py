"""Engine Layer - Price resolution

This module provides the core engine layer, implementing:
- PriceResolver: Main entry point for price resolution
- BudgetManager: Per-request time budget
- NormalizedOffer / ProductResolution: Standardized result format
- normalize_offers / select_best_offer: Price reduction logic
"""

from .budget import BudgetConfig, BudgetManager
from .resolver import PriceResolver
from .result import NormalizedOffer, PriceMode, ProductResolution, ResolutionStatus
from .selection import normalize_offers, select_best_offer

__all__ = [
    "PriceResolver",
    "BudgetManager",
    "BudgetConfig",
    "NormalizedOffer",
    "PriceMode",
    "ProductResolution",
    "ResolutionStatus",
    "normalize_offers",
    "select_best_offer",
]
