"""Shopping search modules (SerpAPI google_shopping).

공개 API는 이 파일에서만 export합니다.
"""

from .executor import ShoppingSearchExecutor
from .result import Offer
from .shopping_search import ShoppingSearchClient, parse_shopping_results

__all__ = [
        "ShoppingSearchExecutor",
        "Offer",
        "ShoppingSearchClient",
        "parse_shopping_results",
]
