"""Advisory tips shown after a spending is added."""

from smartspend.advice.tips import (
    CATEGORY_TIPS,
    KNOWN_CATEGORIES,
    SLOW_DOWN_TIP,
    TipAdvisor,
    known_category,
)

__all__ = [
    "CATEGORY_TIPS",
    "KNOWN_CATEGORIES",
    "SLOW_DOWN_TIP",
    "TipAdvisor",
    "known_category",
]
