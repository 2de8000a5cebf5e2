"""
Advisory Tips

A purely informational message shown after a spending is added.
Nothing here mutates or persists state.

Rules:
- Day total above the threshold -> the fixed slow-down message, always
- Otherwise a random canned tip for the category
- Unknown categories use the food tips
"""

import random
from decimal import Decimal
from typing import Optional, Union


SLOW_DOWN_TIP = "You're spending quite a bit today—maybe take a break!"

DEFAULT_TIP_CATEGORY = "food"

CATEGORY_TIPS: dict[str, tuple[str, ...]] = {
    "food": (
        "Try cooking at home instead of eating out to save money.",
        "Buying snacks in bulk can be cheaper than single items.",
        "Plan your meals to avoid impulse food purchases.",
    ),
    "transport": (
        "Try walking or cycling instead of taking transport.",
        "Consider carpooling to share transportation costs.",
        "Using public transport passes can save money.",
    ),
    "games": (
        "Looks like you're spending on games—maybe limit it!",
        "Consider free alternatives to paid games.",
        "Set a weekly budget for entertainment.",
    ),
    "shopping": (
        "Make a shopping list to avoid impulse buys.",
        "Look for discounts and sales before purchasing.",
        "Consider secondhand options for better deals.",
    ),
    "bills": (
        "Review your subscriptions and cancel unused ones.",
        "Compare utility providers for better rates.",
        "Set reminders to pay bills on time to avoid late fees.",
    ),
}

KNOWN_CATEGORIES = tuple(CATEGORY_TIPS)

Number = Union[Decimal, float, int]


def known_category(category: str) -> Optional[str]:
    """Canonical name of a known category (case-insensitive), or None."""
    key = category.strip().lower()
    return key if key in CATEGORY_TIPS else None


class TipAdvisor:
    """
    Maps (category, running total) to an advisory message.

    Randomness comes from an injected random.Random so callers can seed it.
    """

    def __init__(
        self,
        threshold: Number = 50,
        rng: Optional[random.Random] = None,
    ):
        self._threshold = Decimal(str(threshold))
        self._rng = rng or random.Random()

    @property
    def threshold(self) -> Decimal:
        return self._threshold

    def tips_for(self, category: str) -> tuple[str, ...]:
        """Canned tips for a category, falling back to the food tips."""
        return CATEGORY_TIPS[known_category(category) or DEFAULT_TIP_CATEGORY]

    def generate_tip(
        self,
        amount: Number,
        category: str,
        current_day_total: Number,
    ) -> str:
        """
        Pick the tip to show after a spending.

        Args:
            amount: The spending just added (informational only)
            category: Its category
            current_day_total: The day total AFTER the spending was applied

        Returns:
            SLOW_DOWN_TIP if the total exceeds the threshold, otherwise one of
            the category's tips chosen at random
        """
        if Decimal(str(current_day_total)) > self._threshold:
            return SLOW_DOWN_TIP
        return self._rng.choice(self.tips_for(category))
