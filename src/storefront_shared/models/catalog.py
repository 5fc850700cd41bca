"""Product catalog.

A fixed, process-wide lookup from product identifier to display name.
"""

from types import MappingProxyType
from typing import Mapping

PRODUCT_NAMES: Mapping[str, str] = MappingProxyType(
    {
        "karma": "The Karma Tee",
        "buttercup": "The Buttercup",
        "zero-dark": "Zero Care - Dark",
        "zero-light": "Zero Care - Light",
        "boss": "The Boss Move",
    }
)


def is_known_product(product: str) -> bool:
    return product in PRODUCT_NAMES


def get_display_name(product: str) -> str:
    """Look up the display name for a product identifier.

    Raises:
        KeyError: If the product is not in the catalog.
    """
    return PRODUCT_NAMES[product]


def line_item_name(product: str, size: str) -> str:
    """Build the Stripe line item name, e.g. ``"The Karma Tee - Size M"``."""
    return f"{get_display_name(product)} - Size {size}"
