import math
from typing import Any, List, Optional

PLACEHOLDER_IMAGE_URL = "https://placehold.co/800x800/f5f5f5/999999?text=Product"

CURRENCY_SYMBOLS = {
    "USD": "$",
    "INR": "₹",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "AUD": "A$",
    "CAD": "C$",
}

CATEGORY_ICONS = [
    (("phone", "mobile"), "📱"),
    (("laptop", "computer"), "💻"),
    (("gaming", "console"), "🎮"),
    (("audio", "headphone"), "🎧"),
    (("watch", "wearable"), "⌚"),
    (("tv", "video"), "📺"),
]
DEFAULT_CATEGORY_ICON = "📦"

SEARCH_SUGGESTIONS = ["OLED TV", "iPhone 15", "AirPods", "MacBook", "Gaming"]


def currency_symbol(currency: Optional[str]) -> str:
    if not currency:
        return ""
    return CURRENCY_SYMBOLS.get(currency.upper(), currency)


def format_price(price: float, currency: Optional[str]) -> str:
    return f"{currency_symbol(currency)}{math.floor(price + 0.5):,}"


def image_or_placeholder(image_url: Optional[str]) -> str:
    return image_url or PLACEHOLDER_IMAGE_URL


def category_icon(category_name: str) -> str:
    name = category_name.lower()
    for keywords, icon in CATEGORY_ICONS:
        if any(keyword in name for keyword in keywords):
            return icon
    return DEFAULT_CATEGORY_ICON


def product_badges(product: Any) -> List[str]:
    badges = []
    if getattr(product, "new_arrival", False):
        badges.append("New")
    if getattr(product, "trending", False):
        badges.append("Hot")
    if getattr(product, "featured", False):
        badges.append("Featured")
    return badges


def pluralize_items(count: int) -> str:
    return f"{count} {'item' if count == 1 else 'items'}"
