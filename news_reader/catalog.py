"""Filter choices offered to the user interface."""

from __future__ import annotations

from typing import Dict, List, Tuple

LANGUAGES: Tuple[str, ...] = ("en", "es", "fr", "de", "hi")
# "" stands for "all categories" and is sent as no ``q`` parameter.
CATEGORIES: Tuple[str, ...] = ("", "technology", "games", "sports", "business", "health")
COUNTRIES: Tuple[str, ...] = ("us", "in", "gb", "de", "fr")


def label(value: str | None) -> str:
    """Label shown for a picker value; unrestricted choices read as ``ALL``."""

    if not value:
        return "ALL"
    return value.upper()


def as_dict() -> Dict[str, List[str]]:
    return {
        "languages": list(LANGUAGES),
        "categories": list(CATEGORIES),
        "countries": list(COUNTRIES),
    }


__all__ = ["CATEGORIES", "COUNTRIES", "LANGUAGES", "as_dict", "label"]
