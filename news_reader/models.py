"""Core data models for the news reader."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple

from .config import DEFAULT_LANGUAGE
from .schemas import ArticleRecord


@dataclass(frozen=True)
class FilterParameters:
    """The current query intent: topic, language and country."""

    category: str = ""
    language: str = DEFAULT_LANGUAGE
    country: Optional[str] = None

    def __post_init__(self) -> None:
        language = (self.language or "").strip().lower()
        if not language:
            raise ValueError("language must be a non-empty code")
        country = (self.country or "").strip().lower() or None
        object.__setattr__(self, "category", (self.category or "").strip())
        object.__setattr__(self, "language", language)
        object.__setattr__(self, "country", country)

    def replace(self, **changes: Any) -> "FilterParameters":
        """Return a copy with the given fields changed and the others kept."""

        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "category": self.category,
            "language": self.language,
            "country": self.country,
        }


@dataclass(frozen=True)
class ControllerState:
    """Read-only snapshot of what the controller currently shows."""

    articles: Tuple[ArticleRecord, ...] = ()
    parameters: Optional[FilterParameters] = None
    last_error: Optional[str] = None
    in_flight: bool = False

    @property
    def loading(self) -> bool:
        return not self.articles and self.last_error is None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "parameters": self.parameters.to_dict() if self.parameters else None,
            "loading": self.loading,
            "in_flight": self.in_flight,
            "last_error": self.last_error,
            "articles": [article.to_wire() for article in self.articles],
        }


__all__ = ["ControllerState", "FilterParameters"]
