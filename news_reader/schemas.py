"""Pydantic schemas for the upstream news payload and the reader's HTTP API."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from dateutil import parser as dtparse
from dateutil import tz as dttz
from pydantic import BaseModel, ConfigDict, Field, field_validator

NO_TITLE = "No Title"
NO_DESCRIPTION = "No description available."


class ArticleRecord(BaseModel):
    """One news item as returned by the upstream API.

    Every field is optional; a record with neither title nor description is
    still valid. Unknown fields are ignored so upstream schema additions do
    not break decoding.
    """

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    pub_date: Optional[str] = Field(None, alias="pubDate")
    pub_date_tz: Optional[str] = Field(None, alias="pubDateTZ")
    source_id: Optional[str] = None
    source_name: Optional[str] = None
    source_url: Optional[str] = None
    country: Optional[List[str]] = None

    @field_validator("country", mode="before")
    @classmethod
    def _coerce_country(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [value]
        return value

    @property
    def display_title(self) -> str:
        return self.title or NO_TITLE

    @property
    def display_description(self) -> str:
        return self.description or NO_DESCRIPTION

    def published_at(self) -> Optional[datetime]:
        """Return ``pubDate`` as an aware datetime, or None if absent or unparseable.

        Upstream sends naive timestamps plus a separate timezone name; UTC is
        assumed when the name is missing or unknown.
        """

        if not self.pub_date:
            return None
        try:
            dt = dtparse.parse(self.pub_date)
        except (ValueError, OverflowError):
            return None
        if dt.tzinfo is None:
            zone = dttz.gettz(self.pub_date_tz) if self.pub_date_tz else None
            dt = dt.replace(tzinfo=zone or timezone.utc)
        return dt

    def to_wire(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class FetchResult(BaseModel):
    """A single upstream response: status, total count and the first page of results."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    status: str
    total_results: int = Field(..., alias="totalResults")
    results: List[ArticleRecord] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status.strip().lower() == "success"

    @field_validator("results", mode="before")
    @classmethod
    def _null_results(cls, value: Any) -> Any:
        return [] if value is None else value


class FilterRequest(BaseModel):
    category: str = Field("", description="Free-text topic; empty means unrestricted")
    language: str = Field("en", description="Language code, must not be empty")
    country: Optional[str] = Field(None, description="Country code; omitted means unrestricted")

    @field_validator("language")
    @classmethod
    def validate_language(cls, value: str) -> str:
        cleaned = value.strip().lower()
        if not cleaned:
            raise ValueError("language must not be empty")
        return cleaned


class ParametersResponse(BaseModel):
    category: str
    language: str
    country: Optional[str]


class StateResponse(BaseModel):
    parameters: Optional[ParametersResponse]
    loading: bool
    in_flight: bool
    last_error: Optional[str]
    articles: List[Dict[str, Any]]


class CatalogResponse(BaseModel):
    languages: List[str]
    categories: List[str]
    countries: List[str]


__all__ = [
    "ArticleRecord",
    "CatalogResponse",
    "FetchResult",
    "FilterRequest",
    "ParametersResponse",
    "StateResponse",
]
