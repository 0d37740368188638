"""Errors raised by the news fetch client."""

from __future__ import annotations

from typing import Optional


class NewsFetchError(Exception):
    """Base class for failures while fetching news from the upstream API."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class NetworkError(NewsFetchError):
    """Raised when the request cannot be completed (DNS, timeout, reset, HTTP status)."""


class DecodeError(NewsFetchError):
    """Raised when the response body is not valid JSON or misses a required field."""


__all__ = ["DecodeError", "NetworkError", "NewsFetchError"]
