"""Shared exception hierarchy for chat provider adapters."""

from __future__ import annotations


class ProviderError(Exception):
    """Base exception for all provider errors."""


class ProviderAuthError(ProviderError):
    """Rejected or missing credentials."""


class ProviderAPIError(ProviderError):
    """Errors from the model-serving API (rate limits, server errors, etc.)."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProviderTimeoutError(ProviderError):
    """Request timeout errors."""
