"""Exceptions raised by the routing helpers."""

from __future__ import annotations


class RoutingError(Exception):
    """Base class for errors raised by this package."""


class DeliveryError(RoutingError):
    """An outbound activity could not be delivered by the connector."""

    def __init__(self, message: str, *, service_url: str | None = None) -> None:
        super().__init__(message)
        self.service_url = service_url


class InvalidReferenceError(RoutingError, ValueError):
    """A required activity or conversation reference was missing."""
