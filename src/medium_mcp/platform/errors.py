"""Errors raised by platform clients."""

from __future__ import annotations


class PlatformError(Exception):
    """Base error for content-platform lookups."""


class PlatformNotFoundError(PlatformError):
    """The requested entity does not exist on the platform."""

    def __init__(self, kind: str, key: str) -> None:
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key}")


class ClientFactoryError(PlatformError):
    """A ``module:attribute`` client factory could not be loaded."""
