"""
Exceptions raised by the tenant store client.

Every failure of a count query is a StoreError. The subclasses only
exist so that logs can tell an auth problem from a network blip; the
spots endpoint treats them all the same.
"""

from typing import Optional


class StoreError(Exception):
    """Base class for hosted store failures."""


class StoreConfigError(StoreError):
    """The store URL or service-role key is missing."""


class StoreConnectionError(StoreError):
    """The request never got a response (DNS, TLS, timeout...)."""


class StoreResponseError(StoreError):
    """The store answered with an error status or an unusable response."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class StoreAuthError(StoreResponseError):
    """The credential was rejected (401/403)."""


class StoreSchemaError(StoreResponseError):
    """The store rejected the query itself, usually an unknown column (400)."""
