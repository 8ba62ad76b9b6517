"""
Tenant Store - Count-only queries against the hosted Supabase store.

This module talks to the PostgREST API directly over HTTP. Counts are
requested with a HEAD request and `Prefer: count=exact`, so no row
payloads cross the wire; the total comes back in the Content-Range
header.

The store is read-only from this service's perspective.
"""

import httpx
import logging
from typing import Any, Optional

from ..core.config import SupabaseConfig, settings
from ..core.errors import (
    StoreAuthError,
    StoreConfigError,
    StoreConnectionError,
    StoreResponseError,
    StoreSchemaError,
)
from ..core.utils import parse_content_range_total, truncate_string

# Configure logging
logger = logging.getLogger(__name__)


class TenantStore:
    """
    Read-only client for the tenants table.

    One instance (and one underlying httpx.AsyncClient) is meant to be
    shared by every request in the process. Pass `client` to reuse an
    existing AsyncClient, e.g. one built on an httpx.MockTransport in
    tests; a client passed in is not closed by `aclose()`.
    """

    def __init__(
        self,
        base_url: str,
        service_key: str,
        table: str = "tenants",
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = 10.0
    ):
        self.config = SupabaseConfig(
            url=base_url,
            service_role_key=service_key,
            timeout=timeout
        )
        self.table = table
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, client: Optional[httpx.AsyncClient] = None) -> "TenantStore":
        """Build a store from the process-wide settings."""
        return cls(
            base_url=settings.supabase.url,
            service_key=settings.supabase.service_role_key,
            table=settings.founding.tenants_table,
            client=client,
            timeout=settings.supabase.timeout
        )

    async def count_where(self, column: str, value: Any) -> Optional[int]:
        """
        Count rows where `column` equals `value`.

        Args:
            column: Column to filter on
            value: Value to compare with (booleans become true/false)

        Returns:
            The exact row count, or None if the store did not report one

        Raises:
            StoreError: On any configuration, transport or response failure
        """
        if not self.config.is_configured:
            raise StoreConfigError("Supabase URL or service-role key is not configured")

        url = f"{self.config.rest_url}/{self.table}"
        params = {"select": "*", column: f"eq.{_format_value(value)}"}
        headers = {**self.config.headers, "Prefer": "count=exact"}

        try:
            response = await self._client.head(url, params=params, headers=headers)
        except httpx.TimeoutException as e:
            raise StoreConnectionError(f"Timeout counting {self.table}.{column}") from e
        except httpx.HTTPError as e:
            raise StoreConnectionError(f"Error counting {self.table}.{column}: {e}") from e

        _raise_for_status(response)

        try:
            count = parse_content_range_total(response.headers.get("content-range"))
        except ValueError as e:
            raise StoreResponseError(str(e), status_code=response.status_code) from e

        logger.debug(f"Counted {count} rows in {self.table} where {column}={value}")
        return count

    async def count_founding_members(self) -> Optional[int]:
        """Number of tenants flagged as founding members."""
        return await self.count_where("is_founding_member", True)

    async def count_non_demo_tenants(self) -> Optional[int]:
        """Number of real (non-demo) tenants."""
        return await self.count_where("is_demo", False)

    async def health_check(self) -> bool:
        """
        Check if the store is reachable and accepts our credential.

        Returns:
            True if a count query succeeds, False otherwise
        """
        try:
            await self.count_founding_members()
            return True
        except Exception as e:
            logger.debug(f"Store health check failed: {e}")
            return False

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this store created it."""
        if self._owns_client:
            await self._client.aclose()


def _format_value(value: Any) -> str:
    """Render a filter value the way PostgREST expects it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    return str(value)


def _raise_for_status(response: httpx.Response) -> None:
    """Map PostgREST error statuses onto StoreError subclasses."""
    status = response.status_code
    if status < 400:
        return

    # HEAD responses carry no body; include it when there is one
    message = f"Store returned status {status}"
    if response.content:
        message = f"{message}: {truncate_string(response.text)}"

    if status in (401, 403):
        raise StoreAuthError(message, status_code=status)
    if status == 400:
        raise StoreSchemaError(message, status_code=status)
    raise StoreResponseError(message, status_code=status)
