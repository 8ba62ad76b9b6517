"""
Configuration module for the founding member spots API.

Manages environment variables and the hosted Supabase (PostgREST)
connection settings. The service-role key must come from the
environment; there is no usable default for it.
"""

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class SupabaseConfig:
    """
    Immutable configuration for the Supabase REST connection.

    Attributes:
        url: The project URL (e.g. https://<ref>.supabase.co)
        service_role_key: Privileged key that bypasses row-level security
        timeout: Request timeout for count queries (seconds)
    """
    url: str
    service_role_key: str
    timeout: float = 10.0

    @property
    def rest_url(self) -> str:
        """Base URL of the PostgREST API."""
        return f"{self.url.rstrip('/')}/rest/v1"

    @property
    def headers(self) -> dict[str, str]:
        """Returns the authorization headers for the PostgREST API."""
        return {
            "apikey": self.service_role_key,
            "Authorization": f"Bearer {self.service_role_key}",
        }

    @property
    def is_configured(self) -> bool:
        """True when both the URL and the credential are present."""
        return bool(self.url and self.service_role_key)


@dataclass(frozen=True)
class FoundingMemberConfig:
    """
    Configuration for the founding member allotment.

    Attributes:
        limit: Total number of founding member spots
        tenants_table: Table holding tenant records
    """
    limit: int = 100
    tenants_table: str = "tenants"

    def __post_init__(self):
        if self.limit < 0:
            raise ValueError(f"FOUNDING_MEMBER_LIMIT must be >= 0, got {self.limit}")


class Settings:
    """
    Central settings manager that aggregates all configuration.

    Loaded once at startup from environment variables. A missing URL
    or key does not prevent startup: count queries fail instead and
    the spots endpoint serves its fallback.
    """

    def __init__(self):
        self.supabase = SupabaseConfig(
            url=os.getenv("SUPABASE_URL") or os.getenv("NEXT_PUBLIC_SUPABASE_URL", ""),
            service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY", ""),
            timeout=float(os.getenv("SUPABASE_TIMEOUT", "10.0"))
        )

        self.founding = FoundingMemberConfig(
            limit=int(os.getenv("FOUNDING_MEMBER_LIMIT", "100")),
            tenants_table=os.getenv("TENANTS_TABLE", "tenants")
        )

    @property
    def server_port(self) -> int:
        """Server port from environment variable."""
        return int(os.getenv("PORT", "8000"))

    @property
    def api_title(self) -> str:
        """API title for OpenAPI documentation."""
        return "Founding Member Spots API"

    @property
    def api_version(self) -> str:
        """API version string."""
        return "1.0.0"

    @property
    def api_description(self) -> str:
        """API description for OpenAPI documentation."""
        return (
            "Reports how many founding member spots remain by counting "
            "flagged tenants in the hosted Supabase store."
        )


# Global settings instance - imported throughout the application
settings = Settings()
