"""
Storage module for the hosted tenant store.
"""

from .tenants import TenantStore

__all__ = ["TenantStore"]
