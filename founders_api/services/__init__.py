"""
Service layer for founding member availability.
"""

from .founding_members import FoundingMemberService, AvailabilityUnavailable

__all__ = ["FoundingMemberService", "AvailabilityUnavailable"]
