"""
Founding Member Spots API

A small FastAPI backend that reports how many founding member
signup spots remain by counting tenants in a hosted Supabase store.
"""

__version__ = "1.0.0"
