"""
Configuration store adapters (in-memory and Supabase).
"""

from flowproc.store.adapters.in_memory_adapter import InMemoryConfigStore
from flowproc.store.adapters.supabase_adapter import SupabaseConfigStore

__all__ = ["InMemoryConfigStore", "SupabaseConfigStore"]
