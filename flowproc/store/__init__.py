"""
Configuration store access for lookup resolvers.

Lookup resolvers read flow names from admin-managed configuration records
through a read-only service sitting on top of a pluggable backend.
"""

from flowproc.store.service import ConfigStoreAdapter, ConfigStoreService
from flowproc.store.adapters.in_memory_adapter import InMemoryConfigStore

__all__ = [
    "ConfigStoreAdapter",
    "ConfigStoreService",
    "InMemoryConfigStore",
]
