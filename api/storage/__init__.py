"""
Storage backends.

SupabaseRepository (api.supabase) and MemoryRepository share one interface:
catalog reads, inventory CRUD and quote persistence.
"""

from api.storage.memory import MemoryRepository

__all__ = ["MemoryRepository"]
