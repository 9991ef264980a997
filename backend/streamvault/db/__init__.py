"""Supabase access: client lifecycle, table stores and route dependencies."""

from streamvault.db.deps import (
    AdStore,
    CatalogStore,
    get_advertisement_store,
    get_content_store,
    get_supabase,
)
from streamvault.db.repositories import AdvertisementRequestStore, ContentStore
from streamvault.db.supabase import (
    SupabaseClient,
    check_supabase_health,
    close_supabase,
    get_supabase_client,
    init_supabase,
)

__all__ = [
    # Client
    "SupabaseClient",
    "init_supabase",
    "close_supabase",
    "get_supabase_client",
    "check_supabase_health",
    # Stores
    "AdvertisementRequestStore",
    "ContentStore",
    # Dependencies
    "get_supabase",
    "get_advertisement_store",
    "get_content_store",
    "AdStore",
    "CatalogStore",
]
