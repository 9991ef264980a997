"""
Store Dependencies for FastAPI Routes

Routes declare the store they need and FastAPI provides it:

    @router.get("/advertisement-requests")
    async def list_requests(store: AdvertisementRequestStore = Depends(get_advertisement_store)):
        ...

Tests replace these through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends

from streamvault.db.repositories import AdvertisementRequestStore, ContentStore
from streamvault.db.supabase import SupabaseClient, get_supabase_client


def get_supabase() -> SupabaseClient:
    """FastAPI dependency that provides the shared Supabase client."""
    return get_supabase_client()


def get_advertisement_store(
    client: SupabaseClient = Depends(get_supabase),
) -> AdvertisementRequestStore:
    return AdvertisementRequestStore(client)


def get_content_store(
    client: SupabaseClient = Depends(get_supabase),
) -> ContentStore:
    return ContentStore(client)


# Type aliases for cleaner route signatures
AdStore = Annotated[AdvertisementRequestStore, Depends(get_advertisement_store)]
CatalogStore = Annotated[ContentStore, Depends(get_content_store)]
