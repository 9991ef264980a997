"""
Table-level data access on top of SupabaseClient.

Each store maps one table's operations to PostgREST calls. Stores raise
ConfigurationError / StoreError unchanged; deciding whether a failure is
fatal is left to the service layer.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from streamvault.core.exceptions import StoreError
from streamvault.db.supabase import SupabaseClient

ADVERTISEMENT_REQUESTS_TABLE = "advertisement_requests"
EPISODE_TABLE = "episode"


def _as_utc(value: datetime) -> datetime:
    """Treat naive timestamps as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class AdvertisementRequestStore:
    """CRUD for the advertisement_requests table."""

    def __init__(self, client: SupabaseClient):
        self.client = client

    async def list_all(self) -> List[Dict[str, Any]]:
        """All rows, newest first."""
        rows = await self.client.request(
            "GET",
            ADVERTISEMENT_REQUESTS_TABLE,
            params={"select": "*", "order": "created_at.desc"},
        )
        return rows or []

    async def insert(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored (id and timestamps filled in)."""
        created = await self.client.request(
            "POST",
            ADVERTISEMENT_REQUESTS_TABLE,
            params={"select": "*"},
            json=[row],
            headers={"Prefer": "return=representation"},
        )
        if not created:
            raise StoreError("Supabase did not return the inserted row")
        return created[0]

    async def delete(self, request_id: str) -> None:
        await self.client.request(
            "DELETE",
            ADVERTISEMENT_REQUESTS_TABLE,
            params={"id": f"eq.{request_id}"},
        )

    async def exists_since(self, user_ip: str, since: datetime) -> bool:
        """Whether any row for ``user_ip`` has ``created_at >= since``."""
        rows = await self.client.request(
            "GET",
            ADVERTISEMENT_REQUESTS_TABLE,
            params={
                "select": "id",
                "user_ip": f"eq.{user_ip}",
                "created_at": f"gte.{_as_utc(since).isoformat()}",
                "limit": "1",
            },
        )
        return bool(rows)


class ContentStore:
    """Read access to catalog tables used by the player."""

    def __init__(self, client: SupabaseClient):
        self.client = client

    async def get_episode(self, episode_id: Any) -> Optional[Dict[str, Any]]:
        rows = await self.client.request(
            "GET",
            EPISODE_TABLE,
            params={"select": "*", "episode_id": f"eq.{episode_id}", "limit": "1"},
        )
        return rows[0] if rows else None
