"""
Supabase Client Management

The catalog and advertisement tables live in a hosted Postgres (Supabase)
reached over its REST interface (PostgREST) at ``{SUPABASE_URL}/rest/v1``.

Architecture Flow:
------------------
Application Start → init_supabase() → one shared httpx.AsyncClient
↓
API Request → store method → SupabaseClient.request() → PostgREST
↓
Application Shutdown → close_supabase() → connections released

Filters use PostgREST's query syntax, e.g. ``user_ip=eq.203.0.113.7`` or
``created_at=gte.2024-01-01T00:00:00+00:00``.
"""

from typing import Any, Dict, Optional

import httpx

from streamvault.core.config import settings
from streamvault.core.exceptions import ConfigurationError, StoreError
from streamvault.core.logging import get_logger

logger = get_logger(__name__)


class SupabaseClient:
    """
    Thin async wrapper around the Supabase REST endpoint.

    Credentials are checked on every call rather than at construction so the
    application can start without them; each call then raises
    ConfigurationError, which callers degrade or surface as a 500.

    Example:
        >>> client = SupabaseClient("https://abc.supabase.co", "anon-key")
        >>> rows = await client.request("GET", "advertisement_requests", params={"select": "*"})
    """

    def __init__(
        self,
        url: Optional[str],
        api_key: Optional[str],
        timeout: float = 10.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.url = url.rstrip("/") if url else None
        self.api_key = api_key
        self._http = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def configured(self) -> bool:
        return bool(self.url and self.api_key)

    @property
    def rest_url(self) -> str:
        return f"{self.url}/rest/v1"

    def _headers(self, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {
            "apikey": self.api_key,
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        if extra:
            headers.update(extra)
        return headers

    async def request(
        self,
        method: str,
        table: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """
        Send one request to a table endpoint and decode the JSON reply.

        Args:
            method: HTTP method
            table: Table name (path below /rest/v1)
            params: PostgREST query parameters (filters, select, order, limit)
            json: Request body
            headers: Extra headers, e.g. ``Prefer: return=representation``

        Returns:
            Decoded JSON body, or None for an empty reply

        Raises:
            ConfigurationError: If SUPABASE_URL or SUPABASE_ANON_KEY is missing
            StoreError: On transport errors, non-2xx replies or undecodable bodies
        """
        if not self.configured:
            logger.error("supabase_not_configured", table=table, method=method)
            raise ConfigurationError("Database configuration error")

        try:
            response = await self._http.request(
                method,
                f"{self.rest_url}/{table}",
                params=params,
                json=json,
                headers=self._headers(headers),
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "supabase_request_failed",
                table=table,
                method=method,
                status_code=e.response.status_code,
                body=e.response.text[:500],
            )
            raise StoreError(f"Supabase returned {e.response.status_code} for {table}") from e
        except httpx.HTTPError as e:
            logger.error(
                "supabase_unreachable",
                table=table,
                method=method,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StoreError(f"Could not reach Supabase: {e}") from e

        if not response.content:
            return None

        try:
            return response.json()
        except ValueError as e:
            logger.error("supabase_invalid_json", table=table, method=method)
            raise StoreError(f"Supabase returned invalid JSON for {table}") from e

    async def ping(self) -> bool:
        """Check that the REST endpoint answers with the configured key."""
        if not self.configured:
            return False
        try:
            response = await self._http.get(f"{self.rest_url}/", headers=self._headers())
            return response.status_code < 500
        except httpx.HTTPError as e:
            logger.error(
                "supabase_health_check_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            return False

    async def aclose(self) -> None:
        await self._http.aclose()


# ================================
# Global Client Instance
# ================================

_client: Optional[SupabaseClient] = None


def init_supabase() -> SupabaseClient:
    """
    Create the shared client.

    Called from: streamvault.main.lifespan() startup
    """
    global _client
    if _client is None:
        _client = SupabaseClient(
            settings.SUPABASE_URL,
            settings.SUPABASE_ANON_KEY,
            timeout=settings.SUPABASE_TIMEOUT_SECONDS,
        )
        logger.info(
            "supabase_client_created",
            configured=_client.configured,
            timeout=settings.SUPABASE_TIMEOUT_SECONDS,
        )
    return _client


def get_supabase_client() -> SupabaseClient:
    """Return the shared client, creating it on first use."""
    return _client or init_supabase()


async def close_supabase() -> None:
    """
    Release the shared client's connections.

    Called from: streamvault.main.lifespan() shutdown
    """
    global _client
    if _client is None:
        return

    logger.info("closing_supabase_client")
    try:
        await _client.aclose()
    except Exception as e:
        logger.error(
            "supabase_close_failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        # Don't raise - we're shutting down anyway
    finally:
        _client = None


async def check_supabase_health() -> bool:
    """Health probe used by the /health endpoint."""
    return await get_supabase_client().ping()
