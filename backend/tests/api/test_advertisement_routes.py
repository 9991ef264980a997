"""
API tests for the advertisement request endpoints.
"""

import pytest
from httpx import AsyncClient


BODY = {
    "email": "brand@example.com",
    "description": "Pre-roll spot for a festive sale",
    "budget": 25000,
    "userIP": "203.0.113.7",
}


class TestCreateAdvertisementRequest:

    @pytest.mark.asyncio
    async def test_created(self, client: AsyncClient, ad_store):
        response = await client.post("/api/advertisement-requests", json=BODY)

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == BODY["email"]
        assert data["budget"] == 25000.0
        assert data["user_ip"] == BODY["userIP"]
        assert data["created_at"].startswith("2024-06-01T12:00:00")
        assert len(ad_store.rows) == 1

    @pytest.mark.asyncio
    async def test_snake_case_ip_is_accepted(self, client: AsyncClient):
        body = {**BODY}
        body["user_ip"] = body.pop("userIP")
        response = await client.post("/api/advertisement-requests", json=body)
        assert response.status_code == 201

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["email", "description", "budget", "userIP"])
    async def test_missing_field(self, client: AsyncClient, missing):
        body = {key: value for key, value in BODY.items() if key != missing}

        response = await client.post("/api/advertisement-requests", json=body)

        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    @pytest.mark.asyncio
    async def test_budget_too_low(self, client: AsyncClient):
        response = await client.post("/api/advertisement-requests", json={**BODY, "budget": 4999})
        assert response.status_code == 400
        assert response.json() == {"error": "Minimum budget is ₹5,000"}

    @pytest.mark.asyncio
    async def test_budget_too_high(self, client: AsyncClient):
        response = await client.post("/api/advertisement-requests", json={**BODY, "budget": 100_000_001})
        assert response.status_code == 400
        assert response.json() == {"error": "Maximum budget is ₹10,00,00,000"}

    @pytest.mark.asyncio
    async def test_budget_as_string(self, client: AsyncClient):
        response = await client.post("/api/advertisement-requests", json={**BODY, "budget": "5000"})
        assert response.status_code == 201
        assert response.json()["budget"] == 5000.0

    @pytest.mark.asyncio
    async def test_budget_not_a_number(self, client: AsyncClient):
        response = await client.post("/api/advertisement-requests", json={**BODY, "budget": "a lot"})
        assert response.status_code == 400
        assert response.json() == {"error": "Budget must be a number"}

    @pytest.mark.asyncio
    async def test_rate_limited_within_the_hour(self, client: AsyncClient, clock):
        first = await client.post("/api/advertisement-requests", json=BODY)
        assert first.status_code == 201

        clock.advance(minutes=10)
        second = await client.post("/api/advertisement-requests", json=BODY)

        assert second.status_code == 429
        assert second.json() == {
            "error": "You can only make one advertisement request every hour. Please try again later."
        }

    @pytest.mark.asyncio
    async def test_accepted_after_the_hour(self, client: AsyncClient, clock):
        await client.post("/api/advertisement-requests", json=BODY)

        clock.advance(minutes=61)
        response = await client.post("/api/advertisement-requests", json=BODY)

        assert response.status_code == 201

    @pytest.mark.asyncio
    async def test_store_failure(self, client: AsyncClient, ad_store, store_error):
        ad_store.fail_with = store_error

        response = await client.post("/api/advertisement-requests", json=BODY)

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to create advertisement request"}

    @pytest.mark.asyncio
    async def test_malformed_body(self, client: AsyncClient):
        response = await client.post(
            "/api/advertisement-requests",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request body"


class TestListAndDelete:

    @pytest.mark.asyncio
    async def test_list_newest_first(self, client: AsyncClient, clock):
        await client.post("/api/advertisement-requests", json=BODY)
        clock.advance(hours=2)
        await client.post("/api/advertisement-requests", json={**BODY, "email": "later@example.com"})

        response = await client.get("/api/advertisement-requests")

        assert response.status_code == 200
        assert [row["email"] for row in response.json()] == ["later@example.com", BODY["email"]]

    @pytest.mark.asyncio
    async def test_list_returns_rows_with_null_columns(self, client: AsyncClient, ad_store, clock):
        ad_store.rows.append({
            "id": "legacy-1",
            "email": None,
            "description": None,
            "budget": None,
            "user_ip": "203.0.113.9",
            "created_at": clock(),
            "updated_at": None,
        })

        response = await client.get("/api/advertisement-requests")

        assert response.status_code == 200
        rows = response.json()
        assert len(rows) == 1
        assert rows[0]["id"] == "legacy-1"
        assert rows[0]["email"] is None

    @pytest.mark.asyncio
    async def test_list_is_empty_when_store_fails(self, client: AsyncClient, ad_store, store_error):
        ad_store.fail_with = store_error

        response = await client.get("/api/advertisement-requests")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_delete(self, client: AsyncClient, ad_store):
        created = (await client.post("/api/advertisement-requests", json=BODY)).json()

        response = await client.delete(f"/api/advertisement-requests/{created['id']}")

        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert ad_store.rows == []

    @pytest.mark.asyncio
    async def test_delete_failure(self, client: AsyncClient, ad_store, store_error):
        ad_store.fail_with = store_error

        response = await client.delete("/api/advertisement-requests/abc")

        assert response.status_code == 500
        assert response.json() == {"error": "Failed to delete advertisement request"}


class TestCheckRecentRequest:

    @pytest.mark.asyncio
    async def test_recent_request_found(self, client: AsyncClient):
        await client.post("/api/advertisement-requests", json=BODY)

        response = await client.post(
            "/api/check-recent-ad-request",
            json={"userIP": BODY["userIP"], "since": "2024-06-01T11:00:00Z"},
        )

        assert response.status_code == 200
        assert response.json() == {"hasRecentRequest": True}

    @pytest.mark.asyncio
    async def test_no_recent_request(self, client: AsyncClient):
        await client.post("/api/advertisement-requests", json=BODY)

        response = await client.post(
            "/api/check-recent-ad-request",
            json={"userIP": "198.51.100.2", "since": "2024-06-01T11:00:00Z"},
        )

        assert response.json() == {"hasRecentRequest": False}

    @pytest.mark.asyncio
    async def test_store_failure_reads_as_no_request(self, client: AsyncClient, ad_store, store_error):
        ad_store.fail_with = store_error

        response = await client.post(
            "/api/check-recent-ad-request",
            json={"userIP": BODY["userIP"], "since": "2024-06-01T11:00:00Z"},
        )

        assert response.status_code == 200
        assert response.json() == {"hasRecentRequest": False}

    @pytest.mark.asyncio
    async def test_missing_ip(self, client: AsyncClient):
        response = await client.post("/api/check-recent-ad-request", json={"since": "2024-06-01T11:00:00Z"})
        assert response.status_code == 400
