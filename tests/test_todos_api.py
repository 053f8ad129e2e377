"""
Todo API — Endpoint Tests
===========================

What:  Exercises the five /todos endpoints end-to-end over HTTP.
How:   httpx AsyncClient → FastAPI app → TodoStore → per-test SQLite database.
"""

import pytest


async def _create(client, title="Buy milk", is_complete=False):
    response = await client.post("/todos", json={"title": title, "isComplete": is_complete})
    assert response.status_code == 201
    return response.json()


class TestScenario:

    @pytest.mark.asyncio
    async def test_full_lifecycle(self, test_client):
        """Create → get → replace → get → delete → get."""
        created = await test_client.post(
            "/todos", json={"title": "Buy milk", "isComplete": False}
        )
        assert created.status_code == 201
        assert created.json() == {"id": 1, "title": "Buy milk", "isComplete": False}

        fetched = await test_client.get("/todos/1")
        assert fetched.status_code == 200
        assert fetched.json() == {"id": 1, "title": "Buy milk", "isComplete": False}

        replaced = await test_client.put(
            "/todos/1", json={"title": "Buy milk", "isComplete": True}
        )
        assert replaced.status_code == 204
        assert replaced.content == b""

        fetched = await test_client.get("/todos/1")
        assert fetched.status_code == 200
        assert fetched.json() == {"id": 1, "title": "Buy milk", "isComplete": True}

        deleted = await test_client.delete("/todos/1")
        assert deleted.status_code == 200
        assert deleted.json() == {"id": 1, "title": "Buy milk", "isComplete": True}

        gone = await test_client.get("/todos/1")
        assert gone.status_code == 404


class TestCreate:

    @pytest.mark.asyncio
    async def test_create_sets_location_header(self, test_client):
        response = await test_client.post("/todos", json={"title": "Walk dog"})
        assert response.status_code == 201
        body = response.json()
        assert response.headers["location"] == f"/todos/{body['id']}"

    @pytest.mark.asyncio
    async def test_create_defaults_is_complete_to_false(self, test_client):
        response = await test_client.post("/todos", json={"title": "No flag"})
        assert response.status_code == 201
        assert response.json()["isComplete"] is False

    @pytest.mark.asyncio
    async def test_create_ignores_client_id(self, test_client):
        response = await test_client.post(
            "/todos", json={"id": 99, "title": "Mine", "isComplete": True}
        )
        assert response.status_code == 201
        assert response.json()["id"] == 1
        assert (await test_client.get("/todos/99")).status_code == 404

    @pytest.mark.asyncio
    async def test_create_accepts_snake_case_flag(self, test_client):
        response = await test_client.post(
            "/todos", json={"title": "Snake", "is_complete": True}
        )
        assert response.status_code == 201
        assert response.json()["isComplete"] is True

    @pytest.mark.asyncio
    async def test_create_allows_empty_and_missing_title(self, test_client):
        empty = await _create(test_client, title="")
        assert empty["title"] == ""

        response = await test_client.post("/todos", json={"isComplete": True})
        assert response.status_code == 201
        assert response.json()["title"] is None

    @pytest.mark.asyncio
    async def test_created_item_round_trips_through_get(self, test_client):
        created = await _create(test_client, title="Read book", is_complete=True)
        fetched = (await test_client.get(f"/todos/{created['id']}")).json()
        assert fetched["title"] == "Read book"
        assert fetched["isComplete"] is True

    @pytest.mark.asyncio
    async def test_ids_are_not_reused_after_delete(self, test_client):
        first = await _create(test_client, title="First")
        await test_client.delete(f"/todos/{first['id']}")
        second = await _create(test_client, title="Second")
        assert second["id"] != first["id"]


class TestList:

    @pytest.mark.asyncio
    async def test_list_empty(self, test_client):
        response = await test_client.get("/todos")
        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_list_contains_created_items(self, test_client):
        created_ids = {(await _create(test_client, title=f"Task {i}"))["id"] for i in range(5)}

        response = await test_client.get("/todos")
        assert response.status_code == 200
        listed_ids = {item["id"] for item in response.json()}
        assert created_ids <= listed_ids


class TestGet:

    @pytest.mark.asyncio
    async def test_get_missing_returns_404_error_body(self, test_client):
        response = await test_client.get("/todos/424242")
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "not_found"
        assert "424242" in body["message"]
        assert body["request_id"] == response.headers["x-request-id"]

    @pytest.mark.asyncio
    async def test_get_non_integer_id_is_rejected(self, test_client):
        response = await test_client.get("/todos/abc")
        assert response.status_code == 422


class TestReplace:

    @pytest.mark.asyncio
    async def test_replace_overwrites_both_fields(self, test_client):
        created = await _create(test_client, title="Initial", is_complete=False)

        response = await test_client.put(
            f"/todos/{created['id']}", json={"title": "Replaced", "isComplete": True}
        )
        assert response.status_code == 204

        fetched = (await test_client.get(f"/todos/{created['id']}")).json()
        assert fetched == {"id": created["id"], "title": "Replaced", "isComplete": True}

    @pytest.mark.asyncio
    async def test_replace_is_not_a_merge(self, test_client):
        created = await _create(test_client, title="Keep me?", is_complete=True)

        await test_client.put(f"/todos/{created['id']}", json={})

        fetched = (await test_client.get(f"/todos/{created['id']}")).json()
        assert fetched["title"] is None
        assert fetched["isComplete"] is False

    @pytest.mark.asyncio
    async def test_replace_missing_returns_404_without_creating(self, test_client):
        existing = await _create(test_client, title="Untouched")

        response = await test_client.put(
            "/todos/777", json={"title": "Ghost", "isComplete": True}
        )
        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

        listed = (await test_client.get("/todos")).json()
        assert listed == [existing]


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_returns_removed_item(self, test_client):
        created = await _create(test_client, title="ToDelete", is_complete=True)

        response = await test_client.delete(f"/todos/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

        assert (await test_client.get(f"/todos/{created['id']}")).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_twice_returns_404(self, test_client):
        created = await _create(test_client)
        await test_client.delete(f"/todos/{created['id']}")

        again = await test_client.delete(f"/todos/{created['id']}")
        assert again.status_code == 404

    @pytest.mark.asyncio
    async def test_delete_missing_leaves_other_items(self, test_client):
        existing = await _create(test_client, title="Stay")

        response = await test_client.delete("/todos/555")
        assert response.status_code == 404

        listed = (await test_client.get("/todos")).json()
        assert listed == [existing]
