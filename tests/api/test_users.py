"""
Tests for the user endpoints.
"""

import pytest


ANSON = {"id": 1, "username": "anson", "displayName": "Anson"}


class TestListUsers:
    """Tests for GET /api/users."""

    def test_returns_all_users(self, client):
        response = client.get("/api/users")

        assert response.status_code == 200
        assert len(response.json()) == 7
        assert response.json()[0] == ANSON

    def test_filter_by_username(self, client):
        response = client.get("/api/users", params={"filter": "username", "value": "anson"})

        assert response.status_code == 200
        assert response.json() == [ANSON]

    def test_filter_ignores_case(self, client):
        response = client.get("/api/users", params={"filter": "username", "value": "ANSON"})

        assert response.json() == [ANSON]

    @pytest.mark.parametrize(
        "params",
        [{"filter": "username"}, {"value": "anson"}, {"filter": "username", "value": ""}],
    )
    def test_partial_filter_returns_everything(self, client, params):
        response = client.get("/api/users", params=params)

        assert response.status_code == 200
        assert len(response.json()) == 7

    def test_filter_on_numeric_field_matches_nothing(self, client):
        client.patch("/api/users/1", json={"age": 30})
        response = client.get("/api/users", params={"filter": "age", "value": "30"})

        assert response.status_code == 200
        assert response.json() == []

    def test_filter_too_short(self, client):
        response = client.get("/api/users", params={"filter": "ab", "value": "x"})

        assert response.status_code == 400
        assert response.json() == {
            "error": [{"field": "filter", "message": "Filter must be 3-10 characters long."}]
        }

    def test_filter_too_long(self, client):
        response = client.get("/api/users", params={"filter": "a" * 11, "value": "x"})

        assert response.status_code == 400

    def test_repeated_filter_is_rejected(self, client):
        response = client.get(
            "/api/users",
            params=[("filter", "username"), ("filter", "displayName"), ("value", "x")],
        )

        assert response.status_code == 400
        assert {"field": "filter", "message": "Invalid value"} in response.json()["error"]


class TestGetUser:
    """Tests for GET /api/users/{id}."""

    @pytest.mark.parametrize("user_id", [1, 4, 7])
    def test_returns_stored_record(self, client, store, user_id):
        response = client.get(f"/api/users/{user_id}")

        assert response.status_code == 200
        assert response.json() == store.get(store.find(user_id))

    @pytest.mark.parametrize(
        "raw_id, expected_id",
        [("1abc", 1), ("1.5", 1), ("007", 7), ("+3", 3)],
    )
    def test_leading_digits_resolve(self, client, raw_id, expected_id):
        response = client.get(f"/api/users/{raw_id}")

        assert response.status_code == 200
        assert response.json()["id"] == expected_id

    def test_replace_with_partially_numeric_id_uses_parsed_id(self, client):
        response = client.put("/api/users/2xyz", json={"username": "jackson"})

        assert response.status_code == 200
        assert response.json() == {"id": 2, "username": "jackson"}

    @pytest.mark.parametrize("user_id", ["0", "8", "999", "abc", "x1", "-1"])
    def test_unknown_id(self, client, user_id):
        response = client.get(f"/api/users/{user_id}")

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestCreateUser:
    """Tests for POST /api/users."""

    def test_creates_user(self, client, store):
        response = client.post("/api/users", json={"username": "newbie", "displayName": "Newbie"})

        assert response.status_code == 201
        assert response.json() == {"id": 8, "username": "newbie", "displayName": "Newbie"}
        assert len(store) == 8

    def test_display_name_is_optional(self, client):
        response = client.post("/api/users", json={"username": "newbie"})

        assert response.status_code == 201
        assert response.json() == {"id": 8, "username": "newbie"}

    def test_extra_fields_are_not_stored(self, client):
        response = client.post("/api/users", json={"username": "newbie", "role": "admin"})

        assert "role" not in response.json()

    def test_id_is_not_reused_after_delete(self, client, store):
        client.delete("/api/users/7")
        response = client.post("/api/users", json={"username": "newbie"})

        assert response.json()["id"] == 8
        assert len(store) == 7

    def test_id_follows_highest_existing_id(self, client, store):
        client.delete("/api/users/2")
        before = len(store)
        response = client.post("/api/users", json={"username": "newbie"})

        assert response.json()["id"] == 8
        assert len(store) == before + 1

    def test_short_username(self, client, store):
        response = client.post("/api/users", json={"username": "abcd", "displayName": "A"})

        assert response.status_code == 400
        messages = [error["message"] for error in response.json()["error"]]
        assert any("at least 5 characters" in message for message in messages)
        assert len(store) == 7

    def test_missing_username_reports_all_violations(self, client):
        response = client.post("/api/users", json={})

        assert response.status_code == 400
        assert response.json()["error"] == [
            {"field": "username", "message": "Username can not be empty."},
            {
                "field": "username",
                "message": "Username must be at least 5 characters with a max of 32 characters",
            },
        ]

    def test_missing_body(self, client):
        response = client.post("/api/users")

        assert response.status_code == 400

    def test_invalid_json(self, client, store):
        response = client.post(
            "/api/users",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"][0]["field"] == "body"
        assert len(store) == 7


class TestReplaceUser:
    """Tests for PUT /api/users/{id}."""

    def test_replaces_record(self, client):
        response = client.put("/api/users/2", json={"username": "jackson"})

        assert response.status_code == 200
        assert response.json() == {"id": 2, "username": "jackson"}
        assert client.get("/api/users/2").json() == {"id": 2, "username": "jackson"}

    def test_id_comes_from_path(self, client):
        response = client.put("/api/users/2", json={"id": 99, "username": "jackson"})

        assert response.json()["id"] == 2
        assert client.get("/api/users/99").status_code == 404

    def test_keeps_position(self, client):
        client.put("/api/users/3", json={"username": "adamant"})

        users = client.get("/api/users").json()
        assert [user["id"] for user in users] == [1, 2, 3, 4, 5, 6, 7]
        assert users[2] == {"id": 3, "username": "adamant"}

    def test_repeated_put_is_idempotent(self, client):
        body = {"username": "jackson", "displayName": "Jackson"}
        first = client.put("/api/users/2", json=body).json()
        second = client.put("/api/users/2", json=body).json()

        assert first == second == {"id": 2, **body}

    def test_empty_body(self, client):
        response = client.put("/api/users/2")

        assert response.status_code == 200
        assert response.json() == {"id": 2}

    def test_unknown_id(self, client):
        response = client.put("/api/users/42", json={"username": "ghost"})

        assert response.status_code == 404
        assert response.json() == {"error": "User not found"}


class TestUpdateUser:
    """Tests for PATCH /api/users/{id}."""

    def test_merges_fields(self, client):
        response = client.patch("/api/users/1", json={"displayName": "Anson W."})

        assert response.status_code == 200
        assert response.json() == {"id": 1, "username": "anson", "displayName": "Anson W."}

    def test_adds_new_fields(self, client):
        response = client.patch("/api/users/1", json={"email": "anson@example.com"})

        assert response.json() == {**ANSON, "email": "anson@example.com"}

    def test_keeps_position(self, client):
        client.patch("/api/users/5", json={"displayName": "J"})

        users = client.get("/api/users").json()
        assert users[4] == {"id": 5, "username": "jason", "displayName": "J"}

    def test_unknown_id(self, client):
        response = client.patch("/api/users/abc", json={"displayName": "x"})

        assert response.status_code == 404


class TestDeleteUser:
    """Tests for DELETE /api/users/{id}."""

    def test_deletes_user(self, client, store):
        response = client.delete("/api/users/4")

        assert response.status_code == 200
        assert response.json() == {"message": "User deleted"}
        assert len(store) == 6

    def test_deleted_id_is_gone_from_every_route(self, client):
        client.delete("/api/users/4")

        assert client.get("/api/users/4").status_code == 404
        assert client.put("/api/users/4", json={"username": "tina"}).status_code == 404
        assert client.patch("/api/users/4", json={"username": "tina"}).status_code == 404
        assert client.delete("/api/users/4").status_code == 404

    def test_unknown_id(self, client, store):
        response = client.delete("/api/users/100")

        assert response.status_code == 404
        assert len(store) == 7
