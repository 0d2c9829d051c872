"""Tests for the account API."""

import pytest

REGISTRATION = {
    "username": "alice",
    "email": "a@x.com",
    "password": "secret1",
    "profileName": "AliceMC",
}


def register(client, **overrides):
    body = dict(REGISTRATION)
    body.update(overrides)
    return client.post("/api/register", json=body)


def bearer(client, username="alice", password="secret1"):
    token = client.post(
        "/authserver/authenticate",
        json={
            "agent": {"name": "Minecraft", "version": 1},
            "username": username,
            "password": password,
        },
    ).json()["accessToken"]
    return {"Authorization": f"Bearer {token}"}


class TestRegister:
    def test_register(self, client, container):
        response = register(client)
        assert response.status_code == 201
        data = response.json()
        assert data["success"] is True
        assert data["message"] == "Account created."
        account = container.credentials.find_by_id(data["userId"])
        assert account.username == "alice"
        assert [p.name for p in container.profiles.list_by_owner(account.id)] == ["AliceMC"]

    def test_register_missing_fields(self, client):
        response = client.post("/api/register", json={"username": "alice"})
        assert response.status_code == 400
        data = response.json()
        assert data["error"] == "MISSING_FIELDS"
        assert "profileName" in data["message"]

    def test_register_duplicate_username(self, client):
        register(client)
        response = register(client, email="other@x.com")
        assert response.status_code == 400
        assert response.json()["error"] == "DUPLICATE_IDENTIFIER"

    def test_register_username_equal_to_existing_email(self, client):
        register(client)
        response = register(client, username="a@x.com", email="new@x.com")
        assert response.status_code == 400


class TestAccountInfo:
    def test_info(self, client, alice):
        account, profile = alice
        response = client.get("/api/user/info", headers=bearer(client))
        assert response.status_code == 200
        data = response.json()
        assert data["user"]["id"] == account.id
        assert data["user"]["username"] == "alice"
        assert data["user"]["email"] == "a@x.com"
        assert data["user"]["lastLogin"] is not None
        assert [p["name"] for p in data["profiles"]] == ["AliceMC"]

    def test_info_requires_token(self, client):
        assert client.get("/api/user/info").status_code == 401


class TestLogout:
    def test_logout(self, client, alice):
        headers = bearer(client)
        response = client.post("/api/user/logout", headers=headers)
        assert response.status_code == 200
        assert response.json() == {"success": True, "message": "Signed out."}
        assert client.get("/api/user/info", headers=headers).status_code == 401


class TestChangePassword:
    def test_change_password(self, client, alice):
        headers = bearer(client)
        other = bearer(client)
        response = client.post(
            "/api/user/change-password",
            headers=headers,
            json={"currentPassword": "secret1", "newPassword": "secret2"},
        )
        assert response.status_code == 200
        assert response.json()["message"] == "Password updated."

        # Every session of the user is revoked.
        assert client.get("/api/user/info", headers=headers).status_code == 401
        assert client.get("/api/user/info", headers=other).status_code == 401

        fresh = bearer(client, password="secret2")
        assert client.get("/api/user/info", headers=fresh).status_code == 200

    def test_wrong_current_password(self, client, alice):
        response = client.post(
            "/api/user/change-password",
            headers=bearer(client),
            json={"currentPassword": "wrong", "newPassword": "secret2"},
        )
        assert response.status_code == 403
        assert response.json()["error"] == "INVALID_PASSWORD"

    def test_short_new_password(self, client, alice):
        response = client.post(
            "/api/user/change-password",
            headers=bearer(client),
            json={"currentPassword": "secret1", "newPassword": "abc"},
        )
        assert response.status_code == 400


class TestLifespan:
    def test_demo_account_seeded(self, settings, clock):
        from fastapi.testclient import TestClient
        from api.app import create_app
        from api.dependencies import ServiceContainer, set_container

        seeded = settings.model_copy(update={"seed_demo_account": True})
        container = ServiceContainer(settings=seeded, clock=clock)
        set_container(container)
        with TestClient(create_app()) as client:
            response = client.post(
                "/authserver/authenticate",
                json={
                    "agent": {"name": "Minecraft", "version": 1},
                    "username": "admin",
                    "password": "admin123",
                },
            )
            assert response.status_code == 200
            assert response.json()["selectedProfile"]["name"] == "AdminPlayer"
            assert container.sweeper.running
        assert not container.sweeper.running
