"""Tests for the /authserver endpoints."""

import pytest

AGENT = {"name": "Minecraft", "version": 1}


def authenticate(client, username="alice", password="secret1", **extra):
    body = {"agent": AGENT, "username": username, "password": password}
    body.update(extra)
    return client.post("/authserver/authenticate", json=body)


class TestAuthenticateEndpoint:
    def test_success(self, client, alice):
        account, profile = alice
        response = authenticate(client)
        assert response.status_code == 200
        data = response.json()
        assert set(data) == {"accessToken", "clientToken", "selectedProfile", "availableProfiles"}
        assert data["selectedProfile"] == {"id": profile.id, "name": "AliceMC"}
        assert data["availableProfiles"] == [{"id": profile.id, "name": "AliceMC"}]

    def test_request_user(self, client, alice):
        account, _ = alice
        response = authenticate(client, requestUser=True)
        assert response.json()["user"] == {
            "id": account.id,
            "username": "alice",
            "properties": [],
        }

    def test_client_token_echoed(self, client, alice):
        response = authenticate(client, clientToken="launcher-1")
        assert response.json()["clientToken"] == "launcher-1"

    def test_wrong_password(self, client, alice):
        response = authenticate(client, password="wrong")
        assert response.status_code == 403
        assert response.json() == {
            "error": "ForbiddenOperationException",
            "errorMessage": "Invalid credentials. Invalid username or password.",
        }

    def test_unknown_user_response_is_identical(self, client, alice):
        wrong_password = authenticate(client, password="wrong")
        unknown_user = authenticate(client, username="mallory")
        assert unknown_user.status_code == wrong_password.status_code
        assert unknown_user.content == wrong_password.content

    def test_missing_credentials(self, client, alice):
        response = client.post("/authserver/authenticate", json={"agent": AGENT})
        assert response.status_code == 400
        assert response.json() == {
            "error": "IllegalArgumentException",
            "errorMessage": "Credentials can not be null.",
        }

    def test_bad_agent(self, client, alice):
        response = authenticate(client, agent={"name": "Minecraft", "version": 2})
        assert response.status_code == 400
        assert response.json() == {
            "error": "IllegalArgumentException",
            "errorMessage": "Invalid agent.",
        }

    def test_missing_agent(self, client, alice):
        response = client.post(
            "/authserver/authenticate",
            json={"username": "alice", "password": "secret1"},
        )
        assert response.status_code == 400
        assert response.json()["error"] == "IllegalArgumentException"

    @pytest.mark.parametrize("version", ["1", True, None])
    def test_version_must_be_the_number_one(self, client, alice, version):
        response = authenticate(client, agent={"name": "Minecraft", "version": version})
        assert response.status_code == 400
        assert response.json() == {
            "error": "IllegalArgumentException",
            "errorMessage": "Invalid agent.",
        }

    def test_malformed_body(self, client, alice):
        response = authenticate(client, agent="Minecraft")
        assert response.status_code == 400
        assert response.json()["error"] == "IllegalArgumentException"

    def test_null_request_user(self, client, alice):
        response = authenticate(client, requestUser=None)
        assert response.status_code == 200
        assert "user" not in response.json()

    def test_no_profiles(self, client, container):
        container.credentials.create("carol", "c@x.com", "secret1")
        response = authenticate(client, username="carol")
        assert response.status_code == 403
        assert response.json()["error"] == "ForbiddenOperationException"


class TestRefreshEndpoint:
    def test_refresh(self, client, alice):
        first = authenticate(client).json()
        response = client.post(
            "/authserver/refresh",
            json={"accessToken": first["accessToken"], "clientToken": first["clientToken"]},
        )
        assert response.status_code == 200
        data = response.json()
        assert data["accessToken"] != first["accessToken"]
        assert data["clientToken"] == first["clientToken"]
        assert data["selectedProfile"] == first["selectedProfile"]
        assert "user" not in data

    def test_refresh_null_request_user(self, client, alice):
        first = authenticate(client).json()
        response = client.post(
            "/authserver/refresh",
            json={
                "accessToken": first["accessToken"],
                "clientToken": first["clientToken"],
                "requestUser": None,
            },
        )
        assert response.status_code == 200
        assert "user" not in response.json()

    def test_refresh_missing_tokens(self, client):
        response = client.post("/authserver/refresh", json={})
        assert response.status_code == 400
        assert response.json()["error"] == "IllegalArgumentException"

    def test_refresh_unknown_token(self, client):
        response = client.post(
            "/authserver/refresh",
            json={"accessToken": "nope", "clientToken": "nope"},
        )
        assert response.status_code == 403
        assert response.json() == {
            "error": "ForbiddenOperationException",
            "errorMessage": "Invalid token.",
        }

    def test_refresh_expired(self, client, alice, clock):
        first = authenticate(client).json()
        clock.advance(3601)
        response = client.post(
            "/authserver/refresh",
            json={"accessToken": first["accessToken"], "clientToken": first["clientToken"]},
        )
        assert response.status_code == 403
        assert response.json()["errorMessage"] == "Token expired."


class TestValidateEndpoint:
    def test_validate(self, client, alice):
        first = authenticate(client).json()
        response = client.post(
            "/authserver/validate",
            json={"accessToken": first["accessToken"], "clientToken": first["clientToken"]},
        )
        assert response.status_code == 204
        assert response.content == b""

    def test_validate_without_token(self, client):
        assert client.post("/authserver/validate", json={}).status_code == 204

    def test_validate_without_body(self, client):
        assert client.post("/authserver/validate").status_code == 204

    def test_validate_unknown(self, client):
        response = client.post("/authserver/validate", json={"accessToken": "nope"})
        assert response.status_code == 403
        assert response.json()["errorMessage"] == "Invalid token."

    def test_validate_expired_then_invalid(self, client, alice, clock):
        token = authenticate(client).json()["accessToken"]
        clock.advance(3601)
        first = client.post("/authserver/validate", json={"accessToken": token})
        second = client.post("/authserver/validate", json={"accessToken": token})
        assert first.json()["errorMessage"] == "Token expired."
        assert second.json()["errorMessage"] == "Invalid token."


class TestInvalidateEndpoint:
    def test_invalidate(self, client, alice):
        token = authenticate(client).json()["accessToken"]
        response = client.post("/authserver/invalidate", json={"accessToken": token})
        assert response.status_code == 204
        response = client.post("/authserver/validate", json={"accessToken": token})
        assert response.status_code == 403

    def test_invalidate_unknown(self, client):
        response = client.post("/authserver/invalidate", json={"accessToken": "nope"})
        assert response.status_code == 204

    def test_invalidate_without_body(self, client):
        assert client.post("/authserver/invalidate").status_code == 204


class TestLoginFlow:
    def test_register_authenticate_refresh_validate(self, client):
        """Old token is rejected after refresh, the new one is accepted."""
        response = client.post(
            "/api/register",
            json={
                "username": "alice",
                "email": "a@x.com",
                "password": "secret1",
                "profileName": "AliceMC",
            },
        )
        assert response.status_code == 201

        first = authenticate(client).json()
        assert first["selectedProfile"]["name"] == "AliceMC"

        refreshed = client.post(
            "/authserver/refresh",
            json={"accessToken": first["accessToken"], "clientToken": first["clientToken"]},
        ).json()

        old = client.post("/authserver/validate", json={"accessToken": first["accessToken"]})
        new = client.post("/authserver/validate", json={"accessToken": refreshed["accessToken"]})
        assert old.status_code == 403
        assert old.json() == {
            "error": "ForbiddenOperationException",
            "errorMessage": "Invalid token.",
        }
        assert new.status_code == 204
