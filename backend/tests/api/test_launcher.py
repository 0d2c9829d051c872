"""Tests for the launcher endpoints."""

import pytest


class TestUserProfileEndpoint:
    def test_user_profile(self, client, alice):
        account, profile = alice
        response = client.get("/launcher/user/profile/alice")
        assert response.status_code == 200
        assert response.json() == {
            "id": account.id,
            "username": "alice",
            "name": "alice",
            "skins": [],
            "capes": [],
            "profiles": [
                {"id": profile.id, "name": "AliceMC", "skins": [], "capes": []},
            ],
        }

    def test_user_without_profiles(self, client, container):
        container.credentials.create("carol", "c@x.com", "secret1")
        response = client.get("/launcher/user/profile/carol")
        assert response.status_code == 200
        assert response.json()["profiles"] == []

    def test_unknown_user(self, client):
        response = client.get("/launcher/user/profile/mallory")
        assert response.status_code == 404
        data = response.json()
        assert data["error"] == "USER_NOT_FOUND"
        assert data["message"] == "User not found."
