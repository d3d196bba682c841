"""Tests for password hashing and the account routes."""

import pytest

from core.security import check_password, hash_password


class TestSecurity:
    def test_hash_and_check(self):
        hashed = hash_password("s3cret")
        assert hashed != "s3cret"
        assert check_password("s3cret", hashed)
        assert not check_password("wrong", hashed)

    @pytest.mark.parametrize("password", ["", None])
    def test_invalid_password(self, password):
        with pytest.raises(ValueError):
            hash_password(password)

    def test_check_requires_both_values(self):
        with pytest.raises(ValueError):
            check_password("s3cret", "")


class TestAuthRoutes:
    def register(self, client, username="coach", password="s3cret"):
        return client.post("/v1/internal/auth/register", json={"username": username, "password": password})

    def test_register_and_login(self, client):
        created = self.register(client).json()
        assert created["status"] == "success"
        assert created["data"]["username"] == "coach"

        login = client.post("/v1/internal/auth/login", json={"username": "coach", "password": "s3cret"}).json()
        assert login["status"] == "success"
        assert login["data"]["id"] == created["data"]["id"]

    def test_duplicate_username(self, client):
        self.register(client)
        body = self.register(client).json()
        assert body["status"] == "conflict"
        assert body["error_code"] == "USERNAME_ALREADY_EXISTS"

    def test_wrong_password(self, client):
        self.register(client)
        body = client.post("/v1/internal/auth/login", json={"username": "coach", "password": "nope"}).json()
        assert body["status"] == "authentication_error"
        assert body["error_code"] == "INVALID_PASSWORD"

    def test_unknown_user(self, client):
        body = client.post("/v1/internal/auth/login", json={"username": "ghost", "password": "x"}).json()
        assert body["error_code"] == "USER_NOT_FOUND"

    def test_empty_password_rejected(self, client):
        assert self.register(client, password="").status_code == 422
