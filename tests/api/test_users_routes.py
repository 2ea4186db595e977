"""
Tests for signup, login and user update endpoints.
"""

import pytest

from jobs_api.auth import hash_password, verify_password


@pytest.fixture
def signed_up(client):
    response = client.post("/api/signup", json={"username": "ann", "password": "s3cret"})
    assert response.status_code == 201
    return response.json()


class TestSignup:

    def test_signup_returns_public_user(self, signed_up, account_repo):
        assert signed_up["username"] == "ann"
        assert signed_up["favorites"] == []
        assert "password_hash" not in signed_up
        assert account_repo.find_by_username("ann")["password_hash"] != "s3cret"

    def test_signup_missing_fields(self, client):
        response = client.post("/api/signup", json={"username": "ann"})
        assert response.status_code == 400
        assert response.json() == {"message": "Please enter username and password"}

    def test_signup_taken(self, client, signed_up):
        response = client.post("/api/signup", json={"username": "ann", "password": "other"})
        assert response.status_code == 409


class TestLogin:

    def test_login(self, client, signed_up):
        response = client.post("/api/login", json={"username": "ann", "password": "s3cret"})
        assert response.status_code == 200
        assert response.json()["id"] == signed_up["id"]

    def test_wrong_password(self, client, signed_up):
        response = client.post("/api/login", json={"username": "ann", "password": "nope"})
        assert response.status_code == 401
        assert response.json() == {"message": "Invalid credentials"}

    def test_unknown_user(self, client):
        response = client.post("/api/login", json={"username": "ghost", "password": "x"})
        assert response.status_code == 401


class TestUpdateUser:

    def test_update_favorites_and_feedback(self, client, signed_up):
        response = client.put("/api/user/ann", json={
            "favorites": ["65f000000000000000000001"],
            "feedback": [{"text": "Great", "rating": 5, "date": "2024-03-01T00:00:00"}],
        })

        assert response.status_code == 200
        body = response.json()
        assert body["favorites"] == ["65f000000000000000000001"]
        assert body["feedback"][0]["text"] == "Great"
        assert body["profilePhoto"] is None

    def test_update_only_sent_fields(self, client, signed_up):
        client.put("/api/user/ann", json={"favorites": ["1"]})
        response = client.put("/api/user/ann", json={"coverPhoto": "file://cover.png"})
        assert response.json()["favorites"] == ["1"]
        assert response.json()["coverPhoto"] == "file://cover.png"

    def test_update_invalid_rating(self, client, signed_up):
        response = client.put("/api/user/ann", json={"feedback": [{"text": "x", "rating": 9}]})
        assert response.status_code == 400

    @pytest.mark.parametrize("field", ["favorites", "feedback"])
    def test_update_rejects_null_list(self, client, signed_up, account_repo, field):
        client.put("/api/user/ann", json={"favorites": ["1"]})

        response = client.put("/api/user/ann", json={field: None})

        assert response.status_code == 400
        assert account_repo.find_by_username("ann")["favorites"] == ["1"]
        assert account_repo.find_by_username("ann")["feedback"] == []
        login = client.post("/api/login", json={"username": "ann", "password": "s3cret"})
        assert login.status_code == 200
        assert login.json()["favorites"] == ["1"]

    def test_update_clears_photo_with_null(self, client, signed_up):
        client.put("/api/user/ann", json={"profilePhoto": "file://me.png"})
        response = client.put("/api/user/ann", json={"profilePhoto": None})
        assert response.status_code == 200
        assert response.json()["profilePhoto"] is None

    def test_update_unknown_user(self, client):
        response = client.put("/api/user/ghost", json={"favorites": []})
        assert response.status_code == 404
        assert response.json() == {"message": "User not found"}


class TestPasswordHashing:

    def test_round_trip(self):
        encoded = hash_password("s3cret")
        assert verify_password("s3cret", encoded)
        assert not verify_password("other", encoded)

    def test_salted(self):
        assert hash_password("s3cret") != hash_password("s3cret")

    def test_malformed_hash(self):
        assert not verify_password("s3cret", "plain")
