"""End-to-end tests for post endpoints."""

import pytest
from fastapi.testclient import TestClient

from qafeed.config import Settings
from qafeed.interface.api.app import create_app
from qafeed.util.di.container import setup_di
from qafeed.util.jwt import create_token
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def login():
    """Return a function that makes auth headers for a user ID."""
    auth_settings = Settings().auth

    def _login(user_id: int) -> dict[str, str]:
        token = create_token(user_id, auth_settings)
        return {"Authorization": f"Bearer {token}"}

    return _login


def _create_post(client, headers, question="Why?", answer="Because.") -> dict:
    response = client.post(
        "/posts", json={"question": question, "answer": answer}, headers=headers
    )
    assert response.status_code == 201
    return response.json()["post"]


class TestAuthentication:
    """Every feed endpoint requires a valid credential."""

    @pytest.mark.parametrize(
        "method,path",
        [
            ("get", "/posts"),
            ("get", "/posts/me"),
            ("get", "/posts/1"),
            ("get", "/posts/user/7"),
            ("get", "/posts/liked/7"),
            ("delete", "/posts/1"),
            ("post", "/posts/1/likes"),
        ],
    )
    def test_missing_token_is_unauthorized(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 401

    def test_invalid_token_is_unauthorized(self, client):
        client.cookies.set("auth_token", "invalid-token")

        response = client.get("/posts")

        assert response.status_code == 401

    def test_invalid_bearer_token_is_unauthorized(self, client):
        response = client.get("/posts", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401

    def test_cookie_is_accepted(self, client):
        client.cookies.set("auth_token", create_token(7, Settings().auth))

        response = client.get("/posts/me")

        assert response.status_code == 200

    def test_bearer_header_wins_over_cookie(self, client, login):
        # Arrange
        client.cookies.set("auth_token", create_token(7, Settings().auth))
        _create_post(client, login(9))

        # Act
        response = client.get("/posts/me", headers=login(9))

        # Assert
        assert [p["author_id"] for p in response.json()["posts"]] == [9]

    def test_response_carries_renewed_token(self, client, login):
        response = client.get("/posts", headers=login(7))

        body = response.json()
        assert body["token"]
        assert response.cookies.get("auth_token") == body["token"]


class TestPostLifecycle:
    """Create, read, update and delete through the API."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_create_and_get_post(self, client, login):
        # Arrange
        created = _create_post(client, login(7))

        # Act
        response = client.get(f"/posts/{created['id']}", headers=login(42))

        # Assert
        assert response.status_code == 200
        post = response.json()["post"]
        assert post["question"] == "Why?"
        assert post["author_id"] == 7
        assert post["author"]["display_name"] == "Unknown"
        assert post["comments"] == []
        assert post["like_count"] == 0
        assert post["liked"] is False
        assert post["created_at"].endswith("Z")

    def test_missing_post_is_not_found(self, client, login):
        response = client.get("/posts/404", headers=login(7))

        assert response.status_code == 404

    def test_blank_question_is_bad_request(self, client, login):
        response = client.post(
            "/posts", json={"question": "  ", "answer": "A."}, headers=login(7)
        )

        assert response.status_code == 400
        assert response.json()["detail"]["field"] == "question"

    def test_listings(self, client, login):
        # Arrange
        first = _create_post(client, login(7), question="First?")
        second = _create_post(client, login(9), question="Second?")
        client.post(f"/posts/{first['id']}/likes", headers=login(9))

        # Act
        all_posts = client.get("/posts", headers=login(7)).json()["posts"]
        mine = client.get("/posts/me", headers=login(7)).json()["posts"]
        by_nine = client.get("/posts/user/9", headers=login(7)).json()["posts"]
        liked = client.get("/posts/liked/9", headers=login(7)).json()["posts"]

        # Assert
        assert [p["id"] for p in all_posts] == [second["id"], first["id"]]
        assert [p["id"] for p in mine] == [first["id"]]
        assert [p["id"] for p in by_nine] == [second["id"]]
        assert [p["id"] for p in liked] == [first["id"]]
        assert liked[0]["like_count"] == 1
        assert liked[0]["liked"] is False

    def test_owner_partial_update(self, client, login):
        created = _create_post(client, login(7), question="Q?", answer="A.")

        response = client.patch(
            f"/posts/{created['id']}", json={"answer": "new"}, headers=login(7)
        )

        assert response.status_code == 200
        assert response.json()["post"]["answer"] == "new"
        assert response.json()["post"]["question"] == "Q?"

    def test_blank_update_is_bad_request(self, client, login):
        created = _create_post(client, login(7))

        response = client.patch(
            f"/posts/{created['id']}", json={"question": "   "}, headers=login(7)
        )

        assert response.status_code == 400

    def test_non_owner_update_is_forbidden(self, client, login):
        created = _create_post(client, login(7))

        response = client.patch(
            f"/posts/{created['id']}", json={"answer": "mine now"}, headers=login(9)
        )

        assert response.status_code == 403

    def test_non_owner_delete_is_forbidden(self, client, login):
        created = _create_post(client, login(7))

        response = client.delete(f"/posts/{created['id']}", headers=login(9))

        assert response.status_code == 403

    def test_owner_delete(self, client, login):
        created = _create_post(client, login(7))
        client.post(f"/posts/{created['id']}/likes", headers=login(9))
        client.post(
            f"/posts/{created['id']}/comments",
            json={"content": "nice"},
            headers=login(9),
        )

        response = client.delete(f"/posts/{created['id']}", headers=login(7))

        assert response.status_code == 200
        assert response.json()["comments_deleted"] == 1
        assert response.json()["likes_deleted"] == 1
        assert client.get(f"/posts/{created['id']}", headers=login(7)).status_code == 404
