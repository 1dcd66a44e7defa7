"""Test configuration and fixtures."""

import asyncio
from datetime import datetime, timedelta
from uuid import uuid4

import pytest
from fastapi.testclient import TestClient

from social.config import Settings
from social.domain.model import Comment, Post
from social.domain.repository import PostRepository
from social.domain.service import JWTService
from social.domain.value import CommentId, PostId, UserId
from social.interface.api.app import create_app
from social.util.di.container import setup_di
from tests.di import build_test_container


def make_post(
    user_id: UserId | None = None,
    text: str = "Hello world",
    name: str = "Author",
    avatar: str = "https://example.com/author.png",
    created_at: datetime | None = None,
    **overrides,
) -> Post:
    """Build a post with sensible defaults for tests."""
    return Post(
        id=overrides.pop("id", PostId(uuid4())),
        text=text,
        name=name,
        avatar=avatar,
        user_id=user_id or UserId(uuid4()),
        created_at=created_at or datetime(2024, 1, 1, 12, 0, 0),
        **overrides,
    )


def make_comment(
    user_id: UserId | None = None,
    text: str = "Nice post",
    minutes: int = 0,
) -> Comment:
    """Build a comment with sensible defaults for tests."""
    return Comment(
        id=CommentId(uuid4()),
        text=text,
        name="Commenter",
        avatar="",
        user_id=user_id or UserId(uuid4()),
        created_at=datetime(2024, 1, 1, 12, 0, 0) + timedelta(minutes=minutes),
    )


def user_id_of(headers: dict[str, str]) -> str:
    """Return the user id carried by a set of auth headers."""
    jwt_service = JWTService(auth_settings=Settings().auth)
    return str(jwt_service.verify_token(headers["Authorization"]).user_id)


@pytest.fixture
def client():
    """Create test client with test container."""
    app_instance = create_app()
    test_container = build_test_container()
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


@pytest.fixture
def auth_headers():
    """Build Authorization headers for a fresh user.

    Tokens are signed with the settings the app loads.
    """
    jwt_service = JWTService(auth_settings=Settings().auth)

    def _headers(name: str = "Test User", avatar: str = "") -> dict[str, str]:
        token = jwt_service.create_token(str(uuid4()), name=name, avatar=avatar)
        return {"Authorization": f"Bearer {token}"}

    return _headers


@pytest.fixture
def seed_post(client):
    """Store posts straight into the client's repository.

    Lets tests fix ``created_at`` instead of relying on the clock.
    """
    container = client.app.state.dishka_container
    repository = asyncio.run(container.get(PostRepository))

    def _seed(**fields) -> Post:
        return asyncio.run(repository.save(make_post(**fields)))

    return _seed
