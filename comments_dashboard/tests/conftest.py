"""Shared fixtures for the comments dashboard tests."""

from typing import Any, Callable, Dict, List

import httpx
import pytest

from comments_dashboard.api import PlaceholderAPIClient
from comments_dashboard.models import CommentRecord


def _make_comment(index: int, post_id: int = 1, **overrides: Any) -> CommentRecord:
    values = {
        "post_id": post_id,
        "name": f"name {index}",
        "email": f"user{index}@example.com",
        "comment": f"comment body {index}",
    }
    values.update(overrides)
    return CommentRecord(**values)


def _user_payload(user_id: int, name: str) -> Dict[str, Any]:
    first = name.split()[0]
    return {
        "id": user_id,
        "name": name,
        "username": first,
        "email": f"{first}@example.com",
        "phone": "010-692-6593 x09125",
        "website": "anastasia.net",
        "address": {
            "street": "Victor Plains",
            "suite": "Suite 879",
            "city": "Wisokyburgh",
            "zipcode": "90566-7771",
            "geo": {"lat": "-43.9509", "lng": "-34.4618"},
        },
        "company": {"name": "Deckow-Crist", "catchPhrase": "x", "bs": "y"},
    }


@pytest.fixture
def make_comment() -> Callable[..., CommentRecord]:
    return _make_comment


@pytest.fixture
def comments() -> List[CommentRecord]:
    """25 comments spread over 5 posts, in fetch order."""
    return [_make_comment(i, post_id=(i - 1) // 5 + 1) for i in range(1, 26)]


@pytest.fixture
def comments_payload() -> List[Dict[str, Any]]:
    return [
        {
            "postId": (i - 1) // 5 + 1,
            "id": i,
            "name": f"name {i}",
            "email": f"user{i}@example.com",
            "body": f"comment body {i}",
        }
        for i in range(1, 26)
    ]


@pytest.fixture
def users_payload() -> List[Dict[str, Any]]:
    return [
        _user_payload(1, "Leanne Graham"),
        _user_payload(2, "Ervin Howell"),
        _user_payload(3, "Clementine Bauch"),
    ]


@pytest.fixture
def client_for() -> Callable[..., PlaceholderAPIClient]:
    """Build an API client whose requests are answered by a handler function."""

    def build(handler, retries: int = 0) -> PlaceholderAPIClient:
        return PlaceholderAPIClient(
            base_url="http://test-api.com",
            timeout=5,
            retries=retries,
            transport=httpx.MockTransport(handler),
        )

    return build
