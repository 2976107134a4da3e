"""
Domain records and view state for the comments dashboard.

Records are plain frozen dataclasses; validation of the raw API payloads
happens in the API client before these are constructed.
"""

from dataclasses import dataclass
from typing import Dict, Tuple


# Sort key values are stored verbatim, so they keep the API field names.
SORT_KEYS: Dict[str, str] = {
    "postId": "post_id",
    "name": "name",
    "email": "email",
}

PAGE_SIZE_OPTIONS: Tuple[int, ...] = (5, 10, 20, 50)
DEFAULT_ITEMS_PER_PAGE = 10


@dataclass(frozen=True)
class CommentRecord:
    """A single comment row as shown in the table."""

    post_id: int
    name: str
    email: str
    comment: str


@dataclass(frozen=True)
class Address:
    """Postal address of a user."""

    street: str
    suite: str
    city: str
    zipcode: str


@dataclass(frozen=True)
class UserRecord:
    """A user as shown on the profile page."""

    id: int
    name: str
    username: str
    email: str
    phone: str
    address: Address


@dataclass(frozen=True)
class TableViewState:
    """
    Snapshot of the comment table controls.
    
    An empty ``sort_key`` means unsorted. ``current_page`` is 1-based.
    """

    search_text: str = ""
    sort_key: str = ""
    sort_ascending: bool = True
    current_page: int = 1
    items_per_page: int = DEFAULT_ITEMS_PER_PAGE
