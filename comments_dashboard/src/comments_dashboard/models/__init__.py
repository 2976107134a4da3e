"""
Models package for the comments dashboard.

Immutable records fetched from the remote API and the table view state.
"""

from .records import (
    DEFAULT_ITEMS_PER_PAGE,
    PAGE_SIZE_OPTIONS,
    SORT_KEYS,
    Address,
    CommentRecord,
    TableViewState,
    UserRecord,
)

__all__ = [
    "DEFAULT_ITEMS_PER_PAGE",
    "PAGE_SIZE_OPTIONS",
    "SORT_KEYS",
    "Address",
    "CommentRecord",
    "TableViewState",
    "UserRecord",
]
