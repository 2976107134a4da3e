"""
Table derivation for the comments view.

Everything here is pure: given the fetched records and a ``TableViewState``
the visible page and its pagination metadata are recomputed from scratch
(filter -> sort -> paginate). State transitions return new snapshots and
never touch storage; persisting them is the controller's job.
"""

import math
from dataclasses import dataclass, replace
from functools import lru_cache
from typing import Any, List, Optional, Sequence, Tuple

import pyuca

from ..models import PAGE_SIZE_OPTIONS, SORT_KEYS, CommentRecord, TableViewState


# (state sort key or None for unsortable, column title)
TABLE_COLUMNS: Tuple[Tuple[Optional[str], str], ...] = (
    ("postId", "Post ID"),
    ("name", "Name"),
    ("email", "Email"),
    (None, "Comment"),
)

NO_RESULTS_TEXT = "No results found"


@dataclass(frozen=True)
class TableView:
    """One rendered page of the comments table plus pagination metadata."""

    rows: List[CommentRecord]
    total_items: int
    total_pages: int
    page: int
    items_per_page: int
    range_start: int
    range_end: int

    @property
    def is_empty(self) -> bool:
        return not self.rows

    @property
    def has_prev(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


def filter_comments(records: Sequence[CommentRecord], search_text: str) -> List[CommentRecord]:
    """
    Keep records whose name, email or comment contains the search text.

    Matching is a case-insensitive substring test; empty text keeps everything.

    Args:
        records: Records in fetch order
        search_text: Text typed into the search box

    Returns:
        List[CommentRecord]: Matching records, original order preserved
    """
    if not search_text:
        return list(records)

    needle = search_text.lower()
    return [
        record for record in records
        if needle in record.name.lower()
        or needle in record.email.lower()
        or needle in record.comment.lower()
    ]


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@lru_cache(maxsize=1)
def _collator() -> pyuca.Collator:
    return pyuca.Collator()


def _collation_key(value: Any) -> Tuple[int, Any]:
    """
    Sort key for locale-aware ordering.

    Numbers compare numerically and ahead of strings. Strings use the Unicode
    Collation Algorithm, so punctuation sorts before digits, digits before
    letters, and lowercase ahead of uppercase on ties ("a" < "A" < "b").
    """
    if _is_number(value):
        return (0, value)
    return (1, _collator().sort_key(str(value)))


def sort_comments(
    records: Sequence[CommentRecord],
    sort_key: str,
    ascending: bool = True
) -> List[CommentRecord]:
    """
    Sort records by one of the sortable columns.

    Args:
        records: Records to sort
        sort_key: One of ``SORT_KEYS`` or "" for no sorting
        ascending: Sort direction

    Returns:
        List[CommentRecord]: A new list; descending is the exact reverse of ascending

    Raises:
        ValueError: If the sort key is not sortable
    """
    if not sort_key:
        return list(records)
    if sort_key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {sort_key!r}")

    attribute = SORT_KEYS[sort_key]
    ordered = sorted(records, key=lambda record: _collation_key(getattr(record, attribute)))
    if not ascending:
        ordered.reverse()
    return ordered


def total_pages_for(total_items: int, items_per_page: int) -> int:
    """Number of pages needed for ``total_items`` (0 when there are none)."""
    return math.ceil(total_items / items_per_page)


def effective_page(current_page: int, total_pages: int) -> int:
    """Clamp a stored page into ``[1, max(total_pages, 1)]``."""
    return min(max(current_page, 1), max(total_pages, 1))


def paginate(
    records: Sequence[CommentRecord],
    current_page: int,
    items_per_page: int
) -> List[CommentRecord]:
    """Slice the 1-indexed page window out of ``records``."""
    start = (current_page - 1) * items_per_page
    return list(records[start:start + items_per_page])


def derive_table_view(records: Sequence[CommentRecord], state: TableViewState) -> TableView:
    """
    Run the filter -> sort -> paginate pipeline for the given state.

    The stored page is not required to be in range: it is clamped here so a
    search that narrows the results never yields a blank page past the end.

    Args:
        records: All fetched records
        state: Current table controls

    Returns:
        TableView: Visible rows and pagination metadata
    """
    filtered = filter_comments(records, state.search_text)
    ordered = sort_comments(filtered, state.sort_key, state.sort_ascending)

    total_items = len(ordered)
    total_pages = total_pages_for(total_items, state.items_per_page)
    page = effective_page(state.current_page, total_pages)
    rows = paginate(ordered, page, state.items_per_page)

    range_start = (page - 1) * state.items_per_page + 1 if rows else 0
    range_end = min(page * state.items_per_page, total_items)

    return TableView(
        rows=rows,
        total_items=total_items,
        total_pages=total_pages,
        page=page,
        items_per_page=state.items_per_page,
        range_start=range_start,
        range_end=range_end,
    )


def cycle_sort(state: TableViewState, key: str) -> TableViewState:
    """
    Advance the sort cycle for a column header click.

    Unsorted -> ascending -> descending -> unsorted on the same column;
    a different column always starts at ascending. The page resets to 1.

    Raises:
        ValueError: If the column is not sortable
    """
    if key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key: {key!r}")

    if state.sort_key != key:
        return replace(state, sort_key=key, sort_ascending=True, current_page=1)
    if state.sort_ascending:
        return replace(state, sort_ascending=False, current_page=1)
    # Only the key is cleared; the stored direction is kept
    return replace(state, sort_key="", current_page=1)


def with_search(state: TableViewState, search_text: str) -> TableViewState:
    return replace(state, search_text=search_text, current_page=1)


def with_page_size(state: TableViewState, items_per_page: int) -> TableViewState:
    """
    Change the page size and go back to the first page.

    Raises:
        ValueError: If the size is not one of ``PAGE_SIZE_OPTIONS``
    """
    if items_per_page not in PAGE_SIZE_OPTIONS:
        raise ValueError(
            f"Unsupported page size {items_per_page}; expected one of {PAGE_SIZE_OPTIONS}"
        )
    return replace(state, items_per_page=items_per_page, current_page=1)


def with_page(state: TableViewState, page: int, total_pages: int) -> TableViewState:
    return replace(state, current_page=effective_page(page, total_pages))


def next_page(state: TableViewState, total_pages: int) -> TableViewState:
    return with_page(state, effective_page(state.current_page, total_pages) + 1, total_pages)


def prev_page(state: TableViewState, total_pages: int) -> TableViewState:
    return with_page(state, effective_page(state.current_page, total_pages) - 1, total_pages)


def sort_indicator(state: TableViewState, key: Optional[str]) -> str:
    """Arrow shown next to a column title: "↑", "↓" or ""."""
    if not key or state.sort_key != key:
        return ""
    return "↑" if state.sort_ascending else "↓"


def header_label(state: TableViewState, key: Optional[str], title: str) -> str:
    indicator = sort_indicator(state, key)
    return f"{title} {indicator}" if indicator else title


def format_item_range(view: TableView) -> str:
    """E.g. ``"1-10 of 500 items"``."""
    return f"{view.range_start}-{view.range_end} of {view.total_items} items"


def format_page_label(view: TableView) -> str:
    return f"Page {view.page} of {view.total_pages}"
