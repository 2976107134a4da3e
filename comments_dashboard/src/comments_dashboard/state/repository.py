"""
Load/save boundary between ``TableViewState`` and a key-value store.

Each field lives under its own key and is read independently, so a store
holding only some of the keys (or garbage under one of them) still yields a
usable state.
"""

from typing import Optional

from loguru import logger

from ..models import DEFAULT_ITEMS_PER_PAGE, PAGE_SIZE_OPTIONS, SORT_KEYS, TableViewState
from .store import KeyValueStore


SEARCH_KEY = "search"
SORT_KEY_KEY = "sortKey"
SORT_ASC_KEY = "sortAsc"
CURRENT_PAGE_KEY = "currentPage"
ITEMS_PER_PAGE_KEY = "itemsPerPage"


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    try:
        return int(float(raw.strip()))
    except (ValueError, OverflowError):
        return None


class ViewStateRepository:
    """Reads and writes the comment table state snapshot."""

    def __init__(self, store: KeyValueStore, default_page_size: int = DEFAULT_ITEMS_PER_PAGE):
        """
        Args:
            store: Durable key-value storage
            default_page_size: Page size used when none (or an invalid one) is stored
        """
        if default_page_size not in PAGE_SIZE_OPTIONS:
            raise ValueError(
                f"Unsupported default page size {default_page_size}; "
                f"expected one of {PAGE_SIZE_OPTIONS}"
            )
        self.store = store
        self.default_page_size = default_page_size

    def load(self) -> TableViewState:
        """
        Rebuild the state from storage, defaulting each field on its own.
        
        Returns:
            TableViewState: The restored snapshot
        """
        search_text = self.store.get(SEARCH_KEY) or ""

        sort_key = self.store.get(SORT_KEY_KEY) or ""
        if sort_key and sort_key not in SORT_KEYS:
            logger.warning(f"Discarding unknown stored sort key: {sort_key!r}")
            sort_key = ""

        sort_ascending = self.store.get(SORT_ASC_KEY) != "false"

        current_page = _parse_int(self.store.get(CURRENT_PAGE_KEY))
        if current_page is None or current_page < 1:
            current_page = 1

        items_per_page = _parse_int(self.store.get(ITEMS_PER_PAGE_KEY))
        if items_per_page not in PAGE_SIZE_OPTIONS:
            items_per_page = self.default_page_size

        state = TableViewState(
            search_text=search_text,
            sort_key=sort_key,
            sort_ascending=sort_ascending,
            current_page=current_page,
            items_per_page=items_per_page,
        )
        logger.debug(f"Loaded table state: {state}")
        return state

    def save(self, state: TableViewState) -> None:
        """Write every field of ``state`` as a stringified primitive."""
        self.store.set(SEARCH_KEY, state.search_text)
        self.store.set(SORT_KEY_KEY, state.sort_key)
        self.store.set(SORT_ASC_KEY, "true" if state.sort_ascending else "false")
        self.store.set(CURRENT_PAGE_KEY, str(state.current_page))
        self.store.set(ITEMS_PER_PAGE_KEY, str(state.items_per_page))
        logger.debug(f"Saved table state: {state}")
