"""
Controller for the comments view.

Owns the fetched records, the table state and the load lifecycle. Every
state change goes through the pure transitions in ``core.table`` and is
then persisted synchronously through the repository.
"""

from typing import List, Optional

from loguru import logger

from ..api import APIError, PlaceholderAPIClient
from ..core import table
from ..core.table import TableView
from ..models import CommentRecord, TableViewState
from ..state import ViewStateRepository
from .loading import LoadGeneration


class CommentsController:
    """
    State holder behind the comments page.
    
    Records are fetched once per ``load``; a failed load replaces the table
    with a single error message and is not retried.
    """
    
    def __init__(self, api_client: PlaceholderAPIClient, repository: ViewStateRepository):
        """
        Initialize the controller and restore the persisted table state.
        
        Args:
            api_client: Client used to fetch the comments
            repository: Load/save boundary for the table state
        """
        self.api_client = api_client
        self.repository = repository
        self.state: TableViewState = repository.load()
        self.records: List[CommentRecord] = []
        self.loading = True
        self.error: Optional[str] = None
        self._generation = LoadGeneration()
    
    async def load(self) -> None:
        """
        Fetch the comments and publish them unless a newer load started.
        """
        token = self._generation.begin()
        self.loading = True
        self.error = None
        logger.info("Fetching comments")
        
        try:
            records = await self.api_client.get_comments()
        except APIError as e:
            if not self._generation.is_current(token):
                logger.debug(f"Discarding failure of superseded comments load #{token}")
                return
            logger.error(f"Error fetching comments: {e.message}")
            self.error = e.message
            self.records = []
            self.loading = False
            return
        
        if not self._generation.is_current(token):
            logger.debug(f"Discarding result of superseded comments load #{token}")
            return
        
        self.records = records
        self.loading = False
        logger.info(f"Fetched {len(records)} comments from API")
    
    def cancel(self) -> None:
        """Drop any in-flight load; called when the comments page is left."""
        self._generation.invalidate()
    
    def view(self) -> TableView:
        """Derive the visible page for the current state."""
        return table.derive_table_view(self.records, self.state)
    
    def _apply(self, new_state: TableViewState) -> None:
        if new_state == self.state:
            return
        self.state = new_state
        self.repository.save(new_state)
    
    def search(self, search_text: str) -> None:
        self._apply(table.with_search(self.state, search_text))
    
    def sort_by(self, key: str) -> None:
        """Advance the sort cycle for ``key`` (a column header click)."""
        self._apply(table.cycle_sort(self.state, key))
    
    def set_page_size(self, items_per_page: int) -> None:
        self._apply(table.with_page_size(self.state, items_per_page))
    
    def go_next(self) -> None:
        self._apply(table.next_page(self.state, self.view().total_pages))
    
    def go_prev(self) -> None:
        self._apply(table.prev_page(self.state, self.view().total_pages))
    
    def go_to_page(self, page: int) -> None:
        self._apply(table.with_page(self.state, page, self.view().total_pages))
