"""
Route handling for the dashboard shell.

Streamlit has no browser history of its own between reruns, so the router
keeps an explicit stack; ``back`` pops to the previous entry rather than a
fixed route. Callbacks registered with ``on_leave`` run whenever the current
route is left, which is how a page drops its in-flight load.
"""

from typing import Callable, Dict, List

from loguru import logger


COMMENTS_ROUTE = "/"
PROFILE_ROUTE = "/profile"

ROUTES: Dict[str, str] = {
    COMMENTS_ROUTE: "Comments",
    PROFILE_ROUTE: "Profile",
}


class Router:
    """Current route plus the history of routes visited before it."""

    def __init__(self, initial: str = COMMENTS_ROUTE):
        self._check(initial)
        self.current = initial
        self.history: List[str] = []
        self._leave_callbacks: Dict[str, List[Callable[[], None]]] = {}

    @staticmethod
    def _check(route: str) -> None:
        if route not in ROUTES:
            raise ValueError(f"Unknown route: {route!r}")

    def on_leave(self, route: str, callback: Callable[[], None]) -> None:
        """Run ``callback`` every time the router moves away from ``route``."""
        self._check(route)
        self._leave_callbacks.setdefault(route, []).append(callback)

    def _leave(self, route: str) -> None:
        for callback in self._leave_callbacks.get(route, []):
            callback()

    def navigate(self, route: str) -> None:
        """Push the current route and move to ``route``."""
        self._check(route)
        if route == self.current:
            return
        self._leave(self.current)
        self.history.append(self.current)
        self.current = route
        logger.debug(f"Navigated to {route}")

    def back(self) -> str:
        """
        Return to the previous entry.
        
        Falls back to the comments route when there is nothing to go back to.
        """
        previous = self.history.pop() if self.history else COMMENTS_ROUTE
        if previous != self.current:
            self._leave(self.current)
        self.current = previous
        logger.debug(f"Navigated back to {self.current}")
        return self.current

    @property
    def can_go_back(self) -> bool:
        return bool(self.history)
