"""
Streamlit entry point for the comments dashboard.

Two pages behind a shared header:
- Comments table with search, cyclic column sort and pagination
- Read-only profile of a single user
"""

import streamlit as st

from comments_dashboard.api import PlaceholderAPIClient
from comments_dashboard.config import get_settings
from comments_dashboard.navigation import COMMENTS_ROUTE, PROFILE_ROUTE, Router
from comments_dashboard.services import CommentsController, ProfileController
from comments_dashboard.state import JsonFileStore, ViewStateRepository
from comments_dashboard.utils.logging import setup_logging
from comments_dashboard.views import render_comments_page, render_navbar, render_profile_page


def setup_page_config() -> None:
    """Configure Streamlit page settings."""
    st.set_page_config(
        page_title="Comments Dashboard",
        page_icon="💬",
        layout="wide",
        initial_sidebar_state="collapsed"
    )


@st.cache_resource
def get_api_client() -> PlaceholderAPIClient:
    """Get or create API client instance (cached)."""
    settings = get_settings()
    return PlaceholderAPIClient(
        base_url=settings.api_base_url,
        timeout=settings.api_timeout,
        retries=settings.api_retries
    )


@st.cache_resource
def get_state_repository() -> ViewStateRepository:
    """Get or create the table state repository (cached)."""
    settings = get_settings()
    return ViewStateRepository(
        JsonFileStore(settings.state_file),
        default_page_size=settings.default_page_size
    )


def initialize_session_state() -> None:
    """Initialize Streamlit session state variables."""
    if 'comments_controller' not in st.session_state:
        st.session_state.comments_controller = CommentsController(
            get_api_client(), get_state_repository()
        )

    if 'profile_controller' not in st.session_state:
        st.session_state.profile_controller = ProfileController(get_api_client())

    if 'router' not in st.session_state:
        router = Router()
        router.on_leave(COMMENTS_ROUTE, st.session_state.comments_controller.cancel)
        router.on_leave(PROFILE_ROUTE, st.session_state.profile_controller.cancel)
        st.session_state.router = router


def main() -> None:
    """Main dashboard application."""
    setup_page_config()
    setup_logging()
    initialize_session_state()

    router: Router = st.session_state.router
    render_navbar(router)

    if router.current == PROFILE_ROUTE:
        render_profile_page(st.session_state.profile_controller, router)
    elif router.current == COMMENTS_ROUTE:
        render_comments_page(st.session_state.comments_controller)


if __name__ == "__main__":
    main()
