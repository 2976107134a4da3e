"""Streamlit rendering for the dashboard pages."""

from .comments_page import render_comments_page
from .navbar import render_navbar
from .profile_page import render_profile_page

__all__ = ["render_comments_page", "render_navbar", "render_profile_page"]
