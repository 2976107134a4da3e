"""
Controllers for the dashboard views.

This module owns the load lifecycle and state of each page.
"""

from .comments_service import CommentsController
from .profile_service import ProfileController, ProfileView, build_profile_view

__all__ = ["CommentsController", "ProfileController", "ProfileView", "build_profile_view"]
