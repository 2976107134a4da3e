"""
Unit tests for the dashboard Router.
"""

import pytest
from unittest.mock import Mock

from comments_dashboard.navigation import COMMENTS_ROUTE, PROFILE_ROUTE, Router


class TestRouter:
    """Test cases for Router."""

    def test_starts_on_comments(self):
        router = Router()
        assert router.current == COMMENTS_ROUTE
        assert not router.can_go_back

    def test_back_returns_to_previous_entry(self):
        router = Router()
        router.navigate(PROFILE_ROUTE)

        assert router.current == PROFILE_ROUTE
        assert router.back() == COMMENTS_ROUTE
        assert router.current == COMMENTS_ROUTE

    def test_back_from_deep_link_profile(self):
        router = Router(initial=PROFILE_ROUTE)

        assert router.back() == COMMENTS_ROUTE

    def test_back_uses_history_not_fixed_route(self):
        router = Router(initial=PROFILE_ROUTE)
        router.navigate(COMMENTS_ROUTE)
        router.navigate(PROFILE_ROUTE)

        assert router.back() == COMMENTS_ROUTE
        assert router.back() == PROFILE_ROUTE

    def test_navigating_to_current_route_adds_no_history(self):
        router = Router()
        router.navigate(COMMENTS_ROUTE)
        assert router.history == []

    def test_unknown_route_rejected(self):
        with pytest.raises(ValueError):
            Router().navigate("/settings")
        with pytest.raises(ValueError):
            Router(initial="/nowhere")

    def test_leave_callbacks_fire_when_route_changes(self):
        router = Router()
        leave_comments = Mock()
        leave_profile = Mock()
        router.on_leave(COMMENTS_ROUTE, leave_comments)
        router.on_leave(PROFILE_ROUTE, leave_profile)

        router.navigate(PROFILE_ROUTE)
        leave_comments.assert_called_once()
        leave_profile.assert_not_called()

        router.back()
        leave_profile.assert_called_once()
        assert leave_comments.call_count == 1

    def test_leave_callbacks_skip_when_route_is_unchanged(self):
        router = Router()
        leave_comments = Mock()
        router.on_leave(COMMENTS_ROUTE, leave_comments)

        router.navigate(COMMENTS_ROUTE)
        router.back()

        leave_comments.assert_not_called()

    def test_leave_callback_for_unknown_route_rejected(self):
        with pytest.raises(ValueError):
            Router().on_leave("/settings", Mock())
