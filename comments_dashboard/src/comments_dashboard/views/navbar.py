"""Header bar with the logo and the user-identity control."""

import streamlit as st

from ..navigation import PROFILE_ROUTE, Router


NAVBAR_USER_NAME = "Erwin Howell"
NAVBAR_USER_INITIALS = "EH"


def render_navbar(router: Router) -> None:
    """Render the header; the user control opens the profile page."""
    logo_col, user_col = st.columns([4, 1])

    with logo_col:
        st.markdown("### 💬 Comments Dashboard")

    with user_col:
        if st.button(f"{NAVBAR_USER_INITIALS} · {NAVBAR_USER_NAME}", key="navbar_user"):
            router.navigate(PROFILE_ROUTE)
            st.rerun()

    st.markdown("---")
