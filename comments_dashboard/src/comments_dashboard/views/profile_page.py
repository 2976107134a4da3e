"""Read-only profile page."""

import asyncio

import streamlit as st

from ..navigation import Router
from ..services import ProfileController


def render_profile_page(controller: ProfileController, router: Router) -> None:
    """Render the selected user's details as disabled inputs."""
    if controller.loading:
        with st.spinner("Loading..."):
            asyncio.run(controller.load())

    if st.button("← Back", key="profile_back"):
        router.back()
        st.rerun()

    if controller.error:
        st.error(controller.error)
        return

    profile = controller.profile()
    if profile is None:
        st.write("Loading...")
        return

    st.subheader(profile.welcome_text)

    avatar_col, info_col = st.columns([1, 5])
    with avatar_col:
        st.markdown(f"## {profile.initials}")
    with info_col:
        st.markdown(f"**{profile.name}**")
        st.caption(profile.email)

    columns = st.columns(2)
    for position, (label, value) in enumerate(profile.fields):
        with columns[position % 2]:
            st.text_input(label, value=value, disabled=True, key=f"profile_{label}")
