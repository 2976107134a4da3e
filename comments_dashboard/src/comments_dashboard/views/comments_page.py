"""
Comments table page.

The frame/HTML builders are plain functions so the table content can be
checked without a running Streamlit session.
"""

import asyncio
import html
from typing import Optional

import pandas as pd
import streamlit as st

from ..core import table
from ..core.table import NO_RESULTS_TEXT, TABLE_COLUMNS, TableView
from ..models import PAGE_SIZE_OPTIONS, TableViewState
from ..services import CommentsController


TABLE_CAPTION = "A list of your comments."
SEARCH_PLACEHOLDER = "Search name, email, comment"
SEARCH_INPUT_KEY = "comments_search"
COMMENT_PREVIEW_LENGTH = 100

SORT_BUTTONS = (
    ("postId", "Sort Post ID"),
    ("name", "Sort Name"),
    ("email", "Sort Email"),
)


def truncate_text(text: str, limit: int = COMMENT_PREVIEW_LENGTH) -> str:
    return text[:limit] + "..." if len(text) > limit else text


def build_page_frame(view: TableView, state: TableViewState) -> pd.DataFrame:
    """
    Build the visible page as a DataFrame whose headers carry sort arrows.
    
    Args:
        view: Derived table view
        state: State used to derive ``view``
        
    Returns:
        DataFrame with one row per visible comment
    """
    columns = [table.header_label(state, key, title) for key, title in TABLE_COLUMNS]
    rows = [
        [record.post_id, record.name, record.email, truncate_text(record.comment)]
        for record in view.rows
    ]
    return pd.DataFrame(rows, columns=columns)


def render_empty_table_html(state: TableViewState) -> str:
    """HTML table whose body is a single "No results found" row spanning every column."""
    headers = "".join(
        f"<th>{html.escape(table.header_label(state, key, title))}</th>"
        for key, title in TABLE_COLUMNS
    )
    return (
        "<table style=\"width:100%\">"
        f"<caption>{html.escape(TABLE_CAPTION)}</caption>"
        f"<thead><tr>{headers}</tr></thead>"
        f"<tbody><tr><td colspan=\"{len(TABLE_COLUMNS)}\" style=\"text-align:center\">"
        f"{NO_RESULTS_TEXT}</td></tr></tbody>"
        "</table>"
    )


def sort_button_label(state: TableViewState, key: str, label: str) -> str:
    indicator = table.sort_indicator(state, key)
    return f"{label} {indicator}" if indicator else label


def _render_controls(controller: CommentsController) -> bool:
    """Sort buttons and search box; returns True when a rerun is needed."""
    columns = st.columns([1, 1, 1, 3])

    for column, (key, label) in zip(columns, SORT_BUTTONS):
        with column:
            if st.button(sort_button_label(controller.state, key, label), key=f"sort_{key}"):
                controller.sort_by(key)
                return True

    if SEARCH_INPUT_KEY not in st.session_state:
        st.session_state[SEARCH_INPUT_KEY] = controller.state.search_text

    with columns[-1]:
        search_text = st.text_input(
            "Search",
            key=SEARCH_INPUT_KEY,
            placeholder=SEARCH_PLACEHOLDER,
            label_visibility="collapsed",
        )
    if search_text != controller.state.search_text:
        controller.search(search_text)
    return False


def _render_pagination(controller: CommentsController, view: TableView) -> bool:
    """Range text, prev/next and the page-size selector; returns True when a rerun is needed."""
    range_col, prev_col, label_col, next_col, size_col = st.columns([3, 1, 2, 1, 2])

    with range_col:
        st.markdown(f"**{table.format_item_range(view)}**")

    with prev_col:
        if st.button("Prev", disabled=not view.has_prev, key="page_prev"):
            controller.go_prev()
            return True

    with label_col:
        st.markdown(table.format_page_label(view))

    with next_col:
        if st.button("Next", disabled=not view.has_next, key="page_next"):
            controller.go_next()
            return True

    with size_col:
        items_per_page: Optional[int] = st.selectbox(
            "Items per page",
            options=list(PAGE_SIZE_OPTIONS),
            index=PAGE_SIZE_OPTIONS.index(controller.state.items_per_page),
            format_func=lambda n: f"{n} / Page",
            label_visibility="collapsed",
        )
    if items_per_page is not None and items_per_page != controller.state.items_per_page:
        controller.set_page_size(items_per_page)
        return True
    return False


def render_comments_page(controller: CommentsController) -> None:
    """Render the comments table, loading the records on first display."""
    if controller.loading:
        with st.spinner("Loading..."):
            asyncio.run(controller.load())

    if controller.error:
        st.error(controller.error)
        return

    if _render_controls(controller):
        st.rerun()

    view = controller.view()
    if view.is_empty:
        st.markdown(render_empty_table_html(controller.state), unsafe_allow_html=True)
    else:
        st.dataframe(build_page_frame(view, controller.state), width="stretch", hide_index=True)
        st.caption(TABLE_CAPTION)

    if _render_pagination(controller, view):
        st.rerun()
