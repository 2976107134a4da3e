"""Pure table derivation for the comments view."""

from .table import (
    NO_RESULTS_TEXT,
    TABLE_COLUMNS,
    TableView,
    cycle_sort,
    derive_table_view,
    filter_comments,
    format_item_range,
    format_page_label,
    header_label,
    next_page,
    paginate,
    prev_page,
    sort_comments,
    sort_indicator,
    with_page,
    with_page_size,
    with_search,
)

__all__ = [
    "NO_RESULTS_TEXT",
    "TABLE_COLUMNS",
    "TableView",
    "cycle_sort",
    "derive_table_view",
    "filter_comments",
    "format_item_range",
    "format_page_label",
    "header_label",
    "next_page",
    "paginate",
    "prev_page",
    "sort_comments",
    "sort_indicator",
    "with_page",
    "with_page_size",
    "with_search",
]
