"""
Comments Dashboard - searchable, sortable comment table and user profile.

This package provides a Streamlit-based dashboard over a remote JSON API,
with client-side filtering, sorting and pagination and persisted table
preferences.
"""

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"
