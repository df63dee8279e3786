"""User queries."""

from .search_users import SearchUsersQuery, SearchUsersHandler

__all__ = ["SearchUsersQuery", "SearchUsersHandler"]
