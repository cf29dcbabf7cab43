"""Shared value objects."""
from .pagination import PageDirection, PaginationParams

__all__ = [
    "PageDirection",
    "PaginationParams",
]
