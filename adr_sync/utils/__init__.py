"""Utility modules for shared functionality."""

from .helpers import extract_status, generate_author, generate_comment, random_color, replace_links

__all__ = [
    "extract_status",
    "generate_author",
    "generate_comment",
    "random_color",
    "replace_links",
]
