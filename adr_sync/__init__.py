"""Keeps architecture decision records and GitHub Discussions in sync."""

__version__ = "0.1.0"
