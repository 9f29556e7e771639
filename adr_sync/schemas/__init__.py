"""Pydantic schemas for store records and GitHub event payloads."""
