"""Configuration loading and reconciliation for the CLI entry point."""
