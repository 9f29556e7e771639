"""Reconciliation between ADR documents and GitHub Discussions."""
