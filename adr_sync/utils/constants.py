"""Shared constants used across the application."""

# This file is intended to hold shared constants.

import re

# Status and Title Constants
# --------------------------

DEFAULT_STATUS_PATTERN = r"##\s*Status\s+([^\s\n]+?)(?:\s+by\s.*)?\s*(?:\n|$)"
"""Pattern to capture the status token that follows a `## Status` heading."""

DEFAULT_TITLE_PATTERN = r"^\d{4}-[^.]*\.md$"
"""Pattern that discussion titles must match to be treated as ADRs (e.g. 0001-use-adrs.md)."""

DEFAULT_CLOSE_STATUSES = "Accepted, Superseded, Deprecated, Rejected"
"""Comma-separated statuses for which the matching discussion is closed."""

# Link Rewriting Constants
# ------------------------

RELATIVE_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(((?!/|https?://)[^)]+)\)")
"""Pattern to match markdown links to paths relative to the ADR directory."""

ROOT_RELATIVE_LINK_PATTERN = re.compile(r"\[([^\]]+)\]\((/[^)]+)\)")
"""Pattern to match markdown links to paths relative to the repository root."""

GITHUB_BASE_URL = "https://github.com/"
"""Base URL that blob links in discussion bodies are anchored at."""

# Repository Constants
# --------------------

DEFAULT_BRANCH = "main"
"""Branch that ADRs are read from and written to."""

DEFAULT_DISCUSSION_CATEGORY = "General"
"""Discussion category that ADR discussions are created in."""

DEFAULT_ADR_DIR = "doc/adr"
"""ADR directory used when the repository has no .adr-dir file."""

ADR_DIR_FILE = ".adr-dir"
"""File at the repository root that names the ADR directory (adr-tools convention)."""

ADR_FILE_SUFFIX = ".md"
"""Only directory entries with this suffix are synchronized."""

LABEL_DESCRIPTION = "Created by adr-sync"
"""Description attached to every status label this tool creates."""

LABEL_COLOR_MAX = 0xFFFFFF
"""Upper bound of the random label color."""

CREATE_COMMIT_MESSAGE = "docs(adr): create ADR [skip ci]"
"""Commit message used when a discussion creates a new ADR file."""

UPDATE_COMMIT_MESSAGE = "docs(adr): update ADR [skip ci]"
"""Commit message used when a discussion edit updates an ADR file."""

# Pagination Constants
# --------------------

DEFAULT_MAX_PAGES = 100
"""Maximum number of follow-up page requests before pagination is abandoned."""
