"""Configuration models for the ADR synchronization CLI."""

import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path


class GitHubAuthenticationType(str, Enum):
    """Enum for GitHub authentication types."""

    PAT = "pat"
    APP = "app"


@dataclass
class BaseConfig:
    """Configuration class for the GitHub connection."""

    debug: bool
    github_api_url: str
    github_authentication_type: GitHubAuthenticationType
    github_pat_token: str | None
    github_app_id: int | None
    github_app_private_key_path: Path | None
    github_app_installation_id: int | None
    repo: str


@dataclass
class SyncConfig(BaseConfig):
    """Configuration class for the sync command."""

    event_name: str
    event_path: Path
    branch: str
    discussion_category: str
    status_pattern: re.Pattern[str]
    title_pattern: re.Pattern[str]
    close_statuses: list[str] = field(default_factory=list)
