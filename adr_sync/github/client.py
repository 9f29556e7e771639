"""Sets up the authenticated githubkit client."""

from pathlib import Path
from typing import TypeAlias

import structlog
from githubkit import GitHub
from githubkit.auth import AppInstallationAuthStrategy, TokenAuthStrategy

from adr_sync.configuration.models import GitHubAuthenticationType

logger: structlog.stdlib.BoundLogger = structlog.get_logger(__name__)

GitHubClient: TypeAlias = GitHub[AppInstallationAuthStrategy] | GitHub[TokenAuthStrategy]


async def get_github_app_client(
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
) -> GitHub[AppInstallationAuthStrategy]:
    """Returns a client that acts as a GitHub App installation."""
    if github_app_id is None or github_app_private_key_path is None or github_app_installation_id is None:
        raise RuntimeError("GitHub App authentication requires an app ID, a private key path, and an installation ID.")
    auth = AppInstallationAuthStrategy(
        app_id=github_app_id,
        private_key=Path(github_app_private_key_path).read_text(encoding="utf-8"),
        installation_id=github_app_installation_id,
    )
    # Content is read at explicit refs, so cached responses would be stale after a push
    return GitHub(auth=auth, base_url=github_api_url, http_cache=False)


async def get_github_pat_client(github_pat_token: str | None, github_api_url: str) -> GitHub[TokenAuthStrategy]:
    """Returns a client that authenticates with a token (a PAT or the workflow's GITHUB_TOKEN)."""
    if not github_pat_token:
        raise RuntimeError("Token authentication requires a GitHub token.")
    return GitHub(auth=TokenAuthStrategy(github_pat_token), base_url=github_api_url, http_cache=False)


async def get_github_client(
    github_auth_type: GitHubAuthenticationType,
    github_pat_token: str | None,
    github_app_id: int | None,
    github_app_private_key_path: Path | None,
    github_app_installation_id: int | None,
    github_api_url: str,
) -> GitHubClient:
    """Returns an authenticated client for the configured authentication type.

    `github_api_url` may point at a GitHub Enterprise Server instance.
    """
    logger.debug("Creating authenticated GitHub client", github_api_url=github_api_url, github_auth_type=github_auth_type.value)
    if github_auth_type == GitHubAuthenticationType.APP:
        return await get_github_app_client(github_app_id, github_app_private_key_path, github_app_installation_id, github_api_url)
    return await get_github_pat_client(github_pat_token, github_api_url)
