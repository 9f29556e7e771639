"""General utility functions for ADR content, authorship, and labels."""

import math
import posixpath
import random
import re
from urllib.parse import quote, urljoin

from adr_sync.schemas.models import Actor, CommitAuthor
from adr_sync.utils.constants import LABEL_COLOR_MAX, RELATIVE_LINK_PATTERN, ROOT_RELATIVE_LINK_PATTERN


def extract_status(content: str, pattern: re.Pattern[str]) -> str | None:
    """Extract the status token from ADR content using the first match of the pattern.

    Returns None if the pattern does not match or the captured status is blank.
    """
    match = pattern.search(content)
    if match is None:
        return None
    status = (match.group(1) or "").strip()
    return status or None


def _resolve_link(base_url: str, path: str) -> str:
    """Resolve a repository path against `base_url`, percent-encoding characters not allowed in URLs."""
    if not path:
        return base_url
    resolved = posixpath.normpath(path)
    if path.endswith("/") and not resolved.endswith("/"):
        resolved += "/"
    return urljoin(base_url, quote(resolved, safe="/#?=&%"))


def replace_links(content: str, base_url: str, adr_dir: str) -> str:
    """Rewrite relative and root-relative markdown links into absolute URLs.

    Links relative to the ADR directory resolve against `base_url/adr_dir`,
    links starting with `/` resolve against `base_url`, and absolute URLs are
    left alone.
    """

    def _replace_relative(match: re.Match[str]) -> str:
        text, path = match.group(1), match.group(2)
        return f"[{text}]({_resolve_link(base_url, posixpath.join(adr_dir, path))})"

    def _replace_root_relative(match: re.Match[str]) -> str:
        text, path = match.group(1), match.group(2)
        return f"[{text}]({_resolve_link(base_url, path[1:])})"

    content = RELATIVE_LINK_PATTERN.sub(_replace_relative, content)
    return ROOT_RELATIVE_LINK_PATTERN.sub(_replace_root_relative, content)


def generate_author(actor: Actor | None, commit_author: CommitAuthor | None) -> str | None:
    """Generate a human-readable author, preferring a GitHub login over the git identity."""
    if actor is not None and actor.login:
        return f"@{actor.login}"
    if commit_author is not None and commit_author.name and commit_author.email:
        return f"{commit_author.name} <{commit_author.email}>"
    if commit_author is not None and commit_author.name:
        return commit_author.name
    return None


def generate_comment(author: str | None, url: str | None) -> str | None:
    """Generate the discussion comment that credits an ADR's author and commit."""
    sentences: list[str] = []
    if author:
        sentences.append(f"This ADR was authored by {author}.")
    if url:
        sentences.append(f"You can view the commit [here]({url}).")
    if not sentences:
        return None
    return " ".join(sentences)


def random_color() -> str:
    """Generate a random 6-digit lower-case hex color for a new label."""
    return f"{math.floor(random.random() * LABEL_COLOR_MAX):06x}"
