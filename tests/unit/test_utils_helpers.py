"""Unit tests for utility helper functions: status, links, authorship, and label colors."""

import re
from unittest.mock import patch

import pytest

from adr_sync.schemas.models import Actor, CommitAuthor
from adr_sync.utils.constants import DEFAULT_STATUS_PATTERN
from adr_sync.utils.helpers import extract_status, generate_author, generate_comment, random_color, replace_links

STATUS_PATTERN = re.compile(DEFAULT_STATUS_PATTERN)
BASE_URL = "https://github.com/owner/repo/blob/main/"


@pytest.mark.parametrize(
    "content,expected",
    [
        pytest.param("# 1. Title\n\n## Status\nAccepted\n", "Accepted", id="status-line"),
        pytest.param("## Status\n\nProposed\n\n## Context\n", "Proposed", id="blank-line-before-status"),
        pytest.param("## Status\nAccepted by @someone\n", "Accepted", id="trailing-by-annotation"),
        pytest.param("##   Status   \n   Superseded   \n", "Superseded", id="surrounding-whitespace"),
        pytest.param("## Status\nDeprecated", "Deprecated", id="no-trailing-newline"),
        pytest.param("## Status\n\n", None, id="empty-status"),
        pytest.param("# 1. Title\n\n## Context\nSomething\n", None, id="no-status-section"),
        pytest.param("", None, id="empty-content"),
        pytest.param("## Status\nAccepted\n\n## Appendix\n## Status\nRejected\n", "Accepted", id="first-match-wins"),
    ],
)
def test_extract_status(content: str, expected: str | None) -> None:
    """Test extract_status with the default status pattern."""
    assert extract_status(content, STATUS_PATTERN) == expected


def test_extract_status_blank_group_is_none() -> None:
    """Test that a match whose captured group is only whitespace yields None."""
    pattern = re.compile(r"Status:(.*)")
    assert extract_status("Status:    \n", pattern) is None


@pytest.mark.parametrize(
    "content,adr_dir,expected",
    [
        pytest.param(
            "See [x](./0004-foo.md).",
            "docs/adr",
            "See [x](https://github.com/owner/repo/blob/main/docs/adr/0004-foo.md).",
            id="relative-dot",
        ),
        pytest.param(
            "See [x](0004-foo.md).",
            "docs/adr",
            "See [x](https://github.com/owner/repo/blob/main/docs/adr/0004-foo.md).",
            id="relative-bare",
        ),
        pytest.param(
            "See [the guide](../guide.md).",
            "docs/adr",
            "See [the guide](https://github.com/owner/repo/blob/main/docs/guide.md).",
            id="relative-parent",
        ),
        pytest.param(
            "See [readme](/README.md).",
            "docs/adr",
            "See [readme](https://github.com/owner/repo/blob/main/README.md).",
            id="root-relative",
        ),
        pytest.param(
            "See [site](https://example.com/page) and [plain](http://example.com).",
            "docs/adr",
            "See [site](https://example.com/page) and [plain](http://example.com).",
            id="absolute-untouched",
        ),
        pytest.param("No links here.\n", "docs/adr", "No links here.\n", id="no-links"),
        pytest.param(
            "See [y](./sub/) and [root](/docs/).",
            "docs/adr",
            "See [y](https://github.com/owner/repo/blob/main/docs/adr/sub/) and [root](https://github.com/owner/repo/blob/main/docs/).",
            id="trailing-slash-kept",
        ),
        pytest.param(
            "See [x](my file.md) and [z](/notes/a b.md).",
            "docs/adr",
            "See [x](https://github.com/owner/repo/blob/main/docs/adr/my%20file.md) and "
            "[z](https://github.com/owner/repo/blob/main/notes/a%20b.md).",
            id="spaces-percent-encoded",
        ),
        pytest.param(
            "See [s](0002-next.md#context) and [e](already%20encoded.md).",
            "docs/adr",
            "See [s](https://github.com/owner/repo/blob/main/docs/adr/0002-next.md#context) and "
            "[e](https://github.com/owner/repo/blob/main/docs/adr/already%20encoded.md).",
            id="fragment-and-encoded-kept",
        ),
    ],
)
def test_replace_links(content: str, adr_dir: str, expected: str) -> None:
    """Test replace_links for relative, root-relative, and absolute links."""
    assert replace_links(content, BASE_URL, adr_dir) == expected


def test_replace_links_rewrites_every_link_and_keeps_text() -> None:
    """Test that all links in a document are rewritten while other text is preserved."""
    content = "# Title\n\n[a](a.md), [b](/b.md) and [c](https://c.example)\n"
    expected = (
        "# Title\n\n"
        "[a](https://github.com/owner/repo/blob/main/doc/adr/a.md), "
        "[b](https://github.com/owner/repo/blob/main/b.md) and [c](https://c.example)\n"
    )
    assert replace_links(content, BASE_URL, "doc/adr") == expected


@pytest.mark.parametrize(
    "actor,commit_author,expected",
    [
        pytest.param(Actor(login="octocat"), CommitAuthor(name="Octo Cat", email="octo@example.com"), "@octocat", id="login-wins"),
        pytest.param(None, CommitAuthor(name="Octo Cat", email="octo@example.com"), "Octo Cat <octo@example.com>", id="name-and-email"),
        pytest.param(None, CommitAuthor(name="Octo Cat"), "Octo Cat", id="name-only"),
        pytest.param(None, CommitAuthor(email="octo@example.com"), None, id="email-only"),
        pytest.param(None, None, None, id="nothing"),
    ],
)
def test_generate_author(actor: Actor | None, commit_author: CommitAuthor | None, expected: str | None) -> None:
    """Test generate_author precedence."""
    assert generate_author(actor, commit_author) == expected


@pytest.mark.parametrize(
    "author,url,expected",
    [
        pytest.param("A", "U", "This ADR was authored by A. You can view the commit [here](U).", id="author-and-url"),
        pytest.param("A", None, "This ADR was authored by A.", id="author-only"),
        pytest.param(None, "U", "You can view the commit [here](U).", id="url-only"),
        pytest.param(None, None, None, id="nothing"),
    ],
)
def test_generate_comment(author: str | None, url: str | None, expected: str | None) -> None:
    """Test generate_comment composition."""
    assert generate_comment(author, url) == expected


def test_random_color_format() -> None:
    """Test that random_color always yields six lower-case hex digits."""
    for _ in range(200):
        assert re.fullmatch(r"[0-9a-f]{6}", random_color())


@pytest.mark.parametrize(
    "random_value,expected",
    [
        pytest.param(0.0, "000000", id="minimum"),
        pytest.param(1.0, "ffffff", id="maximum"),
        pytest.param(0.5, "7fffff", id="middle"),
    ],
)
def test_random_color_bounds(random_value: float, expected: str) -> None:
    """Test random_color at the bounds of the random source."""
    with patch("adr_sync.utils.helpers.random.random", return_value=random_value):
        assert random_color() == expected
