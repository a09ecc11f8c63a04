"""Tests for prkeeper.events.whitelist (is_allowed, RepoWhitelist)."""

import pytest

from prkeeper.events.whitelist import RepoWhitelist, is_allowed


@pytest.mark.parametrize(
    ("whitelist", "repo_full_name", "hostname", "expected"),
    [
        pytest.param("github.com/owner/repo", "owner/repo", "github.com", True, id="exact match"),
        pytest.param("github.com/owner/repo", "owner/rep", "github.com", False, id="exact does not match shorter"),
        pytest.param("github.com/owner/repo", "owner/repo-longer", "github.com", False, id="exact does not match longer"),
        pytest.param("*", "owner/repo", "github.com", True, id="star matches anything"),
        pytest.param("github.com*", "owner/repo", "github.com", True, id="host prefix matches"),
        pytest.param("github.com*", "owner/repo", "gitlab.com", False, id="host prefix rejects other host"),
        pytest.param("github.com/o*", "owner/repo", "github.com", True, id="org prefix matches"),
        pytest.param("github.com/o*", "somethingelse/repo", "github.com", False, id="org prefix rejects"),
        pytest.param("github.com/owner/rep*", "owner/re", "github.com", False, id="prefix longer than candidate"),
        pytest.param("github.com/owner/rep*", "owner/rep", "github.com", True, id="prefix equal to candidate"),
        pytest.param("github.com/owner/repo*", "owner/repo", "github.com", True, id="prefix matches exact name"),
        pytest.param("github.com/owner/*", "owner/repo", "github.com", True, id="whole org"),
        pytest.param("github.com/owner/*", "otherorg/repo", "github.com", False, id="whole org rejects other org"),
        pytest.param("github.com/owner/repo,*", "otherorg/repo", "github.com", True, id="any star token allows all"),
        pytest.param("github.com/owner/repo,*", "anything/else", "x.com", True, id="star token any host"),
        pytest.param(
            "github.com/owner/repo,github.com/otherorg/repo",
            "otherorg/repo",
            "github.com",
            True,
            id="second exact token",
        ),
    ],
)
def test_is_allowed(whitelist: str, repo_full_name: str, hostname: str, expected: bool) -> None:
    """is_allowed matches hostname/repo against each comma-separated pattern."""
    assert is_allowed(whitelist, repo_full_name, hostname) is expected


def test_empty_whitelist_rejects_everything() -> None:
    """An empty whitelist has no pattern that can match."""
    assert is_allowed("", "owner/repo", "github.com") is False
    assert RepoWhitelist().is_whitelisted("owner/repo", "github.com") is False


def test_tokens_are_not_trimmed() -> None:
    """Whitespace around commas is part of the pattern."""
    assert is_allowed("github.com/a/b, github.com/owner/repo", "owner/repo", "github.com") is False
    assert is_allowed("github.com/a/b, *", "owner/repo", "github.com") is False


def test_prefix_match_is_case_sensitive() -> None:
    """Prefix and exact patterns compare case-sensitively."""
    assert is_allowed("github.com/Owner/*", "owner/repo", "github.com") is False
    assert is_allowed("GitHub.com/owner/repo", "owner/repo", "github.com") is False


def test_repo_whitelist_delegates_to_is_allowed() -> None:
    """RepoWhitelist.is_whitelisted uses the stored whitelist string."""
    whitelist = RepoWhitelist(whitelist="github.com/owner/*,gitlab.com/team/app")
    assert whitelist.is_whitelisted("owner/anything", "github.com")
    assert whitelist.is_whitelisted("team/app", "gitlab.com")
    assert not whitelist.is_whitelisted("team/app", "github.com")
