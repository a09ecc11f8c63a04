"""Tests for prkeeper.models (Repo, LockRecord)."""

import pytest
from pydantic import ValidationError

from prkeeper.models import LockRecord, Repo, VCSHost


class TestRepo:
    """Repo.from_full_name splits owner and name."""

    def test_from_full_name(self) -> None:
        """owner/name is split and hostname kept."""
        repo = Repo.from_full_name("owner/repo", "github.com")
        assert repo.owner == "owner"
        assert repo.name == "repo"
        assert repo.full_name == "owner/repo"
        assert repo.hostname == "github.com"

    @pytest.mark.parametrize("full_name", ["", "owner", "owner/", "/repo", "a/b/c"])
    def test_invalid_full_name_raises(self, full_name: str) -> None:
        """Anything but two non-empty parts is rejected."""
        with pytest.raises(ValueError):
            Repo.from_full_name(full_name, "github.com")


class TestLockRecord:
    """LockRecord fields and helpers."""

    def test_for_project_joins_repo_and_path(self) -> None:
        """project_path is repo full name + "/" + path."""
        record = LockRecord.for_project("owner/repo", "infra/prod", "default", pull_number=3)
        assert record.project_path == "owner/repo/infra/prod"
        assert record.workspace == "default"
        assert record.pull_number == 3

    def test_empty_workspace_rejected(self) -> None:
        """Workspace must be non-empty."""
        with pytest.raises(ValidationError):
            LockRecord(project_path="owner/repo/.", workspace="")


def test_vcs_host_values() -> None:
    """VCSHost is a string enum."""
    assert VCSHost.GITHUB.value == "github"
    assert VCSHost("gitlab") is VCSHost.GITLAB
