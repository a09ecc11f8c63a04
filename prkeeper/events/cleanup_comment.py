"""Summary comment posted after a closed pull request's locks are released."""

from typing import Dict, Iterable, List

from prkeeper.models import LockRecord

HEADER = "Locks and plans deleted for the projects and workspaces modified in this pull request:"


def _workspaces_by_path(locks: Iterable[LockRecord]) -> Dict[str, List[str]]:
    """Group workspace names by project path, keeping first-seen order."""
    grouped: Dict[str, List[str]] = {}
    for lock in locks:
        grouped.setdefault(lock.project_path, []).append(lock.workspace)
    return grouped


def _project_line(path: str, workspaces: List[str]) -> str:
    names = ", ".join(f"`{w}`" for w in workspaces)
    label = "workspace" if len(workspaces) == 1 else "workspaces"
    return f"- path: `{path}` {label}: {names}"


def format_cleanup_comment(locks: Iterable[LockRecord]) -> str:
    """Render released locks as a comment body.

    One bullet per project path, paths sorted so the text does not depend
    on the order locks were released in. Workspaces keep their order.

    Example:
        Locks and plans deleted for the projects and workspaces modified in this pull request:

        - path: `o/r/proj1` workspaces: `default`, `staging`
        - path: `o/r/proj2` workspace: `default`
    """
    grouped = _workspaces_by_path(locks)
    lines = [_project_line(path, grouped[path]) for path in sorted(grouped)]
    return HEADER + "\n\n" + "\n".join(lines)
