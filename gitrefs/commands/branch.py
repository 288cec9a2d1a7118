"""Branch commands - create and delete branches."""

from __future__ import annotations

import sys

from gitrefs.config import GitConfig
from gitrefs.domain.reference import DeleteBranchOptions
from gitrefs.infrastructure.git.runner import GitCommandError
from gitrefs.services.references import ReferenceService


def cmd_create_branch(name: str, base: str, repo_path: str, config: GitConfig) -> int:
    """Create refs/heads/<name> pointing at base.

    Returns:
        Exit code (0 for success, 1 if git rejected the update)
    """
    service = ReferenceService(repo_path=repo_path, runner=config.create_runner())
    try:
        service.create_branch(name, base)
    except GitCommandError as e:
        print(f"Error creating branch {name}: {e}", file=sys.stderr)
        return 1
    print(f"Created branch {name} at {base}")
    return 0


def cmd_delete_branch(
    name: str, repo_path: str, config: GitConfig, force: bool = False
) -> int:
    """Delete a branch, refusing unmerged branches unless force is set.

    Returns:
        Exit code (0 for success, 1 if git refused)
    """
    service = ReferenceService(repo_path=repo_path, runner=config.create_runner())
    try:
        service.delete_branch(name, DeleteBranchOptions(force=force))
    except GitCommandError as e:
        print(f"Error deleting branch {name}: {e}", file=sys.stderr)
        return 1
    print(f"Deleted branch {name}")
    return 0
