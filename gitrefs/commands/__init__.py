"""CLI command implementations."""

from gitrefs.commands.branch import cmd_create_branch, cmd_delete_branch
from gitrefs.commands.diff_branches import cmd_diff_branches
from gitrefs.commands.refs import (
    cmd_branches,
    cmd_exists,
    cmd_refs,
    cmd_resolve,
    cmd_symbolic_ref,
    cmd_tags,
)

__all__ = [
    "cmd_branches",
    "cmd_create_branch",
    "cmd_delete_branch",
    "cmd_diff_branches",
    "cmd_exists",
    "cmd_refs",
    "cmd_resolve",
    "cmd_symbolic_ref",
    "cmd_tags",
]
