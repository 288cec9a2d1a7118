"""Reference commands - resolve, check, and list git references.

Each command prints its result to stdout and returns an exit code.
Errors from git are printed to stderr and yield exit code 1.
"""

from __future__ import annotations

import json
import sys

from gitrefs.config import GitConfig
from gitrefs.domain.reference import ShowRefOptions, SymbolicRefOptions
from gitrefs.infrastructure.git.runner import GitCommandError
from gitrefs.services.references import ReferenceNotFoundError, ReferenceService

EXISTS_KINDS = ("ref", "branch", "tag")


def _service(repo_path: str, config: GitConfig) -> ReferenceService:
    return ReferenceService(repo_path=repo_path, runner=config.create_runner())


def cmd_resolve(ref: str, repo_path: str, config: GitConfig) -> int:
    """Print the commit ID of a fully-qualified reference.

    Args:
        ref: Full refspec, e.g. "refs/heads/main"
        repo_path: Path to the git repository
        config: Effective configuration

    Returns:
        Exit code (0 for success, 1 if missing or git failed)
    """
    service = _service(repo_path, config)
    try:
        commit_id = service.show_ref_verify(ref)
    except (ReferenceNotFoundError, GitCommandError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    print(commit_id)
    return 0


def cmd_exists(kind: str, name: str, repo_path: str, config: GitConfig) -> int:
    """Exit 0 if the reference exists, 1 otherwise.

    Args:
        kind: "ref" (full refspec), "branch" or "tag" (short names)
        name: Reference to check
    """
    service = _service(repo_path, config)
    if kind == "branch":
        exists = service.has_branch(name)
    elif kind == "tag":
        exists = service.has_tag(name)
    elif kind == "ref":
        exists = service.has_reference(name)
    else:
        raise ValueError(f"Invalid kind: {kind}. Must be one of: {', '.join(EXISTS_KINDS)}")

    print("yes" if exists else "no")
    return 0 if exists else 1


def cmd_refs(
    repo_path: str,
    config: GitConfig,
    heads: bool = False,
    tags: bool = False,
    patterns: list[str] | None = None,
    output_format: str = "text",
) -> int:
    """List references as "<sha> <refspec>" lines or a JSON array."""
    service = _service(repo_path, config)
    options = ShowRefOptions(heads=heads, tags=tags, patterns=tuple(patterns or ()))
    try:
        references = service.show_ref(options)
    except GitCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output_format == "json":
        print(json.dumps([ref.to_dict() for ref in references], indent=2))
    else:
        for ref in references:
            print(f"{ref.id} {ref.refspec}")
    return 0


def cmd_branches(repo_path: str, config: GitConfig) -> int:
    service = _service(repo_path, config)
    try:
        names = service.branches()
    except GitCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for name in names:
        print(name)
    return 0


def cmd_tags(repo_path: str, config: GitConfig) -> int:
    service = _service(repo_path, config)
    try:
        names = service.tags()
    except GitCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    for name in names:
        print(name)
    return 0


def cmd_symbolic_ref(
    repo_path: str,
    config: GitConfig,
    name: str = "HEAD",
    ref: str | None = None,
) -> int:
    """Print the target of a symbolic ref, or point it at ref when given."""
    service = _service(repo_path, config)
    try:
        target = service.symbolic_ref(SymbolicRefOptions(name=name, ref=ref))
    except GitCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if ref:
        print(f"Updated {name} -> {ref}")
    else:
        print(target)
    return 0
