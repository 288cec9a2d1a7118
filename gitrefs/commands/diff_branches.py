"""Diff-branches command - summarize files changed between two branches.

Output formats:
    json - DiffSummary.to_dict() (machine-readable)
    text - DiffSummary.to_markdown() (human-readable)
"""

from __future__ import annotations

import json
import sys

from gitrefs.config import GitConfig
from gitrefs.domain.diff_stat import DiffBranchesOptions
from gitrefs.infrastructure.git.runner import GitCommandError
from gitrefs.services.diff_summary import DiffSummaryService, GitDiffError

OUTPUT_FORMATS = ("json", "text")


def cmd_diff_branches(
    source: str,
    target: str,
    repo_path: str,
    config: GitConfig,
    output_format: str = "json",
) -> int:
    """Execute the diff-branches command.

    Args:
        source: Source branch
        target: Target branch
        repo_path: Path to the git repository
        config: Effective configuration
        output_format: "json" or "text"

    Returns:
        Exit code (0 for success, 1 if the diff failed)
    """
    if output_format not in OUTPUT_FORMATS:
        raise ValueError(
            f"Invalid format: {output_format}. Must be one of: {', '.join(OUTPUT_FORMATS)}"
        )

    service = DiffSummaryService(repo_path=repo_path, runner=config.create_runner())
    try:
        summary = service.diff_branches(
            source, target, DiffBranchesOptions(stat_width=config.stat_width)
        )
    except GitDiffError as e:
        print(f"Error: {e.summary.error_message}", file=sys.stderr)
        print(f"  {e}", file=sys.stderr)
        return 1
    except GitCommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if output_format == "json":
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(summary.to_markdown())
    return 0
