"""Diff summary service.

Core service that diffs two branches with `git diff --stat` and turns the
output into a DiffSummary domain model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gitrefs.domain.diff_stat import DiffBranchesOptions, DiffSummary, parse_diff_stat
from gitrefs.domain.reference import Reference, branch_refspec
from gitrefs.infrastructure.git.runner import (
    CommandRunner,
    GitCommandError,
    GitCommandRunner,
)

FATAL_DIFF_MESSAGE = "exit status 128, Repository not exists or branch not exists"


class GitDiffError(GitCommandError):
    """Raised when diffing branches fails with git's fatal exit status.

    Carries the partially filled DiffSummary, whose error_message is set.
    """

    def __init__(self, cause: GitCommandError, summary: DiffSummary):
        self.summary = summary
        super().__init__(
            cause.command_args,
            cause.stderr,
            exit_code=cause.exit_code,
            kind=cause.kind,
        )


@dataclass
class DiffSummaryService:
    """Service for summarizing the changes between two branches.

    Uses a CommandRunner for the actual git calls (dependency injection).
    """

    repo_path: str | Path = "."
    runner: CommandRunner = field(default_factory=GitCommandRunner)

    # ============================================================
    # Public API
    # ============================================================

    def diff_branches(
        self,
        source: str,
        target: str,
        options: DiffBranchesOptions = DiffBranchesOptions(),
    ) -> DiffSummary:
        """Summarize the files changed between two branches.

        Args:
            source: Source branch (or any revision git diff accepts)
            target: Target branch
            options: Stat width and timeout

        Returns:
            DiffSummary with per-file changes, summary line and commit IDs

        Raises:
            GitDiffError: If git exits with status 128 (missing repository or
                branch); its summary carries a descriptive error_message
            GitCommandError: For any other failure of the diff command
        """
        summary = DiffSummary(source_label=source, target_label=target)

        try:
            stdout = self.runner.run(
                [
                    "diff",
                    "--stat",
                    f"--stat-width={options.stat_width}",
                    source,
                    target,
                    "--",
                ],
                cwd=self.repo_path,
                timeout=options.timeout,
            )
        except GitCommandError as e:
            if e.is_fatal:
                summary.error_message = FATAL_DIFF_MESSAGE
                raise GitDiffError(e, summary) from e
            raise

        summary.source_commit_id = self.head_commit_id(source, options.timeout)
        summary.target_commit_id = self.head_commit_id(target, options.timeout)

        changes, summary_line = parse_diff_stat(stdout.decode("utf-8", errors="replace"))
        summary.changes = changes
        summary.summary_line = summary_line
        return summary

    def head_commit_id(self, branch: str, timeout: float | None = None) -> str:
        """Look up a branch among refs/heads, falling back to the name itself.

        show-ref matches patterns against the tail of each ref, so only the
        line for exactly refs/heads/<branch> is used. Any lookup failure or
        missing exact match returns branch unchanged.
        """
        try:
            stdout = self.runner.run(
                ["show-ref", "--heads", "--", branch],
                cwd=self.repo_path,
                timeout=timeout,
            )
        except GitCommandError:
            return branch

        refspec = branch_refspec(branch)
        for line in stdout.decode("utf-8", errors="replace").split("\n"):
            reference = Reference.from_show_ref_line(line)
            if reference is not None and reference.refspec == refspec:
                return reference.id
        return branch
