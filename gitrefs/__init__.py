"""gitrefs - git reference and branch-diff tooling.

Resolves and manipulates git references (branches, tags, symbolic refs) and
summarizes `git diff --stat` output between two branches, by running the git
binary and parsing its text output.

Usage:
    python -m gitrefs <command> [options]
    gitrefs <command> [options]

Structure:
    gitrefs/
    ├── __main__.py          # Entry point dispatcher
    ├── config.py            # GitConfig (defaults, env, YAML file)
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── reference.py     # Reference, option types, ref_short_name
    │   └── diff_stat.py     # FileChange, DiffSummary, DiffStatParser
    ├── services/            # Operations over one repository
    │   ├── references.py    # ReferenceService
    │   └── diff_summary.py  # DiffSummaryService
    ├── infrastructure/      # External system interactions
    │   └── git/runner.py    # GitCommandRunner
    └── commands/            # Thin command orchestrators
"""

from gitrefs.domain.diff_stat import DiffSummary, FileChange, parse_diff_stat
from gitrefs.domain.reference import Reference, ref_short_name
from gitrefs.infrastructure.git.runner import (
    CommandErrorKind,
    GitCommandError,
    GitCommandRunner,
    GitCommandTimeoutError,
)
from gitrefs.services.diff_summary import DiffSummaryService, GitDiffError
from gitrefs.services.references import ReferenceNotFoundError, ReferenceService

__version__ = "0.1.0"

__all__ = [
    "CommandErrorKind",
    "DiffSummary",
    "DiffSummaryService",
    "FileChange",
    "GitCommandError",
    "GitCommandRunner",
    "GitCommandTimeoutError",
    "GitDiffError",
    "Reference",
    "ReferenceNotFoundError",
    "ReferenceService",
    "parse_diff_stat",
    "ref_short_name",
]
