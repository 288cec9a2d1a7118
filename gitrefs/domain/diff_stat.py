"""Domain models for `git diff --stat` output.

Parse-once pattern: raw stat text is turned into FileChange entries and a
summary line at the boundary by DiffStatParser, and the typed DiffSummary is
what services hand back to callers.

Example stat output:

     src/app.py   | 3 +--
     logo.png     | Bin 100 -> 200 bytes
     2 files changed, 1 insertion(+), 2 deletions(-)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_STAT_WIDTH = 99999

STAT_SEPARATOR = "|"
BINARY_MARKER = "| Bin"


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class FileChange:
    """One per-file line of diff-stat output."""

    path: str
    is_binary: bool = False

    @classmethod
    def from_stat_line(cls, line: str) -> FileChange:
        """Parse a line that contains the "|" separator.

        The path is everything before the first "|", trimmed of spaces.
        """
        path = line.split(STAT_SEPARATOR, 1)[0].strip(" ")
        return cls(path=path, is_binary=BINARY_MARKER in line)

    def to_dict(self) -> dict:
        return {"path": self.path, "is_binary": self.is_binary}


@dataclass
class DiffSummary:
    """Result of diffing two branches.

    Attributes:
        source_label: Source branch as given by the caller
        target_label: Target branch as given by the caller
        source_commit_id: Commit ID of the source branch, or the branch name
            when it could not be resolved
        target_commit_id: Same as source_commit_id, for the target branch
        changes: Per-file changes in the order git printed them
        summary_line: Trailing "N files changed, ..." line, "" if absent
        error_message: Descriptive message set when the diff failed with
            git's fatal exit status
    """

    source_label: str
    target_label: str
    source_commit_id: str = ""
    target_commit_id: str = ""
    changes: list[FileChange] = field(default_factory=list)
    summary_line: str = ""
    error_message: str | None = None

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def has_error(self) -> bool:
        return self.error_message is not None

    @property
    def file_paths(self) -> list[str]:
        return [change.path for change in self.changes]

    @property
    def binary_files(self) -> list[FileChange]:
        return [change for change in self.changes if change.is_binary]

    # --------------------------------------------------------
    # Serialization
    # --------------------------------------------------------

    def to_dict(self) -> dict:
        """Convert to a dictionary for JSON serialization."""
        return {
            "source": self.source_label,
            "target": self.target_label,
            "source_commit_id": self.source_commit_id,
            "target_commit_id": self.target_commit_id,
            "changes": [change.to_dict() for change in self.changes],
            "summary": self.summary_line,
            "error": self.error_message,
        }

    def to_markdown(self) -> str:
        """Render a human-readable report."""
        lines = [
            f"## {self.source_label} → {self.target_label}",
            "",
            f"- **Source:** `{self.source_commit_id}`",
            f"- **Target:** `{self.target_commit_id}`",
        ]
        if self.error_message:
            lines.extend(["", f"**Error:** {self.error_message}"])
            return "\n".join(lines)

        lines.append("")
        if not self.changes:
            lines.append("_No changes._")
        for change in self.changes:
            suffix = " (binary)" if change.is_binary else ""
            lines.append(f"- `{change.path}`{suffix}")
        if self.summary_line:
            lines.extend(["", self.summary_line])
        return "\n".join(lines)


# ============================================================
# Parsing
# ============================================================


class ParseState(Enum):
    """States of the diff-stat scanner."""

    SCANNING_FILES = "scanning_files"
    SUMMARY_FOUND = "summary_found"


class DiffStatParser:
    """Single-pass scanner over diff-stat lines.

    Lines containing "|" are file changes. The first non-empty line without
    "|" is the summary line; once it is seen the parser stops and ignores all
    remaining input. Empty lines are skipped.
    """

    def __init__(self) -> None:
        self.state = ParseState.SCANNING_FILES
        self.changes: list[FileChange] = []
        self.summary_line = ""

    def feed(self, line: str) -> ParseState:
        """Consume one line and return the resulting state."""
        if self.state is ParseState.SUMMARY_FOUND:
            return self.state

        if STAT_SEPARATOR in line:
            self.changes.append(FileChange.from_stat_line(line))
        elif line:
            self.summary_line = line.strip(" ")
            self.state = ParseState.SUMMARY_FOUND
        return self.state

    def parse(self, stat_output: str) -> tuple[list[FileChange], str]:
        """Feed every line of stat_output until the summary is found.

        Returns:
            Tuple of (file changes, summary line)
        """
        for line in stat_output.split("\n"):
            if self.feed(line) is ParseState.SUMMARY_FOUND:
                break
        return self.changes, self.summary_line


def parse_diff_stat(stat_output: str) -> tuple[list[FileChange], str]:
    """Parse `git diff --stat` text into (file changes, summary line)."""
    return DiffStatParser().parse(stat_output)


@dataclass(frozen=True)
class DiffBranchesOptions:
    """Options for diffing two branches.

    Attributes:
        stat_width: Value for --stat-width; large so paths are never elided
        timeout: Seconds before giving up; None uses the runner default
    """

    stat_width: int = DEFAULT_STAT_WIDTH
    timeout: float | None = None
