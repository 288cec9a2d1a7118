"""Domain models for gitrefs."""

from gitrefs.domain.diff_stat import (
    DiffBranchesOptions,
    DiffStatParser,
    DiffSummary,
    FileChange,
    ParseState,
    parse_diff_stat,
)
from gitrefs.domain.reference import (
    REFS_HEADS,
    REFS_TAGS,
    CreateBranchOptions,
    DeleteBranchOptions,
    Reference,
    ShowRefOptions,
    ShowRefVerifyOptions,
    SymbolicRefOptions,
    ref_short_name,
)

__all__ = [
    "CreateBranchOptions",
    "DeleteBranchOptions",
    "DiffBranchesOptions",
    "DiffStatParser",
    "DiffSummary",
    "FileChange",
    "ParseState",
    "REFS_HEADS",
    "REFS_TAGS",
    "Reference",
    "ShowRefOptions",
    "ShowRefVerifyOptions",
    "SymbolicRefOptions",
    "parse_diff_stat",
    "ref_short_name",
]
