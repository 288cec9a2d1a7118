"""Domain models for git references.

A Reference pairs a commit ID with its fully-qualified refspec. The option
types below carry per-operation settings for the reference service; every
field has a default so callers only name what they change.
"""

from __future__ import annotations

from dataclasses import dataclass

REFS_HEADS = "refs/heads/"
REFS_TAGS = "refs/tags/"

DEFAULT_SYMBOLIC_REF = "HEAD"


def ref_short_name(ref: str) -> str:
    """Return the short name of a branch or tag refspec.

    Strips "refs/heads/" if present, otherwise "refs/tags/". Any other
    reference is returned unchanged.

    Examples:
        >>> ref_short_name("refs/heads/main")
        'main'
        >>> ref_short_name("refs/tags/v1.0.0")
        'v1.0.0'
        >>> ref_short_name("refs/remotes/origin/main")
        'refs/remotes/origin/main'
    """
    if ref.startswith(REFS_HEADS):
        return ref[len(REFS_HEADS):]
    if ref.startswith(REFS_TAGS):
        return ref[len(REFS_TAGS):]
    return ref


def branch_refspec(branch: str) -> str:
    return REFS_HEADS + branch


def tag_refspec(tag: str) -> str:
    return REFS_TAGS + tag


# ============================================================
# Domain Models
# ============================================================


@dataclass(frozen=True)
class Reference:
    """A git reference as listed by show-ref."""

    id: str
    refspec: str

    # --------------------------------------------------------
    # Factory Methods
    # --------------------------------------------------------

    @classmethod
    def from_show_ref_line(cls, line: str) -> Reference | None:
        """Parse one "<sha> <refspec>" line.

        Returns:
            Reference, or None unless the line has exactly two
            whitespace-separated fields
        """
        fields = line.split()
        if len(fields) != 2:
            return None
        return cls(id=fields[0], refspec=fields[1])

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    @property
    def short_name(self) -> str:
        return ref_short_name(self.refspec)

    @property
    def is_branch(self) -> bool:
        return self.refspec.startswith(REFS_HEADS)

    @property
    def is_tag(self) -> bool:
        return self.refspec.startswith(REFS_TAGS)

    # --------------------------------------------------------
    # Serialization
    # --------------------------------------------------------

    def to_dict(self) -> dict:
        return {"id": self.id, "refspec": self.refspec}


# ============================================================
# Operation Options
# ============================================================


@dataclass(frozen=True)
class ShowRefVerifyOptions:
    """Options for verifying a single reference.

    Attributes:
        timeout: Seconds before giving up; None uses the runner default
    """

    timeout: float | None = None


@dataclass(frozen=True)
class SymbolicRefOptions:
    """Options for reading or updating a symbolic ref.

    Attributes:
        name: Symbolic ref to read or update (default: "HEAD")
        ref: Target refspec (e.g. "refs/heads/main"). When set, the
            symbolic ref is updated to point at it instead of being read.
        timeout: Seconds before giving up; None uses the runner default
    """

    name: str = DEFAULT_SYMBOLIC_REF
    ref: str | None = None
    timeout: float | None = None


@dataclass(frozen=True)
class ShowRefOptions:
    """Options for listing references.

    Attributes:
        heads: Include branches under refs/heads/
        tags: Include tags under refs/tags/
        patterns: Patterns that listed refspecs must match
        timeout: Seconds before giving up; None uses the runner default

    With neither heads nor tags set, all references are listed.
    """

    heads: bool = False
    tags: bool = False
    patterns: tuple[str, ...] = ()
    timeout: float | None = None


@dataclass(frozen=True)
class DeleteBranchOptions:
    """Options for deleting a branch.

    Attributes:
        force: Delete even when the branch is not fully merged
        timeout: Seconds before giving up; None uses the runner default
    """

    force: bool = False
    timeout: float | None = None


@dataclass(frozen=True)
class CreateBranchOptions:
    timeout: float | None = None
