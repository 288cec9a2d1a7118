"""Reference service.

Core service for resolving, listing, creating and deleting git references.
Runs git through an injected CommandRunner and returns domain models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from gitrefs.domain.reference import (
    CreateBranchOptions,
    DeleteBranchOptions,
    Reference,
    ShowRefOptions,
    ShowRefVerifyOptions,
    SymbolicRefOptions,
    branch_refspec,
    ref_short_name,
    tag_refspec,
)
from gitrefs.infrastructure.git.runner import (
    CommandErrorKind,
    CommandRunner,
    GitCommandError,
    GitCommandRunner,
)


class ReferenceNotFoundError(Exception):
    """Raised when a reference does not exist in the repository."""

    def __init__(self, ref: str):
        self.ref = ref
        super().__init__(f"reference does not exist: {ref}")


@dataclass
class ReferenceService:
    """Service for git reference operations on one repository.

    Uses a CommandRunner for the actual git calls (dependency injection).
    Holds no state besides its collaborators, so every call reflects the
    repository as it is at that moment.
    """

    repo_path: str | Path = "."
    runner: CommandRunner = field(default_factory=GitCommandRunner)

    # ============================================================
    # Public API - Resolution
    # ============================================================

    def show_ref_verify(
        self, ref: str, options: ShowRefVerifyOptions = ShowRefVerifyOptions()
    ) -> str:
        """Return the commit ID of a fully-qualified reference.

        Args:
            ref: Full refspec, e.g. "refs/heads/main"
            options: Verification options

        Returns:
            Commit ID the reference points at

        Raises:
            ReferenceNotFoundError: If git reports ref is not a valid ref
            GitCommandError: For any other failure, stderr preserved
        """
        try:
            stdout = self._run(["show-ref", "--verify", ref], options.timeout)
        except GitCommandError as e:
            if e.kind is CommandErrorKind.REFERENCE_NOT_FOUND:
                raise ReferenceNotFoundError(ref) from e
            raise
        return stdout.split(" ")[0]

    def branch_commit_id(
        self, branch: str, options: ShowRefVerifyOptions = ShowRefVerifyOptions()
    ) -> str:
        """Return the commit ID of a branch given by short name, e.g. "main"."""
        return self.show_ref_verify(branch_refspec(branch), options)

    def tag_commit_id(
        self, tag: str, options: ShowRefVerifyOptions = ShowRefVerifyOptions()
    ) -> str:
        """Return the commit ID of a tag given by short name, e.g. "v1.0.0"."""
        return self.show_ref_verify(tag_refspec(tag), options)

    # ============================================================
    # Public API - Existence
    # ============================================================

    def has_reference(
        self, ref: str, options: ShowRefVerifyOptions = ShowRefVerifyOptions()
    ) -> bool:
        """Check whether a full refspec resolves.

        Any failure, not only a missing reference, yields False.
        """
        try:
            self.show_ref_verify(ref, options)
        except (ReferenceNotFoundError, GitCommandError):
            return False
        return True

    def has_branch(
        self, branch: str, options: ShowRefVerifyOptions = ShowRefVerifyOptions()
    ) -> bool:
        return self.has_reference(branch_refspec(branch), options)

    def has_tag(
        self, tag: str, options: ShowRefVerifyOptions = ShowRefVerifyOptions()
    ) -> bool:
        return self.has_reference(tag_refspec(tag), options)

    # ============================================================
    # Public API - Symbolic Refs
    # ============================================================

    def symbolic_ref(self, options: SymbolicRefOptions = SymbolicRefOptions()) -> str:
        """Read or update a symbolic ref.

        Args:
            options: Name of the symbolic ref and, for an update, the target

        Returns:
            Target refspec (e.g. "refs/heads/main") when reading, "" when updating

        Raises:
            GitCommandError: If git fails, unchanged
        """
        args = ["symbolic-ref", options.name or "HEAD"]
        if options.ref:
            args.append(options.ref)

        stdout = self._run(args, options.timeout)
        if options.ref:
            return ""
        return stdout.strip()

    def get_symbolic_ref(self, name: str = "HEAD", timeout: float | None = None) -> str:
        return self.symbolic_ref(SymbolicRefOptions(name=name, timeout=timeout))

    def set_symbolic_ref(
        self, name: str, ref: str, timeout: float | None = None
    ) -> None:
        self.symbolic_ref(SymbolicRefOptions(name=name, ref=ref, timeout=timeout))

    # ============================================================
    # Public API - Listing
    # ============================================================

    def show_ref(self, options: ShowRefOptions = ShowRefOptions()) -> list[Reference]:
        """List references, in the order git prints them.

        Lines that do not split into exactly two fields are skipped. When
        nothing matches, git exits 1 without output and an empty list is
        returned instead of raising.

        Raises:
            GitCommandError: If git fails for a reason other than no match
        """
        args = ["show-ref"]
        if options.heads:
            args.append("--heads")
        if options.tags:
            args.append("--tags")
        args.append("--")
        args.extend(options.patterns)

        try:
            stdout = self._run(args, options.timeout)
        except GitCommandError as e:
            # show-ref exits 1 silently when nothing matches
            if e.exit_code == 1 and not e.stderr.strip():
                return []
            raise

        references = []
        for line in stdout.split("\n"):
            reference = Reference.from_show_ref_line(line)
            if reference is not None:
                references.append(reference)
        return references

    def branches(self, timeout: float | None = None) -> list[str]:
        """Return short names of all branches."""
        heads = self.show_ref(ShowRefOptions(heads=True, timeout=timeout))
        return [ref_short_name(head.refspec) for head in heads]

    def tags(self, timeout: float | None = None) -> list[str]:
        """Return short names of all tags."""
        tags = self.show_ref(ShowRefOptions(tags=True, timeout=timeout))
        return [ref_short_name(tag.refspec) for tag in tags]

    # ============================================================
    # Public API - Branch Mutation
    # ============================================================

    def create_branch(
        self,
        name: str,
        base: str,
        options: CreateBranchOptions = CreateBranchOptions(),
    ) -> None:
        """Point refs/heads/<name> at base using update-ref.

        base is not checked to be a commit; git's error is raised as-is.

        Raises:
            GitCommandError: If git rejects the update
        """
        self._run(["update-ref", branch_refspec(name), base], options.timeout)

    def delete_branch(
        self, name: str, options: DeleteBranchOptions = DeleteBranchOptions()
    ) -> None:
        """Delete a branch; force skips the fully-merged check.

        Raises:
            GitCommandError: If git refuses, e.g. the branch is not fully merged
        """
        flag = "-D" if options.force else "-d"
        self._run(["branch", flag, name], options.timeout)

    # --------------------------------------------------------
    # Private Methods
    # --------------------------------------------------------

    def _run(self, args: list[str], timeout: float | None) -> str:
        stdout = self.runner.run(args, cwd=self.repo_path, timeout=timeout)
        return stdout.decode("utf-8", errors="replace")
