"""Git command runner.

Infrastructure component that wraps subprocess calls to the git binary.
This abstraction allows services to be tested without actually calling git.

Failures are classified here, once, into a CommandErrorKind so that services
match on the kind of failure instead of on git's diagnostic text.
"""

from __future__ import annotations

import subprocess
import sys
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol

DEFAULT_TIMEOUT = 60.0

# Exit status git uses for "fatal:" errors (bad repository, bad revision, ...)
FATAL_EXIT_CODE = 128

_REFERENCE_NOT_FOUND_MARKER = "not a valid ref"


class CommandErrorKind(Enum):
    """Classification of a failed git command.

    Attributes:
        REFERENCE_NOT_FOUND: git reported the refspec is not a valid ref
        FATAL: git exited with status 128 (bad repository or revision)
        TIMEOUT: the command did not finish within its timeout
        FAILED: any other failure, including git not being startable
    """

    REFERENCE_NOT_FOUND = "reference_not_found"
    FATAL = "fatal"
    TIMEOUT = "timeout"
    FAILED = "failed"


class GitCommandError(Exception):
    """Raised when a git command fails.

    The stderr text is preserved verbatim. str() renders as
    "exit status <code> - <stderr>".
    """

    def __init__(
        self,
        args: list[str],
        stderr: str,
        exit_code: int | None = None,
        kind: CommandErrorKind = CommandErrorKind.FAILED,
    ):
        self.command_args = list(args)
        self.stderr = stderr
        self.exit_code = exit_code
        self.kind = kind
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        detail = self.stderr.strip()
        if self.exit_code is None:
            return detail
        if not detail:
            return f"exit status {self.exit_code}"
        return f"exit status {self.exit_code} - {detail}"

    @property
    def is_fatal(self) -> bool:
        """True when git exited with its generic fatal status (128)."""
        return self.exit_code == FATAL_EXIT_CODE


class GitCommandTimeoutError(GitCommandError):
    """Raised when a git command exceeds its timeout."""

    def __init__(self, args: list[str], timeout: float):
        self.timeout = timeout
        super().__init__(
            args,
            f"command timed out after {timeout:g}s",
            kind=CommandErrorKind.TIMEOUT,
        )


def classify_failure(stderr: str, exit_code: int | None) -> CommandErrorKind:
    """Map a failed command's stderr and exit status to an error kind."""
    if _REFERENCE_NOT_FOUND_MARKER in stderr:
        return CommandErrorKind.REFERENCE_NOT_FOUND
    if exit_code == FATAL_EXIT_CODE:
        return CommandErrorKind.FATAL
    return CommandErrorKind.FAILED


class CommandRunner(Protocol):
    """Protocol for running git commands."""

    def run(
        self, args: list[str], cwd: str | Path, timeout: float | None = None
    ) -> bytes:
        """Run git with args in cwd and return stdout.

        Raises GitCommandError on failure.
        """
        ...


@dataclass
class GitCommandRunner:
    """Runs git commands via subprocess.

    This is the production implementation of CommandRunner.
    For testing, mock this class or use a fake implementation.
    """

    git_binary: str = "git"
    default_timeout: float = DEFAULT_TIMEOUT
    verbose: bool = False

    # --------------------------------------------------------
    # Public API
    # --------------------------------------------------------

    def run(
        self, args: list[str], cwd: str | Path, timeout: float | None = None
    ) -> bytes:
        """Run a git command.

        Args:
            args: Arguments after the program name (e.g., ["show-ref", "--heads"])
            cwd: Working directory, normally the repository path
            timeout: Seconds before the process is killed; None uses default_timeout

        Returns:
            Raw stdout bytes

        Raises:
            GitCommandTimeoutError: If the command exceeds its timeout
            GitCommandError: If the command exits non-zero or cannot be started
        """
        effective_timeout = timeout if timeout is not None else self.default_timeout
        cmd = [self.git_binary, *args]
        if self.verbose:
            print(f"Running: {' '.join(cmd)} (in {cwd})", file=sys.stderr)

        try:
            result = subprocess.run(
                cmd,
                cwd=cwd,
                capture_output=True,
                timeout=effective_timeout,
                check=True,
            )
        except subprocess.TimeoutExpired as e:
            raise self._report(GitCommandTimeoutError(args, effective_timeout)) from e
        except subprocess.CalledProcessError as e:
            stderr = _decode(e.stderr)
            raise self._report(
                GitCommandError(
                    args,
                    stderr,
                    exit_code=e.returncode,
                    kind=classify_failure(stderr, e.returncode),
                )
            ) from e
        except OSError as e:
            raise self._report(GitCommandError(args, str(e))) from e
        return result.stdout

    # --------------------------------------------------------
    # Private Methods
    # --------------------------------------------------------

    def _report(self, error: GitCommandError) -> GitCommandError:
        if self.verbose:
            print(f"Command failed: {error}", file=sys.stderr)
        return error


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")
