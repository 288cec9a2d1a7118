"""Git primitives - command execution and failure classification."""

from .runner import (
    CommandErrorKind,
    CommandRunner,
    GitCommandError,
    GitCommandRunner,
    GitCommandTimeoutError,
)

__all__ = [
    "CommandErrorKind",
    "CommandRunner",
    "GitCommandError",
    "GitCommandRunner",
    "GitCommandTimeoutError",
]
