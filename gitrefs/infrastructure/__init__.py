"""Infrastructure components for gitrefs.

This layer handles external system interactions:
- git/ - running the git binary and classifying its failures
"""

from .git import (
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
