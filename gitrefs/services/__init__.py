"""Services for gitrefs.

Services run git through an injected CommandRunner and return domain models.
They receive dependencies via constructor injection.
"""

from gitrefs.services.diff_summary import DiffSummaryService, GitDiffError
from gitrefs.services.references import ReferenceNotFoundError, ReferenceService

__all__ = [
    "DiffSummaryService",
    "GitDiffError",
    "ReferenceNotFoundError",
    "ReferenceService",
]
