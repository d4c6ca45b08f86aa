"""Error types for the practice package."""

from __future__ import annotations


class PracticeError(Exception):
    """Base error for all practice catalog exceptions."""


class ProblemNotFoundError(PracticeError):
    """Raised when no problem is registered under the requested slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Practice problem not found: '{slug}'")
        self.slug = slug


class DuplicateProblemError(PracticeError):
    """Raised when two problems are registered under the same slug."""

    def __init__(self, slug: str) -> None:
        super().__init__(f"Practice problem already registered: '{slug}'")
        self.slug = slug
