"""Problem registry.

The registry maps a problem slug to its ``Problem`` definition. The
default registry holds the catalog shipped with the package.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from .catalog import PROBLEMS
from .errors import DuplicateProblemError, ProblemNotFoundError
from .models import Problem, Topic


class ProblemRegistry:
    """
    In-memory mapping of slugs to practice problems.

    Problems keep their registration order when listed.
    """

    def __init__(self, problems: Iterable[Problem] = ()) -> None:
        self._problems: Dict[str, Problem] = {}
        for problem in problems:
            self.register(problem)

    def register(self, problem: Problem) -> None:
        """
        Register a problem.

        Raises:
            DuplicateProblemError: If the slug is already taken.
        """
        if problem.slug in self._problems:
            raise DuplicateProblemError(problem.slug)
        self._problems[problem.slug] = problem

    def get(self, slug: str) -> Problem:
        """
        Retrieve a problem by slug.

        Raises:
            ProblemNotFoundError: If no problem is registered with the given slug.
        """
        try:
            return self._problems[slug]
        except KeyError:
            raise ProblemNotFoundError(slug) from None

    def has(self, slug: str) -> bool:
        return slug in self._problems

    def list(self, topic: Optional[Topic] = None) -> List[Problem]:
        """List problems, optionally restricted to one topic."""
        return [p for p in self._problems.values() if topic is None or p.topic is topic]

    def __len__(self) -> int:
        return len(self._problems)


_default_registry: Optional[ProblemRegistry] = None


def get_registry() -> ProblemRegistry:
    """Return the registry holding the packaged catalog."""
    global _default_registry
    if _default_registry is None:
        _default_registry = ProblemRegistry(PROBLEMS)
    return _default_registry


def list_problems(topic: Optional[Topic] = None) -> List[Problem]:
    return get_registry().list(topic)


def get_problem(slug: str) -> Problem:
    return get_registry().get(slug)
