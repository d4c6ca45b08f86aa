"""
Practice problems.

A catalog of SQL exercises over an HR/Commerce schema. Every problem has a
correct ("done") query and annotated attempts, and the catalog can be
executed against a seeded sandbox to check that each attempt behaves the way
its note says.

Modules:
- models: Problem, Attempt and report schemas
- catalog: the problems
- registry: slug lookup
- seed / sandbox: the seeded in-memory practice database
- verifier: attempt execution and checking
"""

from .errors import DuplicateProblemError, PracticeError, ProblemNotFoundError
from .models import Attempt, Mistake, Problem, ProblemReport, ProblemSummary, Topic, Verdict
from .registry import ProblemRegistry, get_problem, get_registry, list_problems
from .sandbox import PracticeSandbox
from .verifier import run_attempt, verify_catalog, verify_problem

__all__ = [
    "Attempt",
    "DuplicateProblemError",
    "Mistake",
    "PracticeError",
    "PracticeSandbox",
    "Problem",
    "ProblemNotFoundError",
    "ProblemRegistry",
    "ProblemReport",
    "ProblemSummary",
    "Topic",
    "Verdict",
    "get_problem",
    "get_registry",
    "list_problems",
    "run_attempt",
    "verify_catalog",
    "verify_problem",
]
