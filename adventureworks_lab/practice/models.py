"""Schemas for practice problems and their verification reports."""

from __future__ import annotations

from enum import Enum
from typing import Any, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator


class BaseSchema(BaseModel):
    """
    Base Pydantic model for practice schemas.

    - ``populate_by_name=True``: Allow initialization by alias or field name.
    - ``extra="forbid"``: Prevent unknown fields from slipping into the model.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra="forbid",
    )


class Topic(str, Enum):
    """SQL concept a practice problem exercises."""

    window_functions = "window_functions"
    anti_join = "anti_join"
    recursive_cte = "recursive_cte"
    gaps_and_islands = "gaps_and_islands"
    subqueries = "subqueries"
    aggregation = "aggregation"
    joins = "joins"


class Verdict(str, Enum):
    """Annotation on an attempt: ✅ done or ❌ wrong."""

    done = "done"
    wrong = "wrong"


class Mistake(str, Enum):
    """How a wrong attempt goes wrong."""

    error = "error"  # The database rejects the statement.
    wrong_result = "wrong_result"  # It runs, but the result set is not the solution's.


class Attempt(BaseSchema):
    """
    A query written for a problem, with the author's commentary.

    Wrong attempts state which ``mistake`` they make. For ``error`` mistakes,
    ``error_contains`` optionally pins a fragment of the database message
    (compared case-insensitively).
    """

    sql: str
    verdict: Verdict
    commentary: str = ""
    mistake: Optional[Mistake] = None
    error_contains: Optional[str] = None

    @model_validator(mode="after")
    def _check_mistake(self) -> "Attempt":
        if self.verdict is Verdict.wrong and self.mistake is None:
            raise ValueError("a wrong attempt must say which mistake it makes")
        if self.verdict is Verdict.done and self.mistake is not None:
            raise ValueError("a done attempt cannot carry a mistake")
        if self.error_contains is not None and self.mistake is not Mistake.error:
            raise ValueError("error_contains only applies to attempts that fail with an error")
        return self


class Problem(BaseSchema):
    """A practice problem: the question, its solution and other attempts."""

    slug: str = Field(pattern=r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
    title: str
    topic: Topic
    prompt: str
    tables: Tuple[str, ...] = Field(description="Practice tables the problem reads")
    solution: Attempt
    attempts: Tuple[Attempt, ...] = ()

    @model_validator(mode="after")
    def _check_solution(self) -> "Problem":
        if self.solution.verdict is not Verdict.done:
            raise ValueError("the solution of a problem must be a done attempt")
        return self

    @property
    def wrong_attempts(self) -> List[Attempt]:
        return [a for a in self.attempts if a.verdict is Verdict.wrong]


class ProblemSummary(BaseSchema):
    """Short listing entry for a problem."""

    slug: str
    title: str
    topic: Topic
    attempt_count: int

    @classmethod
    def from_problem(cls, problem: Problem) -> "ProblemSummary":
        return cls(slug=problem.slug, title=problem.title, topic=problem.topic, attempt_count=len(problem.attempts))


class AttemptOutcome(BaseSchema):
    """What happened when a statement was executed."""

    columns: List[str] = Field(default_factory=list)
    rows: List[List[Any]] = Field(default_factory=list)
    error: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.error is not None


class AttemptCheck(BaseSchema):
    """Verification result of one attempt against the solution."""

    index: int = Field(description="Position of the attempt within the problem's attempts")
    verdict: Verdict
    mistake: Optional[Mistake] = None
    reproduced: bool = Field(description="Whether the attempt behaved as annotated")
    detail: str = ""
    outcome: AttemptOutcome


class ProblemReport(BaseModel):
    """Verification report for a problem.

    Not strict about extra fields: serialized reports carry the computed
    ``passed`` flag and must validate back.
    """

    slug: str
    solution: AttemptOutcome
    checks: List[AttemptCheck] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def passed(self) -> bool:
        return not self.solution.failed and all(check.reproduced for check in self.checks)
