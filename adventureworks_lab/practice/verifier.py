"""
Attempt execution and verification.

``run_attempt`` executes one statement and captures either its result set or
the database error. ``verify_problem`` runs a problem's solution and every
other attempt, and checks that each attempt behaves the way its annotation
says:

- a done attempt returns exactly the solution's rows (same order);
- a wrong attempt with ``Mistake.error`` fails, with ``error_contains`` in the
  message when given;
- a wrong attempt with ``Mistake.wrong_result`` runs and returns rows that
  differ from the solution's.
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from adventureworks_lab.core.logging_config import get_logger

from .models import Attempt, AttemptCheck, AttemptOutcome, Mistake, Problem, ProblemReport, Verdict
from .registry import list_problems

logger = get_logger(__name__)


async def run_attempt(session: AsyncSession, sql: str) -> AttemptOutcome:
    """
    Execute a statement and capture its outcome.

    The SQL goes to the driver as written, so colons inside literals are not
    read as bind parameters. Errors are captured in the outcome instead of
    being raised. The session is rolled back after every attempt, so neither
    a failure nor a data-modifying statement affects the next attempt.
    """
    try:
        connection = await session.connection()
        result = await connection.exec_driver_sql(sql.strip())
        if result.returns_rows:
            columns = list(result.keys())
            rows = [list(row) for row in result.all()]
        else:
            columns, rows = [], []
    except SQLAlchemyError as e:
        orig = getattr(e, "orig", None)
        message = str(orig) if orig is not None else str(e)
        logger.debug(f"Attempt failed: {message}")
        return AttemptOutcome(error=message)
    finally:
        await session.rollback()
    return AttemptOutcome(columns=columns, rows=rows)


def check_attempt(index: int, attempt: Attempt, outcome: AttemptOutcome, solution: AttemptOutcome) -> AttemptCheck:
    """Compare an attempt's outcome with the solution's and its annotation."""
    reproduced: bool
    detail: str

    if attempt.verdict is Verdict.done:
        if outcome.failed:
            reproduced, detail = False, f"expected the solution rows, got an error: {outcome.error}"
        elif outcome.rows != solution.rows:
            reproduced, detail = False, "expected the solution rows, got different rows"
        else:
            reproduced, detail = True, "matches the solution"
    elif attempt.mistake is Mistake.error:
        if not outcome.failed:
            reproduced, detail = False, "expected an error, but the statement succeeded"
        elif attempt.error_contains and attempt.error_contains.lower() not in (outcome.error or "").lower():
            reproduced, detail = False, f"expected an error mentioning '{attempt.error_contains}', got: {outcome.error}"
        else:
            reproduced, detail = True, f"fails as documented: {outcome.error}"
    else:
        if outcome.failed:
            reproduced, detail = False, f"expected a wrong result, got an error: {outcome.error}"
        elif outcome.rows == solution.rows:
            reproduced, detail = False, "expected a wrong result, but the rows match the solution"
        else:
            reproduced, detail = True, "returns a different result than the solution"

    return AttemptCheck(
        index=index,
        verdict=attempt.verdict,
        mistake=attempt.mistake,
        reproduced=reproduced,
        detail=detail,
        outcome=outcome,
    )


async def verify_problem(session: AsyncSession, problem: Problem) -> ProblemReport:
    """Run a problem's solution and attempts and check every annotation."""
    solution = await run_attempt(session, problem.solution.sql)
    report = ProblemReport(slug=problem.slug, solution=solution)
    if solution.failed:
        logger.warning(f"Solution of '{problem.slug}' failed: {solution.error}")
        return report

    for index, attempt in enumerate(problem.attempts):
        outcome = await run_attempt(session, attempt.sql)
        report.checks.append(check_attempt(index, attempt, outcome, solution))

    logger.info(
        f"Verified '{problem.slug}': {sum(c.reproduced for c in report.checks)}/{len(report.checks)} attempts as documented"
    )
    return report


async def verify_catalog(session: AsyncSession, problems: Optional[List[Problem]] = None) -> List[ProblemReport]:
    """Verify every problem of the catalog (or the given problems) in order."""
    return [await verify_problem(session, problem) for problem in (list_problems() if problems is None else problems)]
