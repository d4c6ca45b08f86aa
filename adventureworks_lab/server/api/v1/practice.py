"""
Practice Problem Endpoints.

This module exposes the practice catalog: listing problems, reading one
problem with its annotated attempts, and verifying a problem in a freshly
seeded sandbox.
"""

from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query, status

from adventureworks_lab.core.logging_config import get_logger
from adventureworks_lab.practice import (
    PracticeSandbox,
    Problem,
    ProblemNotFoundError,
    ProblemReport,
    ProblemSummary,
    Topic,
    get_problem,
    list_problems,
    verify_problem,
)

logger = get_logger(__name__)

router = APIRouter()


def _get_or_404(slug: str) -> Problem:
    try:
        return get_problem(slug)
    except ProblemNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get(
    "/problems",
    response_model=List[ProblemSummary],
    summary="List Practice Problems",
    description="List the practice problems, optionally restricted to one topic.",
)
async def list_practice_problems(
    topic: Optional[Topic] = Query(None, description="Only list problems about this topic."),
) -> List[ProblemSummary]:
    return [ProblemSummary.from_problem(p) for p in list_problems(topic)]


@router.get(
    "/problems/{slug}",
    response_model=Problem,
    summary="Get Practice Problem",
    description="Retrieve a problem with its solution and annotated attempts.",
    responses={404: {"description": "Problem not found"}},
)
async def get_practice_problem(slug: str) -> Problem:
    return _get_or_404(slug)


@router.post(
    "/problems/{slug}/verify",
    response_model=ProblemReport,
    summary="Verify Practice Problem",
    description=(
        "Run the problem's solution and attempts in a freshly seeded sandbox and report whether "
        "each attempt behaves as annotated."
    ),
    responses={404: {"description": "Problem not found"}},
)
async def verify_practice_problem(slug: str) -> ProblemReport:
    """
    Verify a practice problem.

    Every call builds its own in-memory sandbox, so verifications never share state.
    """
    problem = _get_or_404(slug)
    async with PracticeSandbox() as sandbox:
        async with sandbox.session() as session:
            report = await verify_problem(session, problem)
    if not report.passed:
        logger.warning(f"Problem '{slug}' did not verify")
    return report
