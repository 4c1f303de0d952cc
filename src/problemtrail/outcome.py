"""
Operations over Outcomes.

Every function here is a pass-through on ``Ok`` and a pure transform of the
Problem on ``Err``; none of them raise.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from .models.problem import Problem
from .models.severity import Severity
from .result import Err, Ok, Outcome, Result

logger = logging.getLogger(__name__)

T = TypeVar("T")
E = TypeVar("E")


# --------------------------------------------------------------------------- #
#                              Construction                                   #
# --------------------------------------------------------------------------- #


def new_defect(error: E) -> Problem[E]:
    """Create a Problem classified as a defect."""
    return Problem.defect(error)


def new_failure(error: E) -> Problem[E]:
    """Create a Problem classified as a failure."""
    return Problem.failure(error)


def into_defect(result: Result[T, E]) -> Outcome[T, E]:
    """Lift a plain result into an Outcome, classifying its error as a defect."""
    if isinstance(result, Ok):
        return result
    return Err(error=Problem.defect(result.error))


def into_failure(result: Result[T, E]) -> Outcome[T, E]:
    """Lift a plain result into an Outcome, classifying its error as a failure."""
    if isinstance(result, Ok):
        return result
    return Err(error=Problem.failure(result.error))


def attempt(
    fn: Callable[..., Any],
    *args: Any,
    severity: Severity = Severity.DEFECT,
    **kwargs: Any,
) -> Outcome[Any, Exception]:
    """
    Call ``fn`` and capture a raised exception as a Problem.

    Args:
        fn: Callable to invoke with ``args`` and ``kwargs``.
        severity: Classification given to a caught exception.

    Returns:
        ``Ok`` holding the return value, or ``Err`` holding a Problem whose
        error is the exception instance.
    """
    try:
        return Ok(value=fn(*args, **kwargs))
    except Exception as e:
        name = getattr(fn, "__qualname__", repr(fn))
        logger.debug(f"{name} raised {type(e).__name__}, captured as {severity.value}")
        if severity is Severity.FAILURE:
            return Err(error=Problem.failure(e))
        return Err(error=Problem.defect(e))


# --------------------------------------------------------------------------- #
#                           Context and coercion                              #
# --------------------------------------------------------------------------- #


def _map_problem(
    outcome: Outcome[T, E], change: Callable[[Problem[E]], Problem[E]]
) -> Outcome[T, E]:
    if isinstance(outcome, Ok):
        return outcome
    return Err(error=change(outcome.error))


def with_context(outcome: Outcome[T, E], text: str) -> Outcome[T, E]:
    """Annotate the error branch with where it passed through."""
    return _map_problem(outcome, lambda problem: problem.with_context(text))


def with_defect(outcome: Outcome[T, E], error: E) -> Outcome[T, E]:
    """Record a defect; escalates a failure, keeps an existing defect's error."""
    return _map_problem(outcome, lambda problem: problem.with_defect(error))


def with_failure(outcome: Outcome[T, E], error: E) -> Outcome[T, E]:
    """Record a failure; replaces a failure's error, never downgrades a defect."""
    return _map_problem(outcome, lambda problem: problem.with_failure(error))


def to_defect(outcome: Outcome[T, E]) -> Outcome[T, E]:
    return _map_problem(outcome, lambda problem: problem.to_defect())


def to_failure(outcome: Outcome[T, E]) -> Outcome[T, E]:
    return _map_problem(outcome, lambda problem: problem.to_failure())


# --------------------------------------------------------------------------- #
#                               Extraction                                    #
# --------------------------------------------------------------------------- #


def unwrap_failure(problem: Problem[E], default: Any) -> Any:
    """User-displayable error of a failure, or ``default`` for a defect."""
    return problem.unwrap_failure(default)


def extract_error(outcome: Outcome[T, E]) -> Result[T, E]:
    """Drop severity and stack, keeping only the underlying error."""
    if isinstance(outcome, Ok):
        return outcome
    return Err(error=outcome.error.error)
