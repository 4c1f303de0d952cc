"""Prose rendering of Problems for display and logging."""

import logging
from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .models.problem import Problem
from .models.severity import EntryKind
from .models.stack_entry import StackEntry

logger = logging.getLogger(__name__)


class RenderStyle(BaseModel):
    """Layout tokens used by the renderers."""

    indent: str = Field(
        default="  ", description="Prefix of each stack line in pretty output."
    )
    separator: str = Field(
        default=" | ", description="Token joining the parts of a log line."
    )
    heading: str = Field(
        default="stack:", description="Line introducing the stack in pretty output."
    )

    model_config = ConfigDict(frozen=True, extra="forbid")


DEFAULT_STYLE = RenderStyle()


def _header(problem: Problem, to_string: Callable[[Any], str]) -> str:
    return f"{problem.severity.value}: {to_string(problem.error)}"


def _listed_entries(problem: Problem) -> tuple[StackEntry, ...]:
    # The originating entry only repeats the header until a coercion changes
    # the severity or the error.
    *rest, origin = problem.stack
    if (
        origin.kind is EntryKind.for_severity(problem.severity)
        and origin.payload is problem.error
    ):
        return tuple(rest)
    return problem.stack


def pretty_print(
    problem: Problem,
    to_string: Callable[[Any], str] = str,
    style: RenderStyle = DEFAULT_STYLE,
) -> str:
    """
    Multi-line rendering of a Problem.

    Example::

        Failure: Invalid email

        stack:
          in validate_email

    Args:
        problem: Problem to render.
        to_string: Converts the error payload to display text.
        style: Layout tokens.

    Returns:
        The header line, followed by the stack block when there are entries
        beyond the origin.
    """
    lines = [_header(problem, to_string)]
    entries = _listed_entries(problem)
    if entries:
        lines.extend(["", style.heading])
        lines.extend(f"{style.indent}{entry.render(to_string)}" for entry in entries)
    return "\n".join(lines)


def print_line(
    problem: Problem,
    to_string: Callable[[Any], str] = str,
    style: RenderStyle = DEFAULT_STYLE,
) -> str:
    """Single-line rendering of a Problem, for compact logging."""
    parts = [_header(problem, to_string)]
    parts.extend(entry.render(to_string) for entry in _listed_entries(problem))
    return style.separator.join(parts)


def log_problem(
    problem: Problem,
    target: logging.Logger | None = None,
    to_string: Callable[[Any], str] = str,
) -> None:
    """Log a Problem on one line: defects at ERROR, failures at WARNING."""
    level = logging.ERROR if problem.is_defect else logging.WARNING
    (target or logger).log(level, print_line(problem, to_string))
