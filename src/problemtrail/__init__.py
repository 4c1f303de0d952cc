"""
Package façade – a single import gives users everything they need:

    from problemtrail import Err, into_failure, with_context, pretty_print

    outcome = with_context(into_failure(Err(error="Invalid email")), "in validate_email")
    print(pretty_print(outcome.error))

Design
------
* Problems are frozen pydantic models; operations return new values.
* Outcome operations never raise; the success branch always passes through.
"""

from __future__ import annotations

from .exceptions import ProblemTrailError, UnwrapError
from .models import EntryKind, Origin, Problem, Severity, StackEntry
from .outcome import (
    attempt,
    extract_error,
    into_defect,
    into_failure,
    new_defect,
    new_failure,
    to_defect,
    to_failure,
    unwrap_failure,
    with_context,
    with_defect,
    with_failure,
)
from .rendering import DEFAULT_STYLE, RenderStyle, log_problem, pretty_print, print_line
from .result import Err, Ok, Outcome, Result

__all__ = [
    # Values
    "EntryKind",
    "Origin",
    "Problem",
    "Severity",
    "StackEntry",
    # Results
    "Err",
    "Ok",
    "Outcome",
    "Result",
    # Operations
    "attempt",
    "extract_error",
    "into_defect",
    "into_failure",
    "new_defect",
    "new_failure",
    "to_defect",
    "to_failure",
    "unwrap_failure",
    "with_context",
    "with_defect",
    "with_failure",
    # Rendering
    "DEFAULT_STYLE",
    "RenderStyle",
    "log_problem",
    "pretty_print",
    "print_line",
    # Exceptions
    "ProblemTrailError",
    "UnwrapError",
]
