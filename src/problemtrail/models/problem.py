"""
problem.py – the error envelope
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
A Problem pairs an application error with a severity and the trail of steps
it went through on its way up the call stack. Problems are frozen: every
operation returns a new Problem that shares the untouched parts of the old one.

Severity rules
--------------
* A defect is sticky: a later failure is recorded but never downgrades it.
* The first defect wins: a later defect is recorded but keeps the error.
* A failure is replaced by any later defect or failure.
"""

from __future__ import annotations

import logging
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .severity import Severity
from .stack_entry import StackEntry

logger = logging.getLogger(__name__)

E = TypeVar("E")


class Origin(BaseModel):
    """Severity and error a Problem was created with, before any coercion."""

    severity: Severity
    error: Any = None

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class Problem(BaseModel, Generic[E]):
    """Application error with a severity and a most-recent-first trail."""

    error: E = Field(..., description="Current effective error value.")
    severity: Severity = Field(
        ..., description="Current classification, after any coercion."
    )
    stack: tuple[StackEntry, ...] = Field(
        ...,
        min_length=1,
        description="Recorded steps, most recent first. Never empty.",
    )
    original: Origin | None = Field(
        default=None,
        description=(
            "Constructed severity and error, kept once a coercion has "
            "replaced either of them."
        ),
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    # ----- construction ------------------------------------------------------
    @classmethod
    def defect(cls, error: E) -> Self:
        """Unexpected internal error; its message must not reach end users."""
        return cls._create(Severity.DEFECT, error)

    @classmethod
    def failure(cls, error: E) -> Self:
        """Expected, recoverable error that is safe to surface."""
        return cls._create(Severity.FAILURE, error)

    @classmethod
    def _create(cls, severity: Severity, error: E) -> Self:
        return cls(
            error=error,
            severity=severity,
            stack=(StackEntry.occurrence(severity, error),),
        )

    @property
    def is_defect(self) -> bool:
        return self.severity is Severity.DEFECT

    @property
    def is_failure(self) -> bool:
        return self.severity is Severity.FAILURE

    # ----- trail -------------------------------------------------------------
    def with_context(self, text: str) -> Self:
        """Record where the error passed; severity and error are unchanged."""
        return self._push(StackEntry.context(text))

    def with_defect(self, error: E) -> Self:
        entry = StackEntry.defect(error)
        if self.is_defect:
            logger.debug("Defect already recorded, keeping the first one")
            return self._push(entry)
        logger.debug("Failure escalated to defect")
        return self._push(entry, severity=Severity.DEFECT, error=error)

    def with_failure(self, error: E) -> Self:
        entry = StackEntry.failure(error)
        if self.is_defect:
            logger.debug("Failure recorded on a defect, severity kept")
            return self._push(entry)
        return self._push(entry, error=error)

    # ----- forced coercion ---------------------------------------------------
    def to_defect(self) -> Self:
        """Reclassify as a defect without recording a step."""
        return self._coerce(Severity.DEFECT)

    def to_failure(self) -> Self:
        """Reclassify as a failure without recording a step."""
        return self._coerce(Severity.FAILURE)

    # ----- extraction --------------------------------------------------------
    def unwrap_failure(self, default: Any) -> Any:
        """
        Return the error if this is a failure, otherwise ``default``.

        This is the sanctioned way to obtain something displayable to an end
        user: a defect's error is never returned.
        """
        return self.error if self.is_failure else default

    def __str__(self) -> str:
        from ..rendering import print_line

        return print_line(self)

    # ----- helpers -----------------------------------------------------------
    def _origin(self) -> Origin:
        if self.original is not None:
            return self.original
        return Origin(severity=self.severity, error=self.error)

    def _coerce(self, severity: Severity) -> Self:
        if self.severity is severity:
            return self
        logger.debug(
            "Coercing %s to %s", self.severity.value, severity.value
        )
        return self.model_copy(
            update={"severity": severity, "original": self._origin()}
        )

    def _push(self, entry: StackEntry, **changes: Any) -> Self:
        update: dict[str, Any] = {"stack": (entry, *self.stack)}
        if changes:
            update.update(changes)
            update["original"] = self._origin()
        return self.model_copy(update=update)
