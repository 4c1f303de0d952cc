from collections.abc import Callable
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .severity import EntryKind, Severity


class StackEntry(BaseModel):
    """
    One recorded step in a Problem's trail.

    Context entries carry free text describing where the error passed.
    Defect and Failure entries carry the error payload that was recorded.
    """

    kind: EntryKind = Field(..., description="What this step records.")
    text: str | None = Field(
        default=None,
        description="Annotation text. Set only on Context entries.",
    )
    payload: Any = Field(
        default=None,
        description="Recorded error value. Set only on Defect/Failure entries.",
    )

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @model_validator(mode="after")
    def _shape_matches_kind(self) -> Self:
        if self.kind is EntryKind.CONTEXT:
            if self.text is None:
                raise ValueError("Context entries must carry text")
            if self.payload is not None:
                raise ValueError("Context entries cannot carry a payload")
        elif self.text is not None:
            raise ValueError(f"{self.kind.value} entries cannot carry text")
        return self

    @classmethod
    def context(cls, text: str) -> "StackEntry":
        return cls(kind=EntryKind.CONTEXT, text=text)

    @classmethod
    def defect(cls, payload: Any) -> "StackEntry":
        return cls(kind=EntryKind.DEFECT, payload=payload)

    @classmethod
    def failure(cls, payload: Any) -> "StackEntry":
        return cls(kind=EntryKind.FAILURE, payload=payload)

    @classmethod
    def occurrence(cls, severity: Severity, payload: Any) -> "StackEntry":
        """Entry recording an error of the given severity."""
        return cls(kind=EntryKind.for_severity(severity), payload=payload)

    def render(self, to_string: Callable[[Any], str] = str) -> str:
        """Display text for this entry; context text is shown bare."""
        if self.kind is EntryKind.CONTEXT:
            return self.text  # type: ignore[return-value]
        return f"{self.kind.value}: {to_string(self.payload)}"
