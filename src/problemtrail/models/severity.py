from enum import Enum


class Severity(str, Enum):
    """Classification of a Problem; the value doubles as its display label."""

    DEFECT = "Defect"
    FAILURE = "Failure"


class EntryKind(str, Enum):
    """Kind of a single step recorded on a Problem's stack."""

    CONTEXT = "Context"
    DEFECT = "Defect"
    FAILURE = "Failure"

    @classmethod
    def for_severity(cls, severity: Severity) -> "EntryKind":
        """Entry kind recording an occurrence of the given severity."""
        return cls(severity.value)
