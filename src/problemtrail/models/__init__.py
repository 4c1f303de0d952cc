"""Value types: severities, stack entries and the Problem envelope."""

from .problem import Origin, Problem
from .severity import EntryKind, Severity
from .stack_entry import StackEntry

__all__ = ["EntryKind", "Origin", "Problem", "Severity", "StackEntry"]
