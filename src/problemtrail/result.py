"""
result.py – plain success/error results
~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~~
``Ok`` and ``Err`` are the two branches of a ``Result``. An ``Outcome`` is a
``Result`` whose error branch holds a Problem.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field
from typing_extensions import TypeAliasType

from .exceptions import UnwrapError
from .models.problem import E, Problem

T = TypeVar("T")


class Ok(BaseModel, Generic[T]):
    """Success branch."""

    value: T = Field(..., description="The successful result.")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def is_ok(self) -> bool:
        return True

    def is_err(self) -> bool:
        return False

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: Any) -> T:
        return self.value


class Err(BaseModel, Generic[E]):
    """Error branch."""

    error: E = Field(..., description="The error value, or a Problem.")

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def is_ok(self) -> bool:
        return False

    def is_err(self) -> bool:
        return True

    def unwrap(self) -> Any:
        raise UnwrapError(self.error)

    def unwrap_or(self, default: Any) -> Any:
        return default


# Parametrized pydantic models are classes, which a plain Union alias does not
# collect type parameters from; TypeAliasType declares them explicitly.
# Test branches at runtime with isinstance(x, Ok) / isinstance(x, Err).
Result = TypeAliasType("Result", Union[Ok[T], Err[E]], type_params=(T, E))
Outcome = TypeAliasType(
    "Outcome", Union[Ok[T], Err[Problem[E]]], type_params=(T, E)
)
