"""Protocols for tagwarden constraints."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Evaluator[T](Protocol):
  """Protocol for one evaluator slot of a constraint."""

  def __call__(self, value: T, args: str, /) -> bool:
    """Check the value against the raw argument string of a clause.

    Raises InvalidValidatorSyntaxError when the argument cannot be parsed.
    """
    ...
