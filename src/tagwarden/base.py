"""Base classes for constraints."""

from __future__ import annotations

import dataclasses
from enum import Enum
import re
from typing import TYPE_CHECKING, Any

import numpy as np

from tagwarden.exceptions import UnsupportedTypeError

if TYPE_CHECKING:
  from tagwarden.protocols import Evaluator

NAME_PATTERN = re.compile(r"[a-z]+")


class ScalarKind(Enum):
  """The two scalar kinds a constraint knows how to evaluate."""

  INTEGRAL = "integral"
  TEXT = "text"


def classify(value: object) -> tuple[ScalarKind, int | str]:
  """Classify a scalar leaf and normalize it to a plain int or str.

  Booleans are not integral even though ``bool`` subclasses ``int``.

  Raises:
    UnsupportedTypeError: If the value is neither integral nor text.
  """
  if isinstance(value, (bool, np.bool_)):
    raise UnsupportedTypeError(value)
  if isinstance(value, (int, np.integer)):
    return ScalarKind.INTEGRAL, int(value)
  if isinstance(value, str):
    return ScalarKind.TEXT, str(value)
  raise UnsupportedTypeError(value)


@dataclasses.dataclass(frozen=True)
class Constraint:
  """A named constraint with one evaluator slot per scalar kind.

  Attributes:
    name: Lowercase name used in tags, e.g. ``min``.
    check_int: Evaluator for integral values.
    check_str: Evaluator for text values.
  """

  name: str
  check_int: Evaluator[int]
  check_str: Evaluator[str]

  def __post_init__(self) -> None:
    if NAME_PATTERN.fullmatch(self.name) is None:
      raise ValueError(
        f"Constraint name must be lowercase ASCII letters, got {self.name!r}"
      )

  def evaluate(self, value: Any, args: str) -> bool:
    """Evaluate the constraint against a scalar value.

    An empty argument string is a failed check, whatever the value.

    Raises:
      UnsupportedTypeError: If the value is neither integral nor text.
      InvalidValidatorSyntaxError: If the argument cannot be parsed.
    """
    if not args:
      return False
    kind, scalar = classify(value)
    match kind:
      case ScalarKind.INTEGRAL:
        return self.check_int(scalar, args)  # type: ignore[arg-type]
      case ScalarKind.TEXT:
        return self.check_str(scalar, args)  # type: ignore[arg-type]
