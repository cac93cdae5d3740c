"""Utility functions for tagwarden."""

from __future__ import annotations

from collections.abc import Sequence
import re
from typing import TYPE_CHECKING, Any

import numpy as np
import pandas as pd

from tagwarden.exceptions import InvalidValidatorSyntaxError

if TYPE_CHECKING:
  from collections.abc import Iterator

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Text-like sequences are scalars, not collections of characters
_TEXT_TYPES = (str, bytes, bytearray)


def parse_int(arg: str) -> int:
  """Parse a base-10 constraint argument.

  Raises:
    InvalidValidatorSyntaxError: If the argument is not an optionally signed
      run of ASCII digits.
  """
  if _INT_PATTERN.fullmatch(arg) is None:
    raise InvalidValidatorSyntaxError(f"{arg!r} is not an integer")
  return int(arg)


def split_set(arg: str) -> list[str]:
  """Split a comma-separated set argument, keeping empty members."""
  return arg.split(",")


def is_sequence(value: object) -> bool:
  """Check if a value is an ordered, indexable collection.

  Text is never a sequence. NumPy arrays (of at least one dimension) and
  pandas Series/Index count as sequences.
  """
  if isinstance(value, np.ndarray):
    return value.ndim > 0
  if isinstance(value, (pd.Series, pd.Index)):
    return True
  return isinstance(value, Sequence) and not isinstance(value, _TEXT_TYPES)


def iter_sequence(value: Any) -> Iterator[Any]:
  """Yield the elements of a sequence in positional order."""
  if isinstance(value, pd.Series):
    # Positional access; the Series index labels are not part of the path
    for i in range(len(value)):
      yield value.iloc[i]
    return
  yield from value


def format_index(path: str, index: int) -> str:
  return f"{path}[{index}]"


def format_field(path: str, name: str) -> str:
  return f"{path}.{name}"
