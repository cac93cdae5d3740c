"""Parser for tag expressions.

A tag is a ``;``-separated list of ``name:args`` clauses::

  tag    := clause (';' clause)*
  clause := name ':' args
  name   := [a-z]+
  args   := [A-Za-z0-9:,-]*

The whole string must match; whitespace is not tolerated anywhere.
"""

from __future__ import annotations

import re
from typing import NamedTuple

from tagwarden.exceptions import InvalidValidatorSyntaxError

_CLAUSE = r"[a-z]+:[A-Za-z0-9:,-]*"
TAG_PATTERN = re.compile(rf"{_CLAUSE}(?:;{_CLAUSE})*")


class Clause(NamedTuple):
  """One ``name:args`` clause of a tag."""

  name: str
  args: str


def parse_tag(tag: str) -> list[Clause]:
  """Parse a tag into its clauses, in source order.

  An empty tag has no clauses.

  Raises:
    InvalidValidatorSyntaxError: If the tag does not match the grammar.
  """
  if not tag:
    return []
  if TAG_PATTERN.fullmatch(tag) is None:
    raise InvalidValidatorSyntaxError(f"malformed tag {tag!r}")
  clauses = []
  for part in tag.split(";"):
    # Names never contain ':', so the first one ends the name
    name, _, args = part.partition(":")
    clauses.append(Clause(name, args))
  return clauses
