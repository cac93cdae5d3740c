"""Value constraints: ``len`` and ``in``."""

from __future__ import annotations

from tagwarden.base import Constraint
from tagwarden.utils import parse_int, split_set


def _len_int(value: int, args: str) -> bool:
  # Integers have no length; the clause is accepted and ignored
  return True


def _len_str(value: str, args: str) -> bool:
  return len(value) == parse_int(args)


def _in_int(value: int, args: str) -> bool:
  """Check membership in a comma-separated integer set.

  Members are parsed left to right and the scan stops at the first match, so a
  malformed member after a matching one is never looked at.
  """
  for member in split_set(args):
    if value == parse_int(member):
      return True
  return False


def _in_str(value: str, args: str) -> bool:
  return value in split_set(args)


Len = Constraint("len", check_int=_len_int, check_str=_len_str)
In = Constraint("in", check_int=_in_int, check_str=_in_str)
