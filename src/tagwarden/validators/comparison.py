"""Bound constraints: ``min`` and ``max``.

On integral values the bound applies to the value itself, on text values to
its character count.
"""

from __future__ import annotations

from tagwarden.base import Constraint
from tagwarden.utils import parse_int


def _min_int(value: int, args: str) -> bool:
  return value >= parse_int(args)


def _min_str(value: str, args: str) -> bool:
  return len(value) >= parse_int(args)


def _max_int(value: int, args: str) -> bool:
  return value <= parse_int(args)


def _max_str(value: str, args: str) -> bool:
  return len(value) <= parse_int(args)


Min = Constraint("min", check_int=_min_int, check_str=_min_str)
Max = Constraint("max", check_int=_max_int, check_str=_max_str)
