"""Immutable registry mapping constraint names to constraints."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, override

from loguru import logger

from tagwarden.validators import BUILTIN_CONSTRAINTS

if TYPE_CHECKING:
  from collections.abc import Iterable

  from tagwarden.base import Constraint


class Registry(Mapping[str, "Constraint"]):
  """Read-only name -> Constraint mapping.

  A registry is never mutated once built. Adding constraints goes through
  ``extend``, which returns a new registry and leaves this one untouched, so
  a registry can be shared freely between concurrent validations.

  Example:
    ```python
    Even = Constraint("even", check_int=lambda v, _: v % 2 == 0,
                      check_str=lambda v, _: len(v) % 2 == 0)
    registry = DEFAULT_REGISTRY.extend(Even)
    validate(record, registry=registry)
    ```
  """

  def __init__(self, constraints: Iterable[Constraint] = ()) -> None:
    super().__init__()
    table: dict[str, Constraint] = {}
    for constraint in constraints:
      table[constraint.name] = constraint
    self._table = MappingProxyType(table)

  def lookup(self, name: str) -> Constraint | None:
    """Return the constraint registered under ``name``, or None."""
    return self._table.get(name)

  def extend(self, *constraints: Constraint) -> Registry:
    """Return a new registry with ``constraints`` added.

    A constraint whose name is already registered replaces the existing one
    in the new registry.
    """
    for constraint in constraints:
      if constraint.name in self._table:
        logger.warning(
          "Constraint '{}' replaces an already registered constraint",
          constraint.name,
        )
    return Registry([*self._table.values(), *constraints])

  @override
  def __getitem__(self, name: str) -> Constraint:
    return self._table[name]

  @override
  def __iter__(self) -> Iterator[str]:
    return iter(self._table)

  @override
  def __len__(self) -> int:
    return len(self._table)

  @override
  def __repr__(self) -> str:
    return f"Registry({sorted(self._table)!r})"


DEFAULT_REGISTRY = Registry(BUILTIN_CONSTRAINTS)


def lookup(name: str) -> Constraint | None:
  """Look up a constraint in the default registry."""
  return DEFAULT_REGISTRY.lookup(name)
