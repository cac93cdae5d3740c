"""Structural traversal: applies field tags across nested records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from tagwarden.config import get_config
from tagwarden.exceptions import (
  InvalidValidatorSyntaxError,
  NotStructError,
  StructuralError,
  TagwardenError,
  UnexportedFieldError,
  ValidationError,
  ValidationErrors,
)
from tagwarden.grammar import parse_tag
from tagwarden.registry import DEFAULT_REGISTRY
from tagwarden.schema import is_record, record_fields
from tagwarden.utils import format_field, format_index, is_sequence, iter_sequence

if TYPE_CHECKING:
  from tagwarden.registry import Registry


class _Walker:
  """One validation pass over a record tree.

  Constraint failures accumulate in ``errors``; structural errors propagate
  out of ``walk`` and end the pass.
  """

  def __init__(self, registry: Registry, tag_key: str, inherit_tags: bool) -> None:
    self.registry = registry
    self.tag_key = tag_key
    self.inherit_tags = inherit_tags
    self.errors: list[ValidationError] = []

  def walk(self, value: Any, tags: tuple[str, ...], path: str) -> None:
    if is_record(value):
      self._walk_record(value, tags, path)
    elif is_sequence(value):
      # Elements reuse the tags of the sequence field itself
      for i, item in enumerate(iter_sequence(value)):
        self.walk(item, tags, format_index(path, i))
    else:
      self._check_leaf(value, tags, path)

  def _walk_record(self, record: Any, tags: tuple[str, ...], path: str) -> None:
    for spec, field_value in record_fields(record, self.tag_key):
      field_path = format_field(path, spec.name)
      if spec.tag is not None and not spec.exported:
        raise UnexportedFieldError(field_path)
      own = spec.tag or ""
      field_tags = (*tags, own) if self.inherit_tags else (own,)
      self.walk(field_value, field_tags, field_path)

  def _check_leaf(self, value: Any, tags: tuple[str, ...], path: str) -> None:
    for tag in tags:
      if not tag:
        continue
      for clause in parse_tag(tag):
        constraint = self.registry.lookup(clause.name)
        if constraint is None:
          raise InvalidValidatorSyntaxError(f'unsupported tag "{clause.name}"')
        if not constraint.evaluate(value, clause.args):
          self.errors.append(ValidationError.failed(path, clause.name))


def check(value: Any, *, registry: Registry | None = None) -> None:
  """Validate a record, raising on any failure.

  Args:
    value: The record to validate (dataclass or NamedTuple instance).
    registry: Constraints to resolve tag names against. Defaults to the
      built-in registry.

  Raises:
    NotStructError: If ``value`` is not a record.
    ValidationErrors: With a single entry wrapping the cause when a schema
      error (bad tag, unknown constraint, tagged non-public field, unsupported
      scalar type) aborted the pass, or with one entry per failed constraint.
  """
  if not is_record(value):
    raise NotStructError()

  if registry is None:
    registry = DEFAULT_REGISTRY
  config = get_config()
  walker = _Walker(registry, config.tag_key, config.inherit_tags)
  try:
    walker.walk(value, (), "")
  except StructuralError as e:
    raise ValidationErrors([ValidationError(e)]) from e

  if walker.errors:
    raise ValidationErrors(walker.errors)


def validate(value: Any, *, registry: Registry | None = None) -> TagwardenError | None:
  """Validate a record and return the error instead of raising it.

  Returns:
    None when every constraint holds, otherwise the NotStructError or
    ValidationErrors that ``check`` would raise.
  """
  try:
    check(value, registry=registry)
  except TagwardenError as e:
    return e
  return None
