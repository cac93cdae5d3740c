"""Record introspection: field names, visibility and tags.

Records are dataclass instances and ``NamedTuple`` instances. A field's tag
comes from its dataclass metadata (under ``Config.tag_key``) or from a
``Tag`` marker in its ``Annotated`` type hint.
"""

from __future__ import annotations

import dataclasses
import inspect
import sys
import typing
from typing import TYPE_CHECKING, Annotated, Any, get_args, get_origin

from tagwarden.config import get_config

if TYPE_CHECKING:
  from collections.abc import Iterator


@dataclasses.dataclass(frozen=True)
class Tag:
  """Annotated marker carrying a tag expression.

  Example:
    ```python
    @dataclass
    class User:
      age: Annotated[int, Tag("min:18;max:65")]
    ```
  """

  expr: str


@dataclasses.dataclass(frozen=True)
class FieldSpec:
  """Description of one record field.

  Attributes:
    name: Attribute name.
    tag: The field's tag, or None when the field has none. An empty string is
      a present but empty tag.
  """

  name: str
  tag: str | None

  @property
  def exported(self) -> bool:
    return not self.name.startswith("_")


def tagged(expr: str, **kwargs: Any) -> Any:
  """Shorthand for a dataclass field carrying a tag in its metadata.

  Extra keyword arguments are passed to ``dataclasses.field``.
  """
  metadata = dict(kwargs.pop("metadata", None) or {})
  metadata[get_config().tag_key] = expr
  return dataclasses.field(metadata=metadata, **kwargs)


def is_namedtuple(value: object) -> bool:
  return isinstance(value, tuple) and hasattr(type(value), "_fields")


def is_record(value: object) -> bool:
  """Check if a value is a record instance (not a record class)."""
  if isinstance(value, type):
    return False
  return dataclasses.is_dataclass(value) or is_namedtuple(value)


def _annotated_tag(hint: object) -> str | None:
  if get_origin(hint) is not Annotated:
    return None
  for item in get_args(hint)[1:]:
    if isinstance(item, Tag):
      return item.expr
  return None


def _resolve_hints(record_type: type) -> dict[str, Any]:
  """Resolve the field annotations of a record type, keeping Annotated extras.

  An annotation naming something that does not exist at runtime (a name
  imported under ``TYPE_CHECKING``, a class defined later in a function)
  is left out of the result instead of failing the whole type.
  """
  try:
    return typing.get_type_hints(record_type, include_extras=True)
  except NameError:
    pass

  hints: dict[str, Any] = {}
  for owner in reversed(record_type.__mro__):
    try:
      annotations = inspect.get_annotations(owner)
    except NameError:
      continue
    module = sys.modules.get(owner.__module__)
    global_ns = dict(vars(module)) if module is not None else {}
    local_ns = dict(vars(owner))
    for name, hint in annotations.items():
      if isinstance(hint, str):
        try:
          hint = eval(hint, global_ns, local_ns)  # noqa: S307
        except NameError:
          hints.pop(name, None)
          continue
      hints[name] = hint
  return hints


def describe_record(record_type: type, tag_key: str | None = None) -> list[FieldSpec]:
  """Describe the fields of a record type in declaration order.

  Type hints are only resolved when some field has no metadata tag. A field
  whose hint cannot be resolved is treated as untagged.

  Args:
    record_type: A dataclass or NamedTuple class.
    tag_key: Metadata key holding dataclass tags. Defaults to ``Config.tag_key``.

  Returns:
    One FieldSpec per field.
  """
  if tag_key is None:
    tag_key = get_config().tag_key
  hints: dict[str, Any] | None = None

  if dataclasses.is_dataclass(record_type):
    specs = []
    for f in dataclasses.fields(record_type):
      tag = f.metadata.get(tag_key)
      if tag is None:
        if hints is None:
          hints = _resolve_hints(record_type)
        tag = _annotated_tag(hints.get(f.name))
      specs.append(FieldSpec(f.name, tag))
    return specs

  hints = _resolve_hints(record_type)
  names: tuple[str, ...] = getattr(record_type, "_fields", ())
  return [FieldSpec(name, _annotated_tag(hints.get(name))) for name in names]


def record_fields(
  record: Any, tag_key: str | None = None
) -> Iterator[tuple[FieldSpec, Any]]:
  """Yield ``(FieldSpec, value)`` pairs for a record instance."""
  for spec in describe_record(type(record), tag_key):
    yield spec, getattr(record, spec.name)
