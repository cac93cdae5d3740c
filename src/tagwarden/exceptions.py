"""Custom exceptions for tagwarden."""

from __future__ import annotations

from typing import TYPE_CHECKING, override

if TYPE_CHECKING:
  from collections.abc import Iterable, Iterator


class TagwardenError(Exception):
  """Base class for every error raised or returned by tagwarden."""


class NotStructError(TagwardenError, TypeError):
  """Raised when the root value handed to the engine is not a record."""

  def __init__(self) -> None:
    super().__init__("wrong argument given, should be a struct")


class StructuralError(TagwardenError):
  """An error in the schema rather than in the data. Aborts the whole pass."""

  message = ""

  def __init__(self, detail: str | None = None) -> None:
    self.detail = detail
    msg = f"{self.message}: {detail}" if detail else self.message
    super().__init__(msg)


class InvalidValidatorSyntaxError(StructuralError, ValueError):
  """Malformed tag, unknown constraint name or unparsable argument."""

  message = "invalid validator syntax"


class UnexportedFieldError(StructuralError):
  """A non-public field carries a tag."""

  message = "validation for unexported field is not allowed"


class UnsupportedTypeError(StructuralError, TypeError):
  """A tagged scalar is neither integral nor text."""

  message = "unsupported type"

  def __init__(self, value: object) -> None:
    self.value_type = type(value)
    self.detail = self.value_type.__name__
    TagwardenError.__init__(self, f"{self.message} {self.detail}")


class ValidationError(TagwardenError):
  """A single entry of a ValidationErrors collection.

  Either a constraint failure (``path`` and ``constraint`` set) or the
  structural error that aborted the pass (``cause`` set).
  """

  def __init__(
    self,
    cause: Exception | str,
    *,
    path: str | None = None,
    constraint: str | None = None,
  ) -> None:
    self.cause = cause if isinstance(cause, Exception) else None
    self.path = path
    self.constraint = constraint
    super().__init__(str(cause))

  @classmethod
  def failed(cls, path: str, constraint: str) -> ValidationError:
    """Build the entry for a constraint that evaluated to False."""
    return cls(
      f'{path}: validation failed for "{constraint}" tag',
      path=path,
      constraint=constraint,
    )

  @property
  def is_structural(self) -> bool:
    return isinstance(self.cause, StructuralError)

  @override
  def __eq__(self, other: object) -> bool:
    if not isinstance(other, ValidationError):
      return NotImplemented
    return (self.path, self.constraint, str(self)) == (
      other.path,
      other.constraint,
      str(other),
    )

  @override
  def __hash__(self) -> int:
    return hash((self.path, self.constraint, str(self)))

  @override
  def __repr__(self) -> str:
    return f"ValidationError({str(self)!r})"


class ValidationErrors(TagwardenError, ValueError):
  """Ordered collection of ValidationError entries.

  The string form joins every entry's message, so the collection can be
  logged or raised as one error while still being iterable entry by entry.
  """

  def __init__(self, errors: Iterable[ValidationError]) -> None:
    self.errors: list[ValidationError] = list(errors)
    super().__init__("; ".join(str(e) for e in self.errors))

  @property
  def is_structural(self) -> bool:
    """True when the pass was aborted by a schema error."""
    return len(self.errors) == 1 and self.errors[0].is_structural

  def __len__(self) -> int:
    return len(self.errors)

  def __iter__(self) -> Iterator[ValidationError]:
    return iter(self.errors)

  def __getitem__(self, index: int) -> ValidationError:
    return self.errors[index]

  @override
  def __eq__(self, other: object) -> bool:
    if not isinstance(other, ValidationErrors):
      return NotImplemented
    return self.errors == other.errors

  @override
  def __hash__(self) -> int:
    return hash(tuple(self.errors))

  @override
  def __repr__(self) -> str:
    return f"ValidationErrors({self.errors!r})"
