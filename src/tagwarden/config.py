"""Process-wide settings read by the engine and by @validate_args."""

from __future__ import annotations

import contextlib
import dataclasses
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
  from collections.abc import Iterator


@dataclasses.dataclass
class Config:
  """Settings consulted at validation time, not at import time.

  Attributes:
    tag_key: Dataclass metadata key that holds a field's tag.
    inherit_tags: If True, a leaf is checked against the tags of every
      enclosing record field, outermost first. If False, only the tag of the
      field that holds it (or holds its sequence) applies.
    skip_validation: Default of the ``skip_validation`` flag of
      @validate_args when the decorator leaves it undecided.
    warn_only: Default of the ``warn_only`` flag of @validate_args when the
      decorator leaves it undecided.
  """

  tag_key: str = "validate"
  inherit_tags: bool = False
  skip_validation: bool = False
  warn_only: bool = False


_config = Config()


def get_config() -> Config:
  """Return the live settings object. Mutations apply immediately."""
  return _config


def reset_config() -> None:
  """Replace the settings with a fresh default Config."""
  global _config
  _config = Config()


@contextlib.contextmanager
def overrides(**kwargs: Any) -> Iterator[None]:
  """Apply settings for the duration of a block.

  Every key is checked before any is applied, so a misspelled key leaves the
  settings untouched.

  Example:
    ```python
    with overrides(inherit_tags=True):
      errors = validate(order)
    ```

  Raises:
    AttributeError: If a key is not a Config field.
  """
  unknown = [key for key in kwargs if not hasattr(_config, key)]
  if unknown:
    raise AttributeError(f"Config has no attribute '{unknown[0]}'")

  previous = {key: getattr(_config, key) for key in kwargs}
  for key, value in kwargs.items():
    setattr(_config, key, value)
  try:
    yield
  finally:
    for key, value in previous.items():
      setattr(_config, key, value)
