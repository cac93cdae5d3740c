"""The @validate_args decorator for automatic record argument validation."""

from __future__ import annotations

import functools
import inspect
import typing
from typing import TYPE_CHECKING, Any, ParamSpec, overload

from loguru import logger

from tagwarden.config import get_config
from tagwarden.engine import validate
from tagwarden.schema import is_record

if TYPE_CHECKING:
  from collections.abc import Callable, Iterator, Mapping

  from tagwarden.registry import Registry

P = ParamSpec("P")
R = typing.TypeVar("R")


def _record_arguments(
  sig: inspect.Signature, arguments: Mapping[str, Any]
) -> Iterator[tuple[str, Any]]:
  """Yield ``(label, record)`` for every record among the bound arguments.

  Records collected by ``*args`` are labelled ``name[i]``, records collected
  by ``**kwargs`` are labelled ``name[key]``.
  """
  for name, value in arguments.items():
    kind = sig.parameters[name].kind
    if kind is inspect.Parameter.VAR_POSITIONAL:
      items = ((f"{name}[{i}]", item) for i, item in enumerate(value))
    elif kind is inspect.Parameter.VAR_KEYWORD:
      items = ((f"{name}[{key}]", item) for key, item in value.items())
    else:
      items = iter(((name, value),))
    for label, item in items:
      if is_record(item):
        yield label, item


@overload
def validate_args[**P, R](
  func: Callable[P, R],
) -> Callable[P, R]: ...


@overload
def validate_args[**P, R](
  *,
  skip_validation_by_default: bool | None = None,
  warn_only_by_default: bool | None = None,
  registry: Registry | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R | None]]: ...


def validate_args[**P, R](
  func: Callable[P, R] | None = None,
  *,
  skip_validation_by_default: bool | None = None,
  warn_only_by_default: bool | None = None,
  registry: Registry | None = None,
) -> Callable[P, R | None] | Callable[[Callable[P, R]], Callable[P, R | None]]:
  """Decorator validating every record argument of a function before each call.

  Records collected by ``*args`` and ``**kwargs`` are validated one by one.
  Arguments that are not records (dataclass or NamedTuple instances) are
  passed through untouched.

  The decorated function accepts two extra keyword flags unless its own
  signature already defines them, in which case they are passed through:

  - ``skip_validation``: skip validation for this call.
  - ``warn_only``: log failures via loguru and return None instead of raising.

  Args:
    func: The function to decorate.
    skip_validation_by_default: Default for ``skip_validation``. If None, uses
      the global configuration.
    warn_only_by_default: Default for ``warn_only``. If None, uses the global
      configuration.
    registry: Constraints to validate against. Defaults to the built-in ones.

  Returns:
    The decorated function.
  """

  def decorator(
    func: Callable[P, R],
  ) -> Callable[P, R | None]:
    sig = inspect.signature(func)
    own_params = set(sig.parameters)

    def pop_flag(kwargs: dict[str, Any], name: str, default: bool | None) -> bool:
      if name in own_params:
        value = kwargs.get(name, default)
      elif name in kwargs:
        value = kwargs.pop(name)
      else:
        value = default
      if value is None:
        value = getattr(get_config(), name)
      return bool(value)

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R | None:
      if pop_flag(kwargs, "skip_validation", skip_validation_by_default):
        if "warn_only" not in own_params:
          kwargs.pop("warn_only", None)
        return func(*args, **kwargs)
      warn_only = pop_flag(kwargs, "warn_only", warn_only_by_default)

      bound = sig.bind(*args, **kwargs)
      bound.apply_defaults()

      for name, value in _record_arguments(sig, bound.arguments):
        error = validate(value, registry=registry)
        if error is None:
          continue
        msg = f"Validation failed for parameter '{name}' in '{func.__name__}': {error}"
        if warn_only:
          logger.error(msg)
          return None
        raise error

      return func(*args, **kwargs)

    return wrapper

  if func is None:
    return decorator

  return decorator(func)
