"""Tagwarden - declarative record validation driven by field tags."""

__version__ = "0.1.0"

# Constraints and registry
from tagwarden.base import Constraint, ScalarKind

# Configuration
from tagwarden.config import get_config, overrides, reset_config

# Decorator
from tagwarden.decorator import validate_args

# Entry points
from tagwarden.engine import check, validate

# Exceptions
from tagwarden.exceptions import (
  InvalidValidatorSyntaxError,
  NotStructError,
  StructuralError,
  TagwardenError,
  UnexportedFieldError,
  UnsupportedTypeError,
  ValidationError,
  ValidationErrors,
)

# Grammar
from tagwarden.grammar import Clause, parse_tag
from tagwarden.registry import DEFAULT_REGISTRY, Registry, lookup

# Record tags
from tagwarden.schema import Tag, tagged

__all__ = [
  "DEFAULT_REGISTRY",
  "Clause",
  "Constraint",
  "InvalidValidatorSyntaxError",
  "NotStructError",
  "Registry",
  "ScalarKind",
  "StructuralError",
  "Tag",
  "TagwardenError",
  "UnexportedFieldError",
  "UnsupportedTypeError",
  "ValidationError",
  "ValidationErrors",
  "__version__",
  "check",
  "get_config",
  "lookup",
  "overrides",
  "parse_tag",
  "reset_config",
  "tagged",
  "validate",
  "validate_args",
]
