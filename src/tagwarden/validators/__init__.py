"""Re-export the built-in constraints."""

from tagwarden.validators.comparison import Max, Min
from tagwarden.validators.value import In, Len

BUILTIN_CONSTRAINTS = (Len, In, Min, Max)

__all__ = [
  "BUILTIN_CONSTRAINTS",
  "In",
  "Len",
  "Max",
  "Min",
]
