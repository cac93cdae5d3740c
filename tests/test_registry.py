"""Tests for the constraint registry."""

from loguru import logger
import pytest

from tagwarden import DEFAULT_REGISTRY, Constraint, Registry, lookup
from tagwarden.protocols import Evaluator
from tagwarden.validators import In, Len, Max, Min


def _always(value, args):
  return True


class TestRegistry:
  """Tests for Registry and lookup."""

  def test_builtin_constraints_are_registered(self):
    """Test that the default registry holds len, in, min and max."""
    assert set(DEFAULT_REGISTRY) == {"len", "in", "min", "max"}
    assert lookup("len") is Len
    assert lookup("in") is In
    assert lookup("min") is Min
    assert lookup("max") is Max

  def test_lookup_unknown_returns_none(self):
    """Test that unknown and differently cased names are not found."""
    assert lookup("foo") is None
    assert lookup("MIN") is None
    assert lookup("") is None

  def test_registry_is_read_only(self):
    """Test that the mapping cannot be mutated in place."""
    with pytest.raises(TypeError):
      DEFAULT_REGISTRY["foo"] = Len  # type: ignore[index]
    with pytest.raises(TypeError):
      DEFAULT_REGISTRY._table["foo"] = Len  # type: ignore[index]

  def test_extend_returns_new_registry(self):
    """Test that extend leaves the original untouched."""
    extra = Constraint("always", check_int=_always, check_str=_always)
    extended = DEFAULT_REGISTRY.extend(extra)
    assert extended.lookup("always") is extra
    assert extended.lookup("min") is Min
    assert DEFAULT_REGISTRY.lookup("always") is None
    assert len(extended) == len(DEFAULT_REGISTRY) + 1

  def test_extend_replacing_name_logs_warning(self):
    """Test that replacing a built-in is allowed but logged."""
    logs = []
    handler_id = logger.add(logs.append, format="{level} {message}")
    try:
      replacement = Constraint("min", check_int=_always, check_str=_always)
      extended = DEFAULT_REGISTRY.extend(replacement)
    finally:
      logger.remove(handler_id)
    assert extended.lookup("min") is replacement
    assert DEFAULT_REGISTRY.lookup("min") is Min
    assert "WARNING" in "".join(str(log) for log in logs)
    assert "'min'" in "".join(str(log) for log in logs)

  def test_empty_registry(self):
    """Test that a registry can start empty."""
    registry = Registry()
    assert len(registry) == 0
    assert registry.lookup("min") is None


class TestConstraint:
  """Tests for the Constraint descriptor."""

  @pytest.mark.parametrize("name", ["", "Min", "min1", "in-set", "max "])
  def test_invalid_names_rejected(self, name):
    """Test that only lowercase ASCII names can be registered."""
    with pytest.raises(ValueError, match="lowercase"):
      Constraint(name, check_int=_always, check_str=_always)

  def test_constraint_is_frozen(self):
    """Test that a constraint cannot be changed after creation."""
    with pytest.raises(AttributeError):
      Min.name = "other"  # type: ignore[misc]

  def test_evaluator_slots_follow_protocol(self):
    """Test that built-in evaluators satisfy the Evaluator protocol."""
    for constraint in DEFAULT_REGISTRY.values():
      assert isinstance(constraint.check_int, Evaluator)
      assert isinstance(constraint.check_str, Evaluator)
