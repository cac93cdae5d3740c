"""Tests for the error types."""

import pytest

from tagwarden import (
  InvalidValidatorSyntaxError,
  NotStructError,
  StructuralError,
  TagwardenError,
  UnexportedFieldError,
  UnsupportedTypeError,
  ValidationError,
  ValidationErrors,
)


class TestErrorMessages:
  """Tests for the error vocabulary."""

  def test_base_messages(self):
    assert str(NotStructError()) == "wrong argument given, should be a struct"
    assert str(InvalidValidatorSyntaxError()) == "invalid validator syntax"
    assert str(UnexportedFieldError()) == "validation for unexported field is not allowed"

  def test_detail_is_appended(self):
    error = InvalidValidatorSyntaxError('unsupported tag "foo"')
    assert str(error) == 'invalid validator syntax: unsupported tag "foo"'
    assert error.detail == 'unsupported tag "foo"'

  def test_unsupported_type_names_the_type(self):
    error = UnsupportedTypeError(1.5)
    assert str(error) == "unsupported type float"
    assert error.value_type is float

  @pytest.mark.parametrize(
    ("error", "bases"),
    [
      (NotStructError(), (TagwardenError, TypeError)),
      (InvalidValidatorSyntaxError(), (StructuralError, ValueError)),
      (UnexportedFieldError(), (StructuralError,)),
      (UnsupportedTypeError(None), (StructuralError, TypeError)),
      (ValidationErrors([]), (TagwardenError, ValueError)),
    ],
  )
  def test_hierarchy(self, error, bases):
    """Test that errors can be caught by their builtin counterparts."""
    for base in bases:
      assert isinstance(error, base)


class TestValidationErrors:
  """Tests for the error collection."""

  def test_failed_entry(self):
    entry = ValidationError.failed(".items[2]", "in")
    assert str(entry) == '.items[2]: validation failed for "in" tag'
    assert entry.path == ".items[2]"
    assert entry.constraint == "in"
    assert entry.cause is None
    assert not entry.is_structural

  def test_structural_entry(self):
    cause = UnexportedFieldError(".x._y")
    entry = ValidationError(cause)
    assert entry.cause is cause
    assert entry.is_structural
    assert ValidationErrors([entry]).is_structural

  def test_collection_behaves_like_a_list(self):
    a = ValidationError.failed(".a", "min")
    b = ValidationError.failed(".b", "max")
    errors = ValidationErrors([a, b])
    assert len(errors) == 2
    assert list(errors) == [a, b]
    assert errors[1] is b
    assert not errors.is_structural
    assert str(errors) == (
      '.a: validation failed for "min" tag; .b: validation failed for "max" tag'
    )

  def test_equality_by_content(self):
    first = ValidationErrors([ValidationError.failed(".a", "min")])
    second = ValidationErrors([ValidationError.failed(".a", "min")])
    other = ValidationErrors([ValidationError.failed(".a", "max")])
    assert first == second
    assert hash(first) == hash(second)
    assert first != other
