"""Tests for global configuration."""

import pytest

from tagwarden import get_config, overrides, reset_config
from tagwarden.config import Config


class TestGlobalConfig:
  """Tests for global configuration settings."""

  def setup_method(self):
    """Reset config before each test."""
    reset_config()

  def teardown_method(self):
    """Reset config after each test."""
    reset_config()

  def test_defaults(self):
    """Test the default configuration values."""
    assert get_config() == Config(
      tag_key="validate",
      inherit_tags=False,
      skip_validation=False,
      warn_only=False,
    )

  def test_reset_config(self):
    """Test that reset_config restores defaults."""
    get_config().inherit_tags = True
    reset_config()
    assert get_config().inherit_tags is False

  def test_config_overrides(self):
    """Test that overrides() sets and restores values."""
    with overrides(tag_key="check", inherit_tags=True):
      assert get_config().tag_key == "check"
      assert get_config().inherit_tags is True
    assert get_config().tag_key == "validate"
    assert get_config().inherit_tags is False

  def test_overrides_restores_after_error(self):
    """Test that values are restored when the block raises."""
    with pytest.raises(RuntimeError), overrides(warn_only=True):
      raise RuntimeError
    assert get_config().warn_only is False

  def test_unknown_key_changes_nothing(self):
    """Test that an unknown key raises before any value is applied."""
    with (
      pytest.raises(AttributeError, match="Config has no attribute 'non_existent'"),
      overrides(warn_only=True, non_existent=True),
    ):
      pass
    assert get_config().warn_only is False
