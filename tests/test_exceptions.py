"""Tests for custom exceptions and warnings."""

from sigtree.exceptions import ConfigFormatError, ConfigWarning


class TestConfigWarning:
    """Test ConfigWarning."""

    def test_config_warning_attributes(self):
        warning = ConfigWarning("/project/.code-structure.json", "Expecting value")
        assert warning.config_path == "/project/.code-structure.json"
        assert warning.reason == "Expecting value"
        assert isinstance(warning, UserWarning)

    def test_config_warning_message(self):
        warning = ConfigWarning("/x/.code-structure.json", "Permission denied")
        assert str(warning) == (
            "Could not read config file /x/.code-structure.json: Permission denied. Using default configuration."
        )


class TestConfigFormatError:
    """Test ConfigFormatError."""

    def test_is_value_error(self):
        error = ConfigFormatError("'excludeFiles' must be a list of strings")
        assert isinstance(error, ValueError)
        assert str(error) == "'excludeFiles' must be a list of strings"
