"""Tests for unit configuration validation."""

from dataclasses import replace
from unittest.mock import patch

import pytest

from conftest import found, not_found
from unitgen.core.errors import ExecutableNotFoundError, ValidationError
from unitgen.core.validation import validate_config


class TestRequiredFields:
    @pytest.mark.parametrize("attribute,field,message", [
        ("service_name", "name", "Service name is required"),
        ("description", "description", "Description is required"),
        ("exec_start", "exec", "Exec command is required"),
        ("user", "user", "User is required"),
        ("group", "group", "Group is required"),
        ("working_dir", "workdir", "Working directory is required"),
    ])
    def test_rejects_each_empty_field(self, unit_config, attribute, field, message):
        config = replace(unit_config, **{attribute: ""})
        with pytest.raises(ValidationError, match=message) as exc_info:
            validate_config(config, which=found)
        assert exc_info.value.field == field
        assert exc_info.value.exit_code == 2

    def test_first_empty_field_wins(self, unit_config):
        config = replace(unit_config, description="", group="")
        with pytest.raises(ValidationError, match="Description is required"):
            validate_config(config, which=found)

    def test_required_fields_checked_before_executable(self, unit_config):
        config = replace(unit_config, user="")
        with pytest.raises(ValidationError):
            validate_config(config, which=not_found)


class TestExecutableLookup:
    def test_returns_resolved_path(self, unit_config):
        assert validate_config(unit_config, which=found) == "/usr/bin/myapp"

    def test_looks_up_first_token_only(self, unit_config):
        seen = []

        def which(name):
            seen.append(name)
            return "/usr/bin/myapp"

        validate_config(unit_config, which=which)
        assert seen == ["/usr/bin/myapp"]

    def test_rejects_missing_executable(self, unit_config):
        with pytest.raises(ExecutableNotFoundError, match="Error finding executable: /usr/bin/myapp"):
            validate_config(unit_config, which=not_found)

    def test_rejects_blank_command_without_lookup(self, unit_config):
        config = replace(unit_config, exec_start="   ")

        def which(name):
            raise AssertionError("lookup should not run")

        with pytest.raises(ExecutableNotFoundError) as exc_info:
            validate_config(config, which=which)
        assert exc_info.value.exit_code == 3

    def test_uses_search_path_by_default(self, unit_config):
        config = replace(unit_config, exec_start="sh -c 'sleep 1'")
        with patch("unitgen.core.validation.shutil.which", return_value="/bin/sh") as mock_which:
            assert validate_config(config) == "/bin/sh"
        mock_which.assert_called_once_with("sh")
