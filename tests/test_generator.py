"""Tests for the full generation pass."""

import logging
from dataclasses import replace

import pytest

from conftest import FakeServiceManager, found, not_found
from unitgen.core.errors import CommandError, ExecutableNotFoundError, ValidationError
from unitgen.core.generator import UnitGenerator


@pytest.fixture
def generator(fake_manager, tmp_path):
    return UnitGenerator(fake_manager, output_dir=tmp_path, which=found)


class TestRun:
    def test_generate_only(self, generator, fake_manager, unit_config, tmp_path, capsys):
        unit_file = generator.run(unit_config)
        assert unit_file.path == tmp_path / "myapp.service"
        content = unit_file.path.read_text()
        assert "ExecStart=/usr/bin/myapp --flag\n" in content
        assert "User=appuser\n" in content
        assert "Group=appgroup\n" in content
        assert "WorkingDirectory=/opt/myapp\n" in content
        assert fake_manager.calls == []
        assert f"Systemd unit file generated at: {unit_file.path}" in capsys.readouterr().out

    def test_install_without_enable(self, generator, fake_manager, unit_config, tmp_path):
        generator.run(unit_config, install=True)
        assert fake_manager.calls == [("install", str(tmp_path / "myapp.service")), ("reload",)]

    def test_install_and_enable(self, generator, fake_manager, unit_config):
        generator.run(unit_config, install=True, enable=True)
        assert fake_manager.operations == ["install", "reload", "enable", "start"]
        assert fake_manager.calls[2] == ("enable", "myapp.service")

    def test_enable_without_install_does_nothing(self, generator, fake_manager, unit_config):
        generator.run(unit_config, enable=True)
        assert fake_manager.calls == []

    def test_validation_failure_writes_nothing(self, generator, fake_manager, unit_config, tmp_path):
        with pytest.raises(ValidationError, match="Description is required"):
            generator.run(replace(unit_config, description=""), install=True, enable=True)
        assert list(tmp_path.iterdir()) == []
        assert fake_manager.calls == []

    def test_missing_executable_writes_nothing(self, fake_manager, unit_config, tmp_path):
        generator = UnitGenerator(fake_manager, output_dir=tmp_path, which=not_found)
        with pytest.raises(ExecutableNotFoundError):
            generator.run(unit_config, install=True)
        assert list(tmp_path.iterdir()) == []
        assert fake_manager.calls == []

    def test_reload_failure_stops_before_enable(self, unit_config, tmp_path):
        manager = FakeServiceManager(fail_on="reload")
        generator = UnitGenerator(manager, output_dir=tmp_path, which=found)
        with pytest.raises(CommandError):
            generator.run(unit_config, install=True, enable=True)
        assert manager.operations == ["install", "reload"]
        assert (tmp_path / "myapp.service").exists()

    def test_rerun_overwrites(self, generator, unit_config):
        generator.run(unit_config)
        unit_file = generator.run(replace(unit_config, user="other"))
        assert "User=other\n" in unit_file.path.read_text()
        assert "User=appuser" not in unit_file.path.read_text()

    def test_logs_configuration_at_debug(self, generator, unit_config, caplog):
        with caplog.at_level(logging.DEBUG, logger="unitgen.core.generator"):
            generator.run(unit_config)
        assert f"Unit configuration: {unit_config.to_dict()}" in caplog.text
