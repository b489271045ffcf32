"""Shared fixtures for unitgen tests."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unitgen.core.errors import CommandError
from unitgen.core.service_manager import ServiceManagerClient
from unitgen.models.unit import UnitConfig


class FakeServiceManager(ServiceManagerClient):
    """In-memory service manager that records calls.

    ``fail_on`` names an operation that raises CommandError with ``output``.
    """

    def __init__(self, fail_on=None, output="", error_output="boom"):
        self.calls = []
        self.fail_on = fail_on
        self.output = output
        self.error_output = error_output

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if name == self.fail_on:
            raise CommandError(f"Failed to {name}", command=[name], output=self.error_output,
                               returncode=1)
        return self.output

    def install(self, unit_file):
        return self._call("install", str(unit_file))

    def reload(self):
        return self._call("reload")

    def enable(self, unit):
        return self._call("enable", unit)

    def start(self, unit):
        return self._call("start", unit)

    @property
    def operations(self):
        return [c[0] for c in self.calls]


def found(executable):
    """Executable lookup that resolves everything under /usr/bin."""
    return f"/usr/bin/{os.path.basename(executable)}"


def not_found(executable):
    return None


@pytest.fixture
def unit_config():
    return UnitConfig(
        service_name="myapp",
        description="My App",
        exec_start="/usr/bin/myapp --flag",
        user="appuser",
        group="appgroup",
        working_dir="/opt/myapp",
    )


@pytest.fixture
def fake_manager():
    return FakeServiceManager()
