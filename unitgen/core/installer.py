"""Installing, enabling and starting generated units."""

import logging

from ..models.unit import GeneratedUnitFile
from .errors import CommandError
from .service_manager import ServiceManagerClient

logger = logging.getLogger(__name__)


def _fail(message: str, error: CommandError) -> CommandError:
    if error.output:
        print(error.output)
    return CommandError(f"{message}: {error.message}", command=error.command,
                        output=error.output, returncode=error.returncode)


def install_unit(manager: ServiceManagerClient, unit_file: GeneratedUnitFile):
    """Copy a unit file into the system unit directory and reload the daemon.

    The copy is not undone if the reload fails.

    Args:
        manager: Service manager client
        unit_file: Generated unit file to install

    Raises:
        CommandError: If the copy or the reload fails
    """
    try:
        manager.install(unit_file.path)
    except CommandError as e:
        raise _fail("Error installing unit file", e) from e

    try:
        manager.reload()
    except CommandError as e:
        raise _fail("Error reloading systemd daemon", e) from e

    logger.info(f"Installed {unit_file.name}")
    print("Systemd unit file installed and daemon reloaded.")


def enable_and_start(manager: ServiceManagerClient, unit: str):
    """Enable a unit at boot, then start it.

    The output of each command is printed as-is, also when it fails.
    The unit is only started after enabling succeeded.

    Args:
        manager: Service manager client
        unit: Unit name (e.g., 'myapp.service')

    Raises:
        CommandError: If enabling or starting fails
    """
    try:
        output = manager.enable(unit)
    except CommandError as e:
        raise _fail("Error enabling unit", e) from e

    print(output)
    print("Systemd unit file enabled.")

    try:
        output = manager.start(unit)
    except CommandError as e:
        raise _fail("Error starting unit", e) from e

    print(output)
    print("Systemd unit file started.")
    logger.info(f"Enabled and started {unit}")
