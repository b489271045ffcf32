"""Service manager clients for installing and controlling systemd units."""

import logging
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import List, Optional, Union

from ..utils.constants import DEFAULT_PRIVILEGE_COMMAND, SYSTEMD_UNIT_DIR
from ..utils.privilege_helper import PrivilegeHelper
from .errors import CommandError

logger = logging.getLogger(__name__)


class ServiceManagerClient(ABC):
    """Operations the generator needs from the system service manager.

    Every method returns the text the operation produced and raises
    CommandError when it fails.
    """

    @abstractmethod
    def install(self, unit_file: Union[str, Path]) -> str:
        """Copy a unit file into the system unit directory."""

    @abstractmethod
    def reload(self) -> str:
        """Make the service manager re-read its unit definitions."""

    @abstractmethod
    def enable(self, unit: str) -> str:
        """Enable a unit to start at boot."""

    @abstractmethod
    def start(self, unit: str) -> str:
        """Start a unit now."""


class SystemctlServiceManager(ServiceManagerClient):
    """Manages system units via cp and systemctl with privilege escalation."""

    def __init__(self, privilege_command: Optional[str] = DEFAULT_PRIVILEGE_COMMAND,
                 unit_dir: Union[str, Path] = SYSTEMD_UNIT_DIR,
                 timeout: Optional[float] = None):
        """Initialize the service manager.

        Args:
            privilege_command: Escalation tool prefixed to every command
                ('sudo' by default, empty to run commands directly)
            unit_dir: System unit directory files are installed into
            timeout: Seconds to wait for each command, None waits forever
        """
        self.privilege_command = privilege_command
        self.unit_dir = Path(unit_dir)
        self.timeout = timeout

    def install(self, unit_file: Union[str, Path]) -> str:
        """Copy a unit file into the system unit directory.

        Args:
            unit_file: Path of the generated unit file

        Returns:
            Command output
        """
        return self._run(["cp", str(unit_file), f"{self.unit_dir}/"], "install unit file")

    def reload(self) -> str:
        """Run systemctl daemon-reload.

        Returns:
            Command output
        """
        return self._run(["systemctl", "daemon-reload"], "reload systemd daemon")

    def enable(self, unit: str) -> str:
        """Enable a unit to start on boot.

        Args:
            unit: Unit name (e.g., 'myapp.service')

        Returns:
            Command output
        """
        return self._execute_systemctl_action("enable", unit)

    def start(self, unit: str) -> str:
        """Start a unit.

        Args:
            unit: Unit name (e.g., 'myapp.service')

        Returns:
            Command output
        """
        return self._execute_systemctl_action("start", unit)

    def _execute_systemctl_action(self, action: str, unit: str) -> str:
        """Execute a systemctl action on a unit.

        Args:
            action: Systemctl action (enable, start)
            unit: Unit name

        Returns:
            Command output
        """
        return self._run(["systemctl", action, unit], f"{action} {unit}")

    def _run(self, args: List[str], description: str) -> str:
        """Run a command with privilege escalation and capture its output.

        Standard error is merged into standard output.

        Args:
            args: Command and arguments, without the escalation prefix
            description: Short description used in log and error messages

        Returns:
            Combined output of the command

        Raises:
            CommandError: If the command cannot be run or exits non-zero
        """
        cmd = PrivilegeHelper.build_command(args, self.privilege_command)
        logger.info(f"Running: {' '.join(cmd)}")

        try:
            result = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self.timeout,
                check=True
            )
            logger.info(f"Successfully ran {description}")
            return result.stdout or ""

        except subprocess.TimeoutExpired as e:
            error_msg = f"Timeout while trying to {description}"
            logger.error(error_msg)
            output = e.output.decode(errors="replace") if isinstance(e.output, bytes) else e.output
            raise CommandError(error_msg, command=cmd, output=output or "") from e

        except subprocess.CalledProcessError as e:
            output = e.output or ""
            logger.error(f"Failed to {description} (exit {e.returncode}): {output.strip()}")
            raise CommandError(f"Failed to {description}", command=cmd, output=output,
                               returncode=e.returncode) from e

        except OSError as e:
            logger.error(f"Could not run {cmd[0]}: {e}")
            raise CommandError(f"Failed to {description}: {e}", command=cmd) from e
