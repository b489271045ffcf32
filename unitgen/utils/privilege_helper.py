"""Privilege escalation helper for commands that touch system unit files."""

import logging
import os
import shutil
from typing import List, Optional

from .constants import DEFAULT_PRIVILEGE_COMMAND

logger = logging.getLogger(__name__)


class PrivilegeHelper:
    """Helper for prefixing commands with a privilege escalation tool."""

    @staticmethod
    def command_prefix(privilege_command: Optional[str] = DEFAULT_PRIVILEGE_COMMAND) -> List[str]:
        """Get the argument prefix used to run a command with elevated privileges.

        Args:
            privilege_command: Escalation tool (e.g. 'sudo', 'pkexec'), or an
                empty string / None to run commands as-is

        Returns:
            List of arguments to place in front of the command
        """
        if not privilege_command:
            return []
        return privilege_command.split()

    @staticmethod
    def build_command(args: List[str], privilege_command: Optional[str] = DEFAULT_PRIVILEGE_COMMAND) -> List[str]:
        """Build a full command line that runs ``args`` with elevated privileges.

        Args:
            args: Command and its arguments
            privilege_command: Escalation tool, or empty to skip escalation

        Returns:
            Command line ready for subprocess
        """
        return PrivilegeHelper.command_prefix(privilege_command) + list(args)

    @staticmethod
    def is_available(privilege_command: Optional[str] = DEFAULT_PRIVILEGE_COMMAND) -> bool:
        """Check if the escalation tool can be found on PATH.

        Returns:
            True if no escalation is configured or the tool exists, False otherwise
        """
        prefix = PrivilegeHelper.command_prefix(privilege_command)
        if not prefix:
            return True
        return shutil.which(prefix[0]) is not None

    @staticmethod
    def is_root() -> bool:
        """Check if the process runs with an effective UID of 0."""
        geteuid = getattr(os, "geteuid", None)
        return geteuid is not None and geteuid() == 0

    @staticmethod
    def get_current_username() -> str:
        """Get the current username.

        Returns:
            Current username
        """
        return os.getenv("USER") or os.getenv("USERNAME") or "unknown"
