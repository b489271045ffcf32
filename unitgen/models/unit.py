"""Data models for generated systemd units."""

from dataclasses import dataclass
from pathlib import Path

from ..utils.constants import UNIT_FILE_SUFFIX


@dataclass(frozen=True)
class UnitConfig:
    """Configuration for a single systemd service unit.

    Attributes:
        service_name: Unit name without suffix (e.g., 'myapp')
        description: Value of Description= in [Unit]
        exec_start: Full start command line for ExecStart=
        user: User= the service runs as
        group: Group= the service runs as
        working_dir: WorkingDirectory= of the service
    """

    service_name: str
    description: str
    exec_start: str
    user: str
    group: str
    working_dir: str

    @property
    def unit_name(self) -> str:
        """Get the full unit name (e.g., 'myapp.service')."""
        return f"{self.service_name}{UNIT_FILE_SUFFIX}"

    @property
    def executable(self) -> str:
        """Get the first whitespace-delimited token of the start command.

        Returns:
            Executable name or path, empty string if the command is blank
        """
        parts = self.exec_start.split()
        return parts[0] if parts else ""

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization.

        Returns:
            Dictionary representation of the unit config
        """
        return {
            "name": self.service_name,
            "description": self.description,
            "exec": self.exec_start,
            "user": self.user,
            "group": self.group,
            "workdir": self.working_dir,
        }


@dataclass(frozen=True)
class GeneratedUnitFile:
    """A rendered unit file written to disk.

    Attributes:
        path: Location of the written file
        content: Unit file text
    """

    path: Path
    content: str

    @property
    def name(self) -> str:
        """Get the file name (e.g., 'myapp.service')."""
        return self.path.name
