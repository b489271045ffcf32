"""Exceptions raised while generating and installing unit files.

Each error carries the exit code ``main()`` returns when it reaches the top.
"""

from typing import Optional


class UnitGenError(Exception):
    """Base class for all unitgen failures."""

    exit_code = 1

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(UnitGenError):
    """A required field is empty."""

    exit_code = 2

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field


class ExecutableNotFoundError(UnitGenError):
    """The start command's executable is not on the search path."""

    exit_code = 3

    def __init__(self, executable: str):
        super().__init__(f"Error finding executable: {executable}")
        self.executable = executable


class RenderError(UnitGenError):
    """The unit template could not be rendered."""

    exit_code = 4


class WriteError(UnitGenError):
    """The unit file could not be written."""

    exit_code = 5


class CommandError(UnitGenError):
    """A privileged system command failed.

    Attributes:
        command: Command line that was run
        output: Combined stdout/stderr captured from the command
        returncode: Exit status, None if the command never ran to completion
    """

    exit_code = 6

    def __init__(self, message: str, command=None, output: str = "",
                 returncode: Optional[int] = None):
        super().__init__(message)
        self.command = list(command) if command else []
        self.output = output or ""
        self.returncode = returncode

    def __str__(self) -> str:
        if self.output.strip():
            return f"{self.message}\n{self.output.rstrip()}"
        return self.message
