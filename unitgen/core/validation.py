"""Validation of unit configuration before anything is written."""

import logging
import shutil
from typing import Callable, Optional

from ..models.unit import UnitConfig
from .errors import ExecutableNotFoundError, ValidationError

logger = logging.getLogger(__name__)

# (attribute, field label, message) in the order fields are checked
REQUIRED_FIELDS = (
    ("service_name", "name", "Service name is required"),
    ("description", "description", "Description is required"),
    ("exec_start", "exec", "Exec command is required"),
    ("user", "user", "User is required"),
    ("group", "group", "Group is required"),
    ("working_dir", "workdir", "Working directory is required"),
)


def check_required(config: UnitConfig):
    """Ensure every required field is non-empty.

    Args:
        config: Unit configuration to check

    Raises:
        ValidationError: For the first empty field
    """
    for attribute, field, message in REQUIRED_FIELDS:
        if not getattr(config, attribute):
            logger.error(f"Validation failed for {field}: {message}")
            raise ValidationError(field, message)


def resolve_executable(config: UnitConfig,
                       which: Optional[Callable[[str], Optional[str]]] = None) -> str:
    """Resolve the first token of the start command on the search path.

    Args:
        config: Unit configuration
        which: Lookup function, shutil.which when None

    Returns:
        Resolved path of the executable

    Raises:
        ExecutableNotFoundError: If the executable cannot be found
    """
    which = which or shutil.which
    executable = config.executable
    resolved = which(executable) if executable else None
    if not resolved:
        logger.error(f"Executable not found on PATH: {executable!r}")
        raise ExecutableNotFoundError(executable)

    logger.debug(f"Resolved {executable} to {resolved}")
    return resolved


def validate_config(config: UnitConfig,
                    which: Optional[Callable[[str], Optional[str]]] = None) -> str:
    """Validate a unit configuration.

    Args:
        config: Unit configuration to validate
        which: Executable lookup function

    Returns:
        Resolved path of the start command's executable
    """
    check_required(config)
    return resolve_executable(config, which)
