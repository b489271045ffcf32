"""Core functionality for generating and installing systemd units."""

from .config_manager import ConfigManager
from .errors import (
    CommandError,
    ExecutableNotFoundError,
    RenderError,
    UnitGenError,
    ValidationError,
    WriteError,
)
from .generator import UnitGenerator
from .service_manager import ServiceManagerClient, SystemctlServiceManager

__all__ = [
    "ConfigManager", "UnitGenerator", "ServiceManagerClient", "SystemctlServiceManager",
    "UnitGenError", "ValidationError", "ExecutableNotFoundError", "RenderError",
    "WriteError", "CommandError",
]
