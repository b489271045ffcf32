"""Utility functions and constants."""

from .constants import *
from .privilege_helper import PrivilegeHelper

__all__ = [
    "APP_NAME", "CONFIG_DIR", "CONFIG_FILE", "DEFAULT_OUTPUT_DIR",
    "SYSTEMD_UNIT_DIR", "PrivilegeHelper",
]
