"""Application constants and configuration."""

from pathlib import Path

# Application metadata
APP_NAME = "unitgen"

# Paths
CONFIG_DIR = Path.home() / ".config" / "unitgen"
CONFIG_FILE = CONFIG_DIR / "config.yaml"
CONFIG_ENV_VAR = "UNITGEN_CONFIG"

# Where generated unit files are written before installation
DEFAULT_OUTPUT_DIR = Path("/tmp")
SYSTEMD_UNIT_DIR = Path("/etc/systemd/system")
UNIT_FILE_SUFFIX = ".service"
UNIT_FILE_MODE = 0o644

# Default unit values
DEFAULT_USER = "root"
DEFAULT_GROUP = "root"
DEFAULT_WORKDIR = "/"

# Fixed unit directives
RESTART_POLICY = "always"
WANTED_BY = "multi-user.target"

# Privilege escalation
DEFAULT_PRIVILEGE_COMMAND = "sudo"

# Logging
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
