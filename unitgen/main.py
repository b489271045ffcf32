#!/usr/bin/env python3
"""Entry point for the unitgen command line tool."""

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .core.config_manager import ConfigManager
from .core.errors import UnitGenError
from .core.generator import UnitGenerator
from .core.service_manager import SystemctlServiceManager
from .models.unit import UnitConfig
from .utils.constants import APP_NAME, DEFAULT_OUTPUT_DIR, LOG_FORMAT, SYSTEMD_UNIT_DIR
from .utils.privilege_helper import PrivilegeHelper

logger = logging.getLogger(__name__)


def setup_logging(verbosity: int = 0, log_file: Optional[str] = None):
    """Set up application logging.

    Args:
        verbosity: 0 for warnings only, 1 for info, 2 or more for debug
        log_file: Optional file that also receives log records; if it cannot
            be opened a warning is logged and only stderr is used
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file))
        except OSError as e:
            file_error = e

    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)

    if file_error is not None:
        logger.warning(f"Could not open log file {log_file}: {file_error}")


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Options are accepted with one dash (``-name``) or two (``--name``).
    """
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=f"{APP_NAME} - Generate and optionally install a systemd service unit"
    )
    parser.add_argument('-name', '--name', dest='name', default="",
                        help='Name of the systemd service')
    parser.add_argument('-description', '--description', dest='description', default="",
                        help='Description of the systemd service')
    parser.add_argument('-exec', '--exec', dest='exec_start', default="",
                        help='Command to start the service')
    parser.add_argument('-user', '--user', dest='user', default=None,
                        help='User to run the service as (default: root)')
    parser.add_argument('-group', '--group', dest='group', default=None,
                        help='Group to run the service as (default: root)')
    parser.add_argument('-workdir', '--workdir', dest='workdir', default=None,
                        help='Working directory for the service (default: /)')
    parser.add_argument('-install', '--install', action='store_true',
                        help='Install the unit file')
    parser.add_argument('-enable', '--enable', action='store_true',
                        help='Enable service at boot (requires -install)')
    parser.add_argument('--config', default=None,
                        help='Path to the YAML settings file')
    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase log verbosity')
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    return parser


def build_unit_config(args: argparse.Namespace, config_manager: ConfigManager) -> UnitConfig:
    """Build the unit configuration from parsed arguments.

    Flags left unset fall back to the configured defaults; an explicit flag,
    even an empty one, always wins.
    """
    def pick(value, setting):
        return value if value is not None else config_manager.get_setting(setting, "")

    return UnitConfig(
        service_name=args.name,
        description=args.description,
        exec_start=args.exec_start,
        user=pick(args.user, "default_user"),
        group=pick(args.group, "default_group"),
        working_dir=pick(args.workdir, "default_workdir"),
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point.

    Returns:
        Process exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    config_manager = ConfigManager(args.config)
    config_manager.load_config()

    log_file = config_manager.get_setting("log_file")
    if log_file:
        setup_logging(args.verbose, log_file)

    username = PrivilegeHelper.get_current_username()
    if PrivilegeHelper.is_root():
        username += " (root)"
    logger.info(f"Starting {APP_NAME} {__version__} as {username}")

    privilege_command = config_manager.get_setting("privilege_command")
    if args.install and not PrivilegeHelper.is_available(privilege_command):
        logger.warning(f"Privilege command {privilege_command!r} not found on PATH")

    service_manager = SystemctlServiceManager(
        privilege_command=privilege_command,
        unit_dir=config_manager.get_setting("unit_dir") or SYSTEMD_UNIT_DIR,
        timeout=config_manager.get_setting("command_timeout"),
    )
    generator = UnitGenerator(service_manager, output_dir=config_manager.get_setting("output_dir") or DEFAULT_OUTPUT_DIR)

    try:
        unit = build_unit_config(args, config_manager)
        generator.run(unit, install=args.install, enable=args.enable)

    except UnitGenError as e:
        logger.debug(f"Exiting with code {e.exit_code}", exc_info=True)
        print(e.message, file=sys.stderr)
        return e.exit_code

    except KeyboardInterrupt:
        print("Interrupted", file=sys.stderr)
        return 130

    logger.info("Done")
    return 0


if __name__ == "__main__":
    sys.exit(main())
