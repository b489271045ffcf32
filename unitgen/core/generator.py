"""Coordinator that runs one unit generation pass."""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from ..models.unit import GeneratedUnitFile, UnitConfig
from ..utils.constants import DEFAULT_OUTPUT_DIR
from .installer import enable_and_start, install_unit
from .renderer import render_unit
from .service_manager import ServiceManagerClient
from .validation import validate_config
from .writer import write_unit_file

logger = logging.getLogger(__name__)


class UnitGenerator:
    """Runs validation, rendering, writing and the optional install steps.

    Steps run strictly in order and the first failure propagates to the caller.
    """

    def __init__(self, service_manager: ServiceManagerClient,
                 output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR,
                 which: Optional[Callable[[str], Optional[str]]] = None):
        """Initialize the generator.

        Args:
            service_manager: Client used for install, reload, enable and start
            output_dir: Directory generated unit files are written to
            which: Executable lookup used to validate the start command
        """
        self.service_manager = service_manager
        self.output_dir = Path(output_dir)
        self.which = which

    def generate(self, config: UnitConfig) -> GeneratedUnitFile:
        """Validate, render and write a unit file.

        Args:
            config: Unit configuration

        Returns:
            The written unit file
        """
        validate_config(config, self.which)
        content = render_unit(config)
        unit_file = write_unit_file(config, content, self.output_dir)
        print(f"Systemd unit file generated at: {unit_file.path}")
        return unit_file

    def run(self, config: UnitConfig, install: bool = False, enable: bool = False) -> GeneratedUnitFile:
        """Run a full generation pass.

        Enabling only happens as part of an install.

        Args:
            config: Unit configuration
            install: Copy the unit into the system unit directory and reload
            enable: Enable and start the unit after installing it

        Returns:
            The written unit file
        """
        logger.info(f"Generating {config.unit_name} (install={install}, enable={enable})")
        logger.debug(f"Unit configuration: {config.to_dict()}")
        unit_file = self.generate(config)

        if install:
            install_unit(self.service_manager, unit_file)
            if enable:
                enable_and_start(self.service_manager, config.unit_name)
        elif enable:
            logger.warning("Ignoring enable without install")

        return unit_file
