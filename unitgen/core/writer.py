"""Writing rendered unit files to disk."""

import logging
from pathlib import Path
from typing import Union

from ..models.unit import GeneratedUnitFile, UnitConfig
from ..utils.constants import DEFAULT_OUTPUT_DIR, UNIT_FILE_MODE, UNIT_FILE_SUFFIX
from .errors import WriteError

logger = logging.getLogger(__name__)


def unit_file_path(service_name: str, output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR) -> Path:
    """Get the path a unit file is written to.

    Args:
        service_name: Unit name without suffix
        output_dir: Directory for generated files

    Returns:
        Path of '<output_dir>/<service_name>.service'
    """
    return Path(output_dir) / f"{service_name}{UNIT_FILE_SUFFIX}"


def write_unit_file(config: UnitConfig, content: str,
                    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR) -> GeneratedUnitFile:
    """Write unit file content, replacing any existing file.

    Args:
        config: Unit configuration the content was rendered from
        content: Unit file text
        output_dir: Directory for generated files

    Returns:
        GeneratedUnitFile describing the written file

    Raises:
        WriteError: If the file cannot be written
    """
    path = unit_file_path(config.service_name, output_dir)

    try:
        if path.exists():
            logger.info(f"Overwriting existing unit file {path}")
        path.write_text(content, encoding="utf-8")
        path.chmod(UNIT_FILE_MODE)
    except (OSError, UnicodeError) as e:
        logger.error(f"Failed to write unit file {path}: {e}")
        raise WriteError(f"Error writing unit file: {e}") from e

    logger.info(f"Wrote unit file {path}")
    return GeneratedUnitFile(path=path, content=content)
