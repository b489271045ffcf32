"""Rendering of systemd unit file text."""

import logging

from ..models.unit import UnitConfig
from ..utils.constants import RESTART_POLICY, WANTED_BY
from .errors import RenderError

logger = logging.getLogger(__name__)

# Values are substituted verbatim, nothing is escaped.
UNIT_TEMPLATE = """[Unit]
Description={description}

[Service]
ExecStart={exec_start}
Restart={restart}
User={user}
Group={group}
WorkingDirectory={working_dir}

[Install]
WantedBy={wanted_by}
"""


def render_unit(config: UnitConfig, template: str = UNIT_TEMPLATE) -> str:
    """Render the unit file text for a configuration.

    Args:
        config: Unit configuration
        template: Template with str.format placeholders

    Returns:
        Unit file content

    Raises:
        RenderError: If the template cannot be rendered
    """
    try:
        content = template.format(
            description=config.description,
            exec_start=config.exec_start,
            restart=RESTART_POLICY,
            user=config.user,
            group=config.group,
            working_dir=config.working_dir,
            wanted_by=WANTED_BY,
        )
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        logger.error(f"Error executing template: {e!r}")
        raise RenderError(f"Error executing template: {e}") from e

    logger.debug(f"Rendered unit {config.unit_name} ({len(content)} bytes)")
    return content
