"""
Logging setup for hosts embedding the blueprint engine.

Library modules only create module-level loggers; the host decides whether
to call configure_logging() or wire its own handlers.
"""

import logging

from ozrical_blueprint.config import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Install a basic root handler at the configured (or given) level."""
    resolved = level or get_settings().log_level
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("ozrical_blueprint").setLevel(resolved)
