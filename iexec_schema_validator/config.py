"""
Environment based configuration for the iExec schema validator.
"""
import os
import logging

from .schemas import SchemaVersion

# Configure logger
logger = logging.getLogger(__name__)

SCHEMA_VERSION_ENV = "IEXEC_SCHEMA_VERSION"

_VERSION_ALIASES = {
    "v1": SchemaVersion.LEGACY,
    "1": SchemaVersion.LEGACY,
    "legacy": SchemaVersion.LEGACY,
    "v2": SchemaVersion.CURRENT,
    "2": SchemaVersion.CURRENT,
    "current": SchemaVersion.CURRENT,
    "latest": SchemaVersion.CURRENT,
}


def get_schema_version() -> SchemaVersion:
    """
    Get the default schema version from environment variables.

    Returns:
        SchemaVersion named by IEXEC_SCHEMA_VERSION, CURRENT when unset
    """
    value = os.environ.get(SCHEMA_VERSION_ENV, "").strip().lower()
    if not value:
        return SchemaVersion.CURRENT
    version = _VERSION_ALIASES.get(value)
    if version is None:
        # Unknown values fall back to the current marketplace shape
        logger.warning(f"Unknown schema version: {value}, defaulting to {SchemaVersion.CURRENT.value}")
        return SchemaVersion.CURRENT
    return version
