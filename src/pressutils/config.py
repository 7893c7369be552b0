"""Configuration utilities for PRESSUTILS.

This module centralizes small helpers and constants related to configuration
read from the environment.
"""

import os
from pathlib import Path

TEMPLATE_PATH_ENV = "PRESSUTILS_TEMPLATE_PATH"  # pragma: no mutate
TEMPLATE_EXTENSION_ENV = "PRESSUTILS_TEMPLATE_EXTENSION"  # pragma: no mutate
DEFAULT_TEMPLATE_EXTENSION = ".html"


class TemplatePathNotSetError(Exception):
    """Raised when the PRESSUTILS_TEMPLATE_PATH environment variable is not set."""


def get_template_dirs() -> list[Path]:
    """Get the template search roots from the environment.

    Returns:
        The directories listed in `PRESSUTILS_TEMPLATE_PATH`, split on
        `os.pathsep`, in priority order.

    Raises:
        TemplatePathNotSetError: If `PRESSUTILS_TEMPLATE_PATH` is not set or empty.
    """
    if not (raw := os.environ.get(TEMPLATE_PATH_ENV)):
        raise TemplatePathNotSetError
    return [Path(part).expanduser() for part in raw.split(os.pathsep) if part]


def get_template_extension() -> str:
    """Get the default template extension.

    Returns:
        `PRESSUTILS_TEMPLATE_EXTENSION` with a leading dot ensured, or
        ``.html`` when unset.
    """
    if not (ext := os.environ.get(TEMPLATE_EXTENSION_ENV, "").strip()):
        return DEFAULT_TEMPLATE_EXTENSION
    return ext if ext.startswith(".") else f".{ext}"
