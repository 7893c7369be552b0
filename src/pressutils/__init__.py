"""PRESSUTILS

Stateless helpers for content-management hosts: timezone resolution,
content-addressed cache keys, navigation-menu lookup, featured-image URLs,
template rendering with explicit context and a restartable content loop.
"""

import logging

__all__ = ["__version__"]
__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
