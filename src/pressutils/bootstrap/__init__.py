"""Bootstrap (composition root) for PRESSUTILS.

Assembles a `Host` from concrete adapters (or the embedding application's
own implementations of `pressutils.interfaces`) and exposes the helpers as
methods of `Utilities`.

Import rules:
- Applications import *this* package for the bound facade, or
  `pressutils.utilities` for the free functions.
- Inner layers must not import `pressutils.bootstrap`.
"""

from .bootstrap import Host, Utilities, bootstrap, build_host

__all__ = ["Host", "Utilities", "bootstrap", "build_host"]
