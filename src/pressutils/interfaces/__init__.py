"""Interfaces (host boundary) for PRESSUTILS.

Defines the contracts the helpers expect the hosting platform to honour:
option storage, the navigation registry, the content store, template search
and rendering, and the request-scoped query context. Business rules stay out
of this package.

Dependency rule: this package may import `pressutils.domain` only. It may be
imported by `pressutils.utilities`, `pressutils.adapters` and
`pressutils.bootstrap`.
"""
