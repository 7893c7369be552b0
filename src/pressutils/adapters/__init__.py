"""Adapters for PRESSUTILS.

Provide concrete implementations of the host contracts in
`pressutils.interfaces`: in-memory stores usable as stand-ins or test fakes,
filesystem template search and a `string.Template` renderer.

Dependency rule: may import `pressutils.domain` and `pressutils.interfaces`;
neither of those may import this package.
"""
