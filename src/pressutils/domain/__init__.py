"""Domain layer for PRESSUTILS.

Holds the value objects the helpers exchange with host collaborators
(content items, menus, image sources, query results) and the error taxonomy.
Nothing here talks to a host; adapters and utilities import from this package,
never the other way around.
"""
