"""PRESSUTILS test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- fixtures/     : Shared pytest fixtures (seeded in-memory host collaborators).

General guidance
- Keep unit tests fast and deterministic; the in-memory adapters double as fakes.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Markers: unit, property
"""
