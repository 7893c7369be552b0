"""Default marks for tests under `tests/unit/`."""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

UNIT_ROOT = Path(__file__).parent.resolve()
UNIT_MARKER = "unit"
PROPERTY_MARKER = "property"


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items in `tests/unit/` as `unit`, and hypothesis tests as `property`."""
    for item in items:
        if UNIT_ROOT not in item.path.resolve().parents:
            continue
        markers = {marker.name for marker in item.iter_markers()}
        if UNIT_MARKER not in markers:
            item.add_marker(pytest.mark.unit)
        is_hypothesis = hasattr(getattr(item, "obj", None), "hypothesis")
        if is_hypothesis and PROPERTY_MARKER not in markers:
            item.add_marker(pytest.mark.property)
