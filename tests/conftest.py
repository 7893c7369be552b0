"""Global pytest fixtures for PRESSUTILS."""

pytest_plugins = [
    "tests.fixtures.content",
]
