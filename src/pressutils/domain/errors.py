"""Domain-layer error definitions."""

from collections.abc import Sequence

# ============================================================================
#                           General errors
# ============================================================================


class PressUtilsError(Exception):
    """Base class for all PRESSUTILS errors."""


class InvalidArgumentError(PressUtilsError, ValueError):
    """Raised when a caller supplies input that violates a shape contract."""


# ============================================================================
#                           Template errors
# ============================================================================


class TemplateError(PressUtilsError):
    """Base class for template resolution and rendering errors."""


class TemplateNotFoundError(TemplateError, LookupError):
    """Raised when none of the candidate templates can be located."""

    def __init__(self, candidates: Sequence[str]) -> None:
        super().__init__(
            f"No template found among candidates: {', '.join(candidates) or '<none>'}"
        )
        self.candidates = tuple(candidates)


class TemplateRenderError(TemplateError):
    """Raised when a located template cannot be rendered."""

    def __init__(self, template: str, reason: str) -> None:
        super().__init__(f"Failed to render template {template!r}: {reason}")
        self.template = template
        self.reason = reason
