"""Error taxonomy for palette loading, validation, resolution and rendering.

Every error carries the structured pieces needed to act on it (slot label,
path, offending value) and an ordered list of context notes that callers
prepend while unwinding, so the final message names both the point of
failure and the traversal that led there.
"""

from typing import Any, List, Optional, Sequence

EXPECTED_SHAPES = "colors.*, accents.*, or ansi.*.*.*"


class PaletteError(ValueError):
    """Base class for all palette errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.context: List[str] = []

    def with_context(self, note: str) -> "PaletteError":
        """Prepend a context note and return the same error for re-raising."""
        self.context.insert(0, note)
        return self

    def __str__(self) -> str:
        return ": ".join(self.context + [self.message])


class InvalidHexColor(PaletteError):
    """A literal does not match ``#RRGGBB``."""

    def __init__(self, value: Any, label: Optional[str] = None):
        self.label = label
        self.value = value
        if label:
            message = f"{label} has invalid hex color: {value}"
        else:
            message = f"invalid hex color: {value}"
        super().__init__(message)


class MalformedPath(PaletteError):
    """A reference string has no ``.`` separator."""

    def __init__(self, value: str, label: str):
        self.label = label
        self.value = value
        super().__init__(f"{label} path must contain at least one '.' segment: {value}")


class MissingPath(PaletteError):
    """A reference target does not exist or is not a recognized address."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"missing path '{path}'; expected {EXPECTED_SHAPES}")


class CycleDetected(PaletteError):
    """A reference chain revisits a path that is still being resolved."""

    def __init__(self, chain: Sequence[str]):
        self.chain = list(chain)
        repeated = self.chain[-1]
        self.cycle = self.chain[self.chain.index(repeated):]
        super().__init__(f"cycle detected: {' -> '.join(self.cycle)}")


class HelperArgumentError(PaletteError):
    """A template helper got a missing, wrong-typed or out-of-range argument."""

    def __init__(self, helper: str, argument: str, expectation: str, value: Any = None):
        self.helper = helper
        self.argument = argument
        self.expectation = expectation
        self.value = value
        super().__init__(f"{helper}: argument '{argument}' {expectation}, got {value!r}")


class PaletteLoadError(PaletteError):
    """A palette document could not be read or decoded into a palette."""

    def __init__(self, path: Any, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"loading palette {path}: {reason}")


class RenderError(PaletteError):
    """A template failed to render against a resolved palette."""

    def __init__(self, template: Any, reason: str):
        self.template = template
        self.reason = reason
        super().__init__(f"rendering template {template}: {reason}")
