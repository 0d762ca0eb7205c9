# planwright/errors.py
"""
Error types raised by the planning pipeline.

All of them are contract violations: a caller asked for a format, viewpoint,
strategy or output that does not exist. They are never retried. Anything else
the pipeline encounters degrades to empty or default values instead.
"""


class PlanwrightError(ValueError):
    """Base class for planwright contract errors."""


class UnsupportedFormat(PlanwrightError):
    """Structured input whose file extension has no parser."""

    def __init__(self, file_name: str):
        self.file_name = file_name
        super().__init__(
            f"Unsupported file format: {file_name} (expected .md, .markdown or .txt)"
        )


class UnknownViewpoint(PlanwrightError):
    """Explicit viewpoint override that is not in the catalog."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        super().__init__(
            f"Unknown viewpoint '{name}'. Available: {', '.join(available)}"
        )


class UnknownStrategy(PlanwrightError):
    """Explicit strategy that is not in the catalog."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        super().__init__(
            f"Unknown strategy '{name}'. Available: {', '.join(available)}"
        )


class UnknownOutputFormat(PlanwrightError):
    """Formatter asked for an output format it cannot render."""

    def __init__(self, name: str, available: list[str]):
        self.name = name
        super().__init__(
            f"Unknown output format '{name}'. Available: {', '.join(available)}"
        )
