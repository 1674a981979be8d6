"""Exceptions raised inside the decision pipeline.

None of these cross the engine boundary: workflow/processor.py converts
them into a non-processing decision.
"""


class EngineError(Exception):
    """Base class for per-file evaluation failures."""


class MissingProbeDataError(EngineError):
    """Stream metadata is absent (corrupt file or failed probe)."""

    def __init__(self, message: str = "Corrupt file or missing probe data") -> None:
        super().__init__(message)


class NoVideoStreamError(EngineError):
    """The probe contains no video stream."""

    def __init__(self, message: str = "No video stream found") -> None:
        super().__init__(message)


class OptionsError(Exception):
    """Encode options could not be constructed from the supplied values."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.message = message
        self.field = field
        super().__init__(message)
