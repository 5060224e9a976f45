"""
Error taxonomy for the detector service.

Scoring itself never raises: every function in the pipeline is total over
its input. The errors below belong to the collaborators around it.
"""


class DetectorError(Exception):
    """Base class for all service-level failures."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ExtractionError(DetectorError):
    """The document could not be read into analysable text."""


class StorageError(DetectorError):
    """A read or write against the key-value store failed."""


class UnknownActionError(DetectorError):
    """A message carried an action nobody handles."""

    def __init__(self, action: object) -> None:
        super().__init__("Unknown action")
        self.action = action
