"""
Custom exception hierarchy for allparams.

Usage and open failures end the run; catalog and Inform problems are
reported and skipped.
"""


class AllParamsError(Exception):
    """Base exception for all allparams errors."""
    pass


class LibraryLoadError(AllParamsError):
    """Raised when the native MediaInfo library cannot be loaded."""
    pass


class FileOpenError(AllParamsError):
    """Raised when MediaInfo cannot open the given media file."""
    pass


class InformFormatError(AllParamsError):
    """Raised when a line of the 'Inform' value has no key/value separator."""

    def __init__(self, line: str):
        super().__init__(f"Unexpected format in the 'Inform' parameter: {line!r}")
        self.line = line
