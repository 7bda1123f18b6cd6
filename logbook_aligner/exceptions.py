"""
Custom exception hierarchy for the logbook aligner.

Every failure is fatal: the run aborts and no aligned logbook is written.
"""
from pathlib import Path


class LogbookAlignerError(Exception):
    """Base exception for all logbook aligner errors."""
    pass


class PatternError(LogbookAlignerError):
    """Raised when a numbered filename pattern cannot be inferred from a directory."""
    pass


class MissingFileError(LogbookAlignerError):
    """Raised when the file expected for a logbook record does not exist."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Missing file {path}, aborting...")


class LogbookFormatError(LogbookAlignerError):
    """Raised when the logbook file cannot be read or is not a list of records."""
    pass


class MetadataWriteError(LogbookAlignerError):
    """Raised when the external metadata writer cannot be launched."""
    pass
