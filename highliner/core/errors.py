"""
Exceptions and warnings raised by highliner.
"""


class HighlineRError(Exception):
    """Base class for all highliner errors."""


class DataFileNotFoundError(HighlineRError, FileNotFoundError):
    """Raised when a sequence file does not exist."""


class UnsupportedFormat(HighlineRError, ValueError):
    """Raised when a file type cannot be handled."""


class InvalidArgument(HighlineRError, ValueError):
    """Raised for malformed arguments (bad seqtype, wrong parameter type, ...)."""


class NotFound(HighlineRError, KeyError):
    """Raised when a session or a Data record does not exist."""

    def __str__(self):
        # KeyError quotes its message otherwise
        return str(self.args[0]) if self.args else ""


class SessionNotFoundError(NotFound):
    pass


class RecordNotFoundError(NotFound):
    pass


class HighlineRWarning(UserWarning):
    """Base class for non-fatal highliner warnings."""


class DuplicateImportWarning(HighlineRWarning):
    """A file was already imported into the session and was skipped."""


class ImportFailedWarning(HighlineRWarning):
    """A member of a batch import failed and was skipped."""
