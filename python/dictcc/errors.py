"""Exceptions raised by dictcc."""


class DictccError(Exception):
    """Base class for all dictcc errors."""


class MissingStoreError(DictccError):
    """The dictionary directory or one of its stores does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(
            f"There's no dictionary at {path}. You have to import a dict.cc "
            f"file first (see: dictcc --help)."
        )


class SourceFileError(DictccError):
    """The import source file cannot be read."""

    def __init__(self, path, reason: str = ""):
        self.path = path
        message = f"Cannot read dict file {path}"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class FormatError(DictccError, ValueError):
    """A serialized entry does not follow the entry grammar."""


class InvalidPatternError(DictccError, ValueError):
    """A query pattern is not a valid regular expression."""


class ConfigError(DictccError, ValueError):
    """A configured value is not recognized."""
