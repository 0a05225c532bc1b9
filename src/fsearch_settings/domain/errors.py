"""Domain errors — custom exceptions for fsearch-settings.

The key/value store raises these; the field codec turns field-level errors
into defaults and the settings store turns store-level errors into a
boolean ``ok`` result.
"""


class FSearchSettingsError(Exception):
    """Base exception for all fsearch-settings errors."""


# -- Store-level (fatal) ------------------------------------------------------


class StoreError(FSearchSettingsError):
    """Raised when the backing key/value file cannot be used at all."""


class StoreOpenError(StoreError):
    """Raised when the key/value file cannot be opened or read."""


class StoreParseError(StoreError):
    """Raised when the key/value file has malformed top-level syntax."""


class StoreWriteError(StoreError):
    """Raised when the key/value file cannot be committed to disk."""


# -- Field-level (recoverable) ------------------------------------------------


class FieldError(FSearchSettingsError):
    """Raised when a single key cannot be read from a loaded store."""


class GroupNotFoundError(FieldError):
    """Raised when the requested group does not exist."""


class KeyNotFoundError(FieldError):
    """Raised when the requested key does not exist in its group."""


class InvalidValueError(FieldError):
    """Raised when a stored value cannot be parsed as the requested type."""


# -- Application ----------------------------------------------------------------


class LocationNotFoundError(FSearchSettingsError):
    """Raised when a location cannot be found by index."""
