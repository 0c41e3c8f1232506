"""Exceptions for prefstore."""


class StoreError(Exception):
    """Base exception for settings store errors."""

    pass


class DirectoryUnavailableError(StoreError):
    """The platform could not supply a user configuration directory."""

    pass


class StoreFileError(StoreError):
    """Error creating, reading, writing or removing a settings file."""

    pass


class StoreFileNotFoundError(StoreFileError, FileNotFoundError):
    """Settings file does not exist (nothing saved yet, or already deleted)."""

    pass


class EncodingError(StoreError):
    """Record could not be serialized in the requested format."""

    pass


class DecodingError(StoreError):
    """File content is malformed or does not match the target record shape."""

    pass


class UnsupportedFormatError(StoreError):
    """No codec is registered for the requested format."""

    pass
