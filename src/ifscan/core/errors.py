class IfscanError(Exception):
    """Base error for ifscan exceptions."""


class InputReadError(IfscanError):
    """Raised when the configuration stream cannot be read."""
