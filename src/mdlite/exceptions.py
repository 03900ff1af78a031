"""Custom exceptions for mdlite."""


class MdliteError(Exception):
    """Base exception for mdlite operations."""


class InvalidInputError(MdliteError, TypeError):
    """Caller passed a value the entry points do not accept."""


class RenderError(MdliteError):
    """Error while serializing a document tree."""
