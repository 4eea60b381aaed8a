"""Exceptions raised by extension mutation.

Lookups never raise: a missing element, list or match is always signaled
by returning None. Only mutations that cannot find or build their target
element, or that receive a malformed extension, fail.
"""


class ExtensionError(Exception):
    """Base class for all fhirext errors."""


class MissingTargetError(ExtensionError):
    """Mutation requested on an absent element with no way to create one."""

    def __init__(self, url: str | None = None):
        self.url = url
        message = "Attempt to set an Extension without a createExtension method"
        if url:
            message = f"{message} (url={url!r})"
        super().__init__(message)


class ElementCreationError(ExtensionError):
    """The element factory raised or did not return a usable element."""

    def __init__(self, url: str | None = None, reason: str = "factory returned no element"):
        self.url = url
        self.reason = reason
        message = f"Could not create element for extension: {reason}"
        if url:
            message = f"{message} (url={url!r})"
        super().__init__(message)


class InvalidExtensionError(ExtensionError, ValueError):
    """An extension dict that cannot be read as a single url/value pair."""
