"""sitemap-xml-writer error hierarchy.

All package errors inherit from SitemapError for easy catching.

Validation errors are raised before anything reaches the output sink and
are always recoverable: fix the input and try again.  I/O failures wrap
the sink's own error and leave the writer unusable.
"""


class SitemapError(Exception):
    """Base error for all sitemap-xml-writer operations."""


class ConfigError(SitemapError):
    """Invalid or unreadable configuration or entries file."""


class ValidationError(SitemapError, ValueError):
    """A field value failed validation.

    Attributes:
        value: The rejected input, as given by the caller.

    """

    def __init__(self, message: str, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class EmptyLocation(ValidationError):
    """A ``loc`` value was empty."""


class InvalidUrlSyntax(ValidationError):
    """A ``loc`` value is not an absolute URL."""


class InvalidDateSyntax(ValidationError):
    """A ``lastmod`` value is not a W3C date or datetime."""


class UnknownChangefreq(ValidationError):
    """A ``changefreq`` value is not one of the seven allowed words."""


class InvalidDecimalSyntax(ValidationError):
    """A ``priority`` value is not a plain decimal number."""


class PriorityOutOfRange(ValidationError):
    """A ``priority`` value is outside ``[0.0, 1.0]``."""


class IoFailure(SitemapError, OSError):
    """The output sink reported an error while being written to."""


class WriterStateError(SitemapError, RuntimeError):
    """A writer method was called in a state that does not allow it."""
