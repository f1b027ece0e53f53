"""Errors raised while loading or downgrading a document.

Conversion never returns a partial result: the first error aborts the
whole call.
"""


class DowngradeError(Exception):
    """Base class for everything this package raises on purpose."""


class DocumentError(DowngradeError):
    """The input text is not a readable OpenAPI 3.0/3.1 document."""


class UnsupportedFeatureError(DowngradeError):
    """A 3.1 construct has no representation in 3.0."""

    def __init__(self, feature: str, message: str | None = None):
        self.feature = feature
        super().__init__(message or f"{feature} cannot be expressed in OpenAPI 3.0")


class StructuralInvariantError(DowngradeError):
    """The input has a shape its own revision forbids."""

    def __init__(self, message: str, reference: str | None = None):
        self.reference = reference
        super().__init__(message)
