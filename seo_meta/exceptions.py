"""
Errors raised while declaring page metadata.

All of them derive from ``ImproperlyConfigured``: metadata is static
configuration, so a bad declaration must stop start-up instead of being
dropped at request time. Lookup misses are not errors and never raise.
"""
from django.core.exceptions import ImproperlyConfigured


class SeoMetaError(ImproperlyConfigured):
    """Base class for metadata declaration errors."""


class InvalidEnumValue(SeoMetaError, ValueError):
    def __init__(self, field, value, allowed):
        self.field = field
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid value {value!r} for {field}. Supported: {list(self.allowed)!r}."
        )


class UnknownField(SeoMetaError, KeyError):
    def __init__(self, field, known=()):
        self.field = field
        self.known = tuple(known)
        super().__init__(
            f"Unknown metadata field {field!r}. Supported: {list(self.known)!r}."
        )

    def __str__(self) -> str:
        # KeyError would repr() the message
        return self.args[0]


class InvalidFieldValue(SeoMetaError, TypeError):
    def __init__(self, field, value):
        self.field = field
        self.value = value
        super().__init__(
            f"Tag {field} has a bad value: {value!r}. Value must be a non-empty string."
        )


class InvalidPath(SeoMetaError, ValueError):
    def __init__(self, path, reason):
        self.path = path
        super().__init__(f"Cannot register metadata for path {path!r}: {reason}.")


class DuplicatePath(SeoMetaError, KeyError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"Metadata for path {path!r} is already registered.")

    def __str__(self) -> str:
        return self.args[0]
