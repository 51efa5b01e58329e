"""Exception taxonomy for the medal table.

Input validation problems are recoverable and usually turned into a
fallback by the caller. Dataset integrity problems are fatal for the
request. Unknown country codes passed to a lookup are programming errors.
"""


class MedalTableException(Exception):
    """Base class for all medal table errors."""


class ValidationException(MedalTableException, ValueError):
    """Raised when caller-supplied input fails validation."""


class InvalidSortTypeException(ValidationException):
    def __init__(self, value, allowed):
        self.value = value
        self.allowed = tuple(allowed)
        super().__init__(
            f"Invalid sort parameter: {value}. Must be one of: {', '.join(self.allowed)}"
        )


class MedalDataValidationException(MedalTableException):
    """Raised when the canonical medal dataset cannot be loaded or validated."""


class UnknownCountryCodeException(MedalTableException, KeyError):
    """Raised when a country lookup is attempted with an unvalidated code."""

    def __init__(self, code):
        self.code = code
        super().__init__(code)

    def __str__(self) -> str:
        return f"Unknown country code: {self.code!r}"
