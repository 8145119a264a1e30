"""Exception hierarchy for ISO8601 duration conversion."""


class DurationError(Exception):
    """Base exception for duration parse and format errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging (CWE-209 prevention).
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class BadFormatError(DurationError):
    """Raised when a string is not a supported ISO8601 duration."""


class NoMonthError(DurationError):
    """Raised when a duration string contains a month element."""


class NoNegativeError(DurationError):
    """Raised when formatting a negative duration."""


# Sanitized user-facing error message constants
ERR_MSG_BAD_FORMAT = "bad format string"
ERR_MSG_NO_MONTH = "no month elements allowed"
ERR_MSG_NO_NEGATIVE = "cannot format negative duration"
