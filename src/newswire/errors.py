"""Request validation errors."""

from enum import StrEnum


class RequestErrorKind(StrEnum):
    """Pre-flight validation failures, checked in declaration order."""

    API_KEY_MISSING = "API_KEY MISSING"
    PAGE_SIZE_UNDEFINED = "pageSize undefined"
    PAGE_SIZE_OUT_OF_BOUNDS = "pageSize out of bounds"
    INVALID_DATE_FORMAT = (
        "Invalid Date format provided. Please make sure it uses the ISO 8601 format "
        "(e.g. 2021-07-20 or 2021-07-20T15:40:24)"
    )


class InvalidRequestError(ValueError):
    """Raised when a request config fails validation, before any network I/O.

    Attributes:
        kind: Which validation rule failed.
    """

    def __init__(self, kind: RequestErrorKind) -> None:
        self.kind = kind
        super().__init__(kind.value)
