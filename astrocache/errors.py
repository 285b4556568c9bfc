"""Error taxonomy for astro lookups."""

from astrocache.models.astro import ApiError


class AstroError(Exception):
    """Base class for every failure raised while resolving astro data."""


class ValidationError(AstroError):
    """Raised when the caller supplied unusable input."""


class TransportError(AstroError):
    """Raised when the provider could not be reached."""


class UpstreamApiError(AstroError):
    """Raised when the provider answered with its error envelope."""

    def __init__(self, api_error: ApiError, status_code: int | None = None):
        super().__init__(
            f"API error occurred: code={api_error.code}, "
            f"type={api_error.type}, info={api_error.info}"
        )
        self.api_error = api_error
        self.status_code = status_code


class MalformedPayload(AstroError):
    """Raised when a success response cannot be decoded."""


class MalformedErrorPayload(AstroError):
    """Raised when an error response cannot be decoded."""


class ExpiryError(AstroError):
    """Raised when an expiry instant cannot be computed."""


class UnknownTimeZone(ExpiryError):
    pass


class MalformedLocalTime(ExpiryError):
    pass
