"""
Deezer Errors - Exception hierarchy raised by the Deezer client.

Absent resources on identifier lookups are not errors; they resolve to None.
"""


class DeezerError(Exception):
    """Base class for every error raised by the Deezer client."""


class DeezerTransportError(DeezerError):
    """Network level failure: DNS, connect, TLS, timeout."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Request to {url} failed: {message}")
        self.url = url


class DeezerHTTPError(DeezerError):
    """The server answered with a status outside the success range."""

    def __init__(self, status: int, url: str, message: str | None = None):
        super().__init__(message or f"Deezer API returned status {status} for {url}")
        self.status = status
        self.url = url


class DeezerNotFoundError(DeezerHTTPError):
    """A resource that had to exist was reported missing."""

    def __init__(self, url: str):
        super().__init__(404, url, f"Deezer resource not found: {url}")


class DeezerAPIError(DeezerHTTPError):
    """Error object returned in the body of an otherwise successful response.

    Deezer reports some failures as HTTP 200 with
    ``{"error": {"type": ..., "message": ..., "code": ...}}``.
    """

    NO_DATA = 800

    def __init__(
        self,
        status: int,
        url: str,
        code: int | None,
        error_type: str | None,
        message: str | None,
    ):
        super().__init__(
            status, url, f"Deezer API error {code} ({error_type}) for {url}: {message}"
        )
        self.code = code
        self.error_type = error_type
        self.api_message = message

    @property
    def is_no_data(self) -> bool:
        return self.code == self.NO_DATA


class DeezerDecodeError(DeezerError):
    """The response body does not match the expected shape."""

    def __init__(self, url: str, message: str):
        super().__init__(f"Could not decode response from {url}: {message}")
        self.url = url
