from typing import Dict

# Every upstream failure is reported to the caller with this one message.
GENERIC_ERROR_MESSAGE = "Cannot scrape media from this website"


class ScrapeError(Exception):
    """Raised when no usable document could be obtained for a page."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class FetchFailure(ScrapeError):
    """Transport error or a non-2xx status."""

    def __init__(self, url: str, reason: str, status: int | None = None):
        super().__init__(url, reason)
        self.status = status


class DecodeFailure(ScrapeError):
    """Body bytes could not be decoded as text."""


# Notes attached to log lines; the service never retries.
STATUS_NOTES: Dict[int, str] = {
    200: "OK",
    203: "Non-Authoritative Information",
    204: "No Content",
    301: "Moved Permanently",
    302: "Found",
    304: "Not Modified",
    400: "Bad Request",
    401: "Unauthorized",
    403: "Forbidden",
    404: "Not Found",
    408: "Request Timeout",
    429: "Too Many Requests",
    500: "Server Error",
    502: "Bad Gateway",
    503: "Service Unavailable",
    504: "Gateway Timeout",
}

DEFAULT_NOTE = "Unknown status"


def is_success(status_code: int) -> bool:
    """Only the 2xx class yields a usable document."""
    return status_code // 100 == 2


def describe_status(status_code: int) -> str:
    return STATUS_NOTES.get(status_code, DEFAULT_NOTE)
