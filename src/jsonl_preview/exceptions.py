"""Exception hierarchy for jsonl-preview."""

from __future__ import annotations


class PreviewError(Exception):
    """Base exception for all jsonl-preview errors."""

    http_status: int = 500


class InvalidPageError(PreviewError):
    """
    The requested page number is invalid (page < 1).

    Raised before the file locator or the network is touched, so the
    caller can simply retry with a corrected page.
    """

    http_status = 400


class ObjectNotFoundError(PreviewError):
    """
    The storage object does not exist (HTTP 404).

    PreviewClient turns this into an ``exists: false`` result rather than
    letting it reach the caller.
    """

    http_status = 404

    def __init__(self, message: str, url: str | None = None):
        super().__init__(message)
        self.url = url


class FetchError(PreviewError):
    """
    Fetching the export file failed.

    Covers non-success statuses other than 404 and transport errors,
    including a connection dropped halfway through the body. Not retried.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url


class RecordParseError(PreviewError):
    """
    A single JSONL line inside the page window is not valid JSON.

    Never raised out of a request: the record is dropped, the error is
    kept on ``PageSlice.parse_errors`` and the line still counts toward
    the total.
    """

    def __init__(self, message: str, line_index: int):
        super().__init__(message)
        self.line_index = line_index


_MESSAGES = {
    InvalidPageError: "Page must be >= 1",
    FetchError: "Failed to fetch preview data",
}


def error_response(exc: BaseException) -> tuple[int, dict]:
    """
    Map an exception to an HTTP status and an error body.

    Args:
        exc: Exception raised while serving a preview request

    Returns:
        Tuple of (status code, ``{"error": message}``)

    Example:
        try:
            result = await client.preview_async("proj-1", page=page)
        except Exception as e:
            status, body = error_response(e)
    """
    for exc_class, message in _MESSAGES.items():
        if isinstance(exc, exc_class):
            return exc_class.http_status, {"error": message}
    return 500, {"error": "Internal server error"}
