"""Error kinds surfaced by the request handlers.

Every error reaches the caller as ``{"error": message}`` with the
status code carried by the exception.
"""


class AppError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(AppError):
    """Missing or invalid prompt/amount supplied by the caller."""
    status_code = 400


class ConfigurationError(AppError):
    """A required credential is missing from server configuration.

    The detail stays in the server log; callers only see ``public_message``.
    """
    status_code = 500

    def __init__(self, detail: str, public_message: str = "Server configuration error."):
        super().__init__(public_message)
        self.detail = detail


class UpstreamError(AppError):
    """The image provider or payment processor reported a failure."""
    status_code = 500
