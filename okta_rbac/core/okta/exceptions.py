"""Okta-specific exceptions for error handling."""


class OktaError(Exception):
    """Base exception for all Okta directory operations."""
    pass


class OktaAPIError(OktaError):
    """HTTP error from the Okta Management API.
    
    Attributes:
        status_code: HTTP status code
        message: Error message from response (errorSummary when present)
        endpoint: API endpoint that failed
        error_code: Okta error code (e.g. E0000011), empty if not provided
    """
    
    def __init__(self, status_code: int, message: str, endpoint: str, error_code: str = ""):
        self.status_code = status_code
        self.message = message
        self.endpoint = endpoint
        self.error_code = error_code
        prefix = f"[{status_code}]" if not error_code else f"[{status_code} {error_code}]"
        super().__init__(f"{prefix} {endpoint}: {message}")


class OktaRateLimitError(OktaAPIError):
    """Okta rejected the request with 429 Too Many Requests.
    
    Attributes:
        reset_at: Epoch seconds from X-Rate-Limit-Reset, None if absent
    """
    
    def __init__(self, message: str, endpoint: str, error_code: str = "", reset_at: int | None = None):
        self.reset_at = reset_at
        super().__init__(429, message, endpoint, error_code)
