"""
Custom exceptions for the Glo Boards API client

Transport errors from aiohttp are not wrapped; they propagate unchanged.
"""
from typing import Optional


class GloException(Exception):
    """Base exception for all client errors."""
    pass


class APIException(GloException):
    """
    Raised when the Glo API answers with a non-2xx status.

    Attributes:
        status: HTTP status code of the response
        body: Raw response body text
        method: HTTP method of the failed request
        url: Full request URL
    """

    def __init__(
        self,
        message: str = "",
        status: Optional[int] = None,
        body: Optional[str] = None,
        method: Optional[str] = None,
        url: Optional[str] = None
    ):
        super().__init__(message)
        self.status = status
        self.body = body
        self.method = method
        self.url = url


class ConfigurationException(GloException):
    """Exception for configuration-related errors."""
    pass
