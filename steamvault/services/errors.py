# analytics api error taxonomy
# raised by the http client, caught by the view layer


class AnalyticsAPIError(Exception):
    """base class for every failure talking to the analytics api"""

    def __init__(self, url: str, message: str):
        self.url = url
        self.message = message
        super().__init__(self.message)


class NetworkError(AnalyticsAPIError):
    """transport failed before a response arrived (dns, refused, timeout)"""


class HttpError(AnalyticsAPIError):
    """response arrived with a non-2xx status"""

    def __init__(self, url: str, status: int):
        self.status = status
        super().__init__(url, f"HTTP error! status: {status}")


class DecodeError(AnalyticsAPIError):
    """response body was not json or did not match the expected shape"""
