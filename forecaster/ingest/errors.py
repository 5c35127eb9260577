"""Errors raised by the NWS client."""


class NwsError(Exception):
    """Base class for any failed NWS fetch."""


class NwsTransportError(NwsError):
    """The request never produced a response (DNS, connect, timeout)."""


class NwsStatusError(NwsError):
    def __init__(self, url: str, status_code: int):
        super().__init__(f"Request to {url} failed with status: {status_code}")
        self.url = url
        self.status_code = status_code


class NwsDecodeError(NwsError):
    """The response body was not valid JSON of the expected shape."""
