"""Exceptions raised by the Jaguar API client.

Every exception carries a message meant to be shown to the user as-is;
the UI collapses all of them to ``str(error)``.
"""


class JaguarError(Exception):
    """Base class for all generation failures."""

    pass


class ValidationError(JaguarError):
    """Parameters failed client-side validation; no request was made.

    Attributes:
        errors: Individual violation messages in rule order
    """

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__(", ".join(self.errors))


class NetworkError(JaguarError):
    """The request never produced an HTTP response (DNS, refused, reset...)."""

    pass


class HttpStatusError(JaguarError):
    """The remote service answered with a non-2xx status.

    Attributes:
        status_code: HTTP status returned by the service
    """

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(message)


class ParseError(JaguarError):
    """A 2xx response body was not the expected JSON shape."""

    def __init__(self, message: str = "Invalid response from server"):
        super().__init__(message)
