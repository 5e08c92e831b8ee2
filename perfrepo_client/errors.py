"""Exceptions raised by the PerfRepo client."""


class PerfRepoError(Exception):
    """Base class for errors raised by the client itself."""


class UnexpectedStatusError(PerfRepoError):
    """Raised when the server answers with a status the operation does not expect."""

    def __init__(self, url: str, status: int, reason: str | None, body: str) -> None:
        self.url = url
        self.status = status
        self.reason = reason
        self.body = body
        status_line = f"{status} {reason}" if reason else str(status)
        super().__init__(f"URL: {url}, Status: {status_line}, Response: {body}")


class NotFoundError(PerfRepoError):
    """Raised when a read returns 200 with an empty body."""

    def __init__(self, url: str) -> None:
        self.url = url
        super().__init__(f"Entity with given location {url} doesn't exist")


class ParseError(PerfRepoError, ValueError):
    """Raised when wire text cannot be decoded."""


class EnumParseError(ParseError):
    """Raised when a token matches no member of an enumeration."""


class TimestampParseError(ParseError):
    """Raised when a date-time does not match the JAXB format."""


class UnexpectedElementError(ParseError):
    """Raised when an XML document contains an element of the wrong name."""
