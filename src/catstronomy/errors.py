"""
Error types raised while resolving fields against the track catalogue
"""

from typing import Any


class CatstronomyError(Exception):
    """Base exception for the Catstronomy API."""

    pass


class ModelMismatchError(CatstronomyError):
    """An exposed GraphQL field has neither a resolver nor a matching backing field.

    Raised at startup; the server must not serve traffic with this defect.
    """

    def __init__(self, problems: list[str]):
        self.problems = problems
        super().__init__("Entity model mismatch: " + "; ".join(problems))


class FetchError(CatstronomyError):
    """Base exception for a failed fetch against a remote resource.

    Strawberry copies ``extensions`` onto the GraphQL error entry, so clients
    can tell the failure kinds apart.
    """

    code = "FETCH_FAILURE"

    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code}


class TransportError(FetchError):
    """The remote call could not complete (connection failure or timeout)."""

    code = "TRANSPORT_FAILURE"


class RemoteError(FetchError):
    """The remote call completed with a non-success status."""

    code = "REMOTE_FAILURE"

    def __init__(self, message: str, url: str, status_code: int):
        self.status_code = status_code
        super().__init__(message, url)

    @property
    def extensions(self) -> dict[str, Any]:
        return {"code": self.code, "status": self.status_code}


class DecodeError(FetchError):
    """The remote body could not be read as the expected backing record shape."""

    code = "DECODE_FAILURE"
