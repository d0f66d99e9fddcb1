"""
Error types for the list command.

All errors inherit from ListCommandError so the CLI can catch them in one
place. None of them are retried.
"""


class ListCommandError(Exception):
    """Base exception for every list-command failure."""
    pass


class MalformedIdentifier(ListCommandError):
    """Raised when the job id or status name given by the caller is invalid."""

    def __init__(self, kind: str, value: str, reason: str = ""):
        self.kind = kind
        self.value = value
        message = f"invalid {kind} {value!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TransportFailure(ListCommandError):
    """Raised when the request could not reach the transfer engine."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"could not reach transfer engine at {url}: {reason}")


class EngineRejected(ListCommandError):
    """Raised when the engine answers with anything other than 202 Accepted."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"request failed with status {status_code} {reason}".rstrip())


class MalformedResponse(ListCommandError):
    """Raised when the response body does not match the expected report schema."""

    def __init__(self, report: str, reason: str):
        self.report = report
        self.reason = reason
        super().__init__(f"error parsing the {report}: {reason}")
