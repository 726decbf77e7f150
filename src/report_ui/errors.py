"""
Error types raised by the report data-access layer.

Every failure to obtain a report (transport error, non-2xx status, an
undecodable body) is a ReportLoadError. Pages show the same generic message
for all of them; the detail only goes to the log.
"""

GENERIC_ERROR_MESSAGE = "Failed to load report"


class ReportError(Exception):
    """Base class for report errors."""


class ReportLoadError(ReportError):
    """
    A report request did not produce a usable payload.

    Attributes:
        path: Endpoint path that was requested.
        status_code: HTTP status when a response was received, else None.
    """

    def __init__(self, path: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
        self.status_code = status_code


class UnknownReportError(ReportError, KeyError):
    """Raised when a report name is not in the catalogue."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown report: {self.name}"
