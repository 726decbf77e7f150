"""
Abstract base class defining the report data access contract.

Implementations provide ``fetch``, a GET of one endpoint returning the
unwrapped ``data`` payload. ``load`` resolves a catalogued report name and
its filters into that request.

Implementations:
- HttpReportService: REST backend over requests with a disk response cache
- DemoReportService: static in-memory payloads for development and tests
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from report_ui.services.catalog import get_definition


class ReportService(ABC):
    """Base class for report data access."""

    @abstractmethod
    def fetch(self, path: str, params: Mapping[str, Any]) -> dict[str, Any]:
        """
        Return the payload of a report endpoint.

        Args:
            path: Endpoint path relative to the API base URL.
            params: Cleaned query parameters.

        Returns:
            The report payload (the ``data`` member of the response body).

        Raises:
            ReportLoadError: If the payload could not be obtained.
        """

    def load(self, name: str, **filters: Any) -> dict[str, Any]:
        """
        Fetch a catalogued report by name.

        Args:
            name: Report name from the catalogue.
            **filters: Report filters; unset values are dropped.

        Raises:
            UnknownReportError: If the report is not catalogued.
            ValueError: If filters are unexpected or required ones are missing.
            ReportLoadError: If the payload could not be obtained.
        """
        path, params = get_definition(name).resolve(filters)
        return self.fetch(path, params)

    def invalidate(self) -> None:
        """Forget cached responses. No-op for uncached services."""
