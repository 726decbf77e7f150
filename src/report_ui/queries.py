"""
Report queries: the data-fetch hooks behind each report page.

A ReportQuery binds a catalogued report to the page's current filters and a
ReportService, and exposes the fetched payload with a three-state status.
Caching and request deduplication belong to the service; a query only
tracks the outcome of its latest run.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from report_ui.errors import GENERIC_ERROR_MESSAGE, ReportLoadError
from report_ui.lib import logs
from report_ui.services import ReportService, get_definition, get_report_service

LOG = logs.logger(__file__)


class QueryStatus(str, Enum):
    LOADING = "loading"
    ERROR = "error"
    SUCCESS = "success"


@dataclass
class ReportQuery:
    """
    Parameterized fetch of one report.

    Attributes:
        report: Report name from the catalogue.
        filters: Current filter values; unset values are ignored.
        service: Report service, defaults to the configured one.
        status: Outcome of the latest run; LOADING until a run completes.
        data: Raw payload of the latest successful run.
        error: Generic message after a failed run, else None.
    """

    report: str
    filters: dict[str, Any] = field(default_factory=dict)
    service: ReportService | None = None
    status: QueryStatus = QueryStatus.LOADING
    data: dict[str, Any] | None = None
    error: str | None = None

    def __post_init__(self) -> None:
        # fail fast on unknown report names and filters
        self.definition = get_definition(self.report)
        self.definition.with_defaults(self.filters)

    @property
    def enabled(self) -> bool:
        """True when all path parameters and required filters are set."""
        return self.definition.is_enabled(self.filters)

    @property
    def params(self) -> dict[str, Any]:
        """Cleaned filters with defaults, as they would be sent."""
        return self.definition.with_defaults(self.filters)

    @property
    def is_loading(self) -> bool:
        return self.status is QueryStatus.LOADING

    @property
    def is_error(self) -> bool:
        return self.status is QueryStatus.ERROR

    @property
    def is_success(self) -> bool:
        return self.status is QueryStatus.SUCCESS

    @property
    def model(self) -> Any:
        """Parsed payload of the latest successful run, or None."""
        if self.data is None:
            return None
        return self.definition.parse(self.data)

    def update(self, **filters: Any) -> "ReportQuery":
        """
        Replace filter values and reset to LOADING.

        Previously fetched data stays available until the next run finishes.
        """
        merged = {**self.filters, **filters}
        self.definition.with_defaults(merged)
        self.filters = merged
        self.status = QueryStatus.LOADING
        self.error = None
        return self

    def run(self) -> "ReportQuery":
        """
        Fetch the report with the current filters.

        Disabled queries are not sent and stay LOADING. Load failures set
        ERROR with the generic message; an empty payload is a SUCCESS.

        Returns:
            self, for chaining.
        """
        if not self.enabled:
            LOG.debug("Query disabled - report:%s filters:%s", self.report, self.filters)
            return self

        service = self.service or get_report_service()
        self.status = QueryStatus.LOADING
        try:
            self.data = service.load(self.report, **self.filters)
        except ReportLoadError as exc:
            LOG.warning("Report load failed - report:%s error:%s", self.report, exc)
            self.status = QueryStatus.ERROR
            self.error = GENERIC_ERROR_MESSAGE
            return self

        self.status = QueryStatus.SUCCESS
        self.error = None
        return self
