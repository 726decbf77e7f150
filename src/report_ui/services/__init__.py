"""
Service factory for the Report UI.

get_report_service() returns the ReportService implementation selected by
configuration.

Available Implementations:
- http: REST backend with a disk response cache
- demo: Static in-memory payloads (no backend required)

The service is cached at the module level, so the same instance (and its
HTTP session and cache) is reused across pages. Configure via the
REPORT_UI_SERVICE environment variable.
"""

from collections.abc import Callable
from functools import cache

from report_ui.config import get_settings
from report_ui.lib import logs
from report_ui.services.catalog import REPORTS, ReportDefinition, clean_params, get_definition
from report_ui.services.report_service import ReportService
from report_ui.services.report_service_demo import DemoReportService
from report_ui.services.report_service_http import HttpReportService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: dict[str, Callable[[], ReportService]] = {
    "http": lambda: HttpReportService(),
    "demo": lambda: DemoReportService(),
}


@cache
def get_report_service(kind: str | None = None) -> ReportService:
    """Return the configured report service implementation."""
    resolved_kind = (kind or get_settings().service).lower()
    LOG.info("get_report_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown report service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "REPORTS",
    "DemoReportService",
    "HttpReportService",
    "ReportDefinition",
    "ReportService",
    "clean_params",
    "get_definition",
    "get_report_service",
]
