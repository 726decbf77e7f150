"""
Demo implementation of ReportService using static in-memory payloads.

Useful for local development without a backend and for exercising pages
with realistic figures. The requested period or year is echoed into the
returned payload so filter changes are visible.
"""

import copy
from collections.abc import Mapping
from typing import Any

from report_ui.data.demo_reports import DEMO_REPORTS
from report_ui.errors import ReportLoadError
from report_ui.services.report_service import ReportService


class DemoReportService(ReportService):
    """
    In-memory report service backed by static demo payloads.

    Endpoints without demo data fail like a 404 from the backend.
    """

    def __init__(self, reports: Mapping[str, dict] | None = None) -> None:
        """
        Initialize with report payloads.

        Args:
            reports: Endpoint path to payload, or None to use DEMO_REPORTS.
        """
        self._reports: Mapping[str, dict] = DEMO_REPORTS if reports is None else reports

    def fetch(self, path: str, params: Mapping[str, Any]) -> dict[str, Any]:
        try:
            payload = copy.deepcopy(self._reports[path])
        except KeyError as exc:
            raise ReportLoadError(path, "no demo data", status_code=404) from exc

        if "year" in params and "year" in payload:
            try:
                payload["year"] = int(params["year"])
            except (TypeError, ValueError) as exc:
                raise ReportLoadError(path, "invalid year", status_code=422) from exc
        if "period" in payload and ("start_date" in params or "end_date" in params):
            payload["period"] = {
                "start": params.get("start_date", ""),
                "end": params.get("end_date", ""),
            }
        if "as_of_date" in params and "as_of_date" in payload:
            payload["as_of_date"] = params["as_of_date"]
        return payload
