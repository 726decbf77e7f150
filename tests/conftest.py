from collections.abc import Generator
from typing import Any

import pytest
import requests

from report_ui.lib.caches import ResponseCache
from report_ui.services import DemoReportService

_NOT_JSON = object()


class FakeResponse:
    def __init__(self, status_code: int = 200, body: Any = None) -> None:
        self.status_code = status_code
        self._body = body

    @property
    def ok(self) -> bool:
        return self.status_code < 400

    def json(self) -> Any:
        if self._body is _NOT_JSON:
            raise ValueError("Expecting value: line 1 column 1 (char 0)")
        return self._body


class FakeSession:
    """Stands in for requests.Session; replays queued responses or errors."""

    def __init__(self, *outcomes: FakeResponse | Exception) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[tuple[str, dict[str, Any], Any]] = []

    def get(self, url: str, params: dict[str, Any] | None = None, timeout: Any = None):
        self.calls.append((url, dict(params or {}), timeout))
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture()
def response_cache(tmp_path) -> Generator[ResponseCache, None, None]:
    cache = ResponseCache(tmp_path / "cache", stale_seconds=300)
    yield cache
    cache.close()


@pytest.fixture()
def demo_service() -> DemoReportService:
    return DemoReportService()


@pytest.fixture()
def not_json() -> object:
    return _NOT_JSON


@pytest.fixture()
def connection_error() -> requests.ConnectionError:
    return requests.ConnectionError("connection refused")
