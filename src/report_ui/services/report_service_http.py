"""
REST implementation of ReportService.

Issues ``GET {base_url}{path}?{params}`` with requests and unwraps the
``{"data": ...}`` envelope. Successful payloads are cached on disk for the
configured staleness window, keyed by path and parameters, so identical
requests from several pages or quick re-renders are served once. A single
retry with exponential backoff on connection errors and 5xx responses is
left to urllib3's Retry; there is no further recovery logic here.
"""

from collections.abc import Mapping
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from report_ui.config import Settings, get_settings
from report_ui.errors import ReportLoadError
from report_ui.lib import caches, logs, objects
from report_ui.services.report_service import ReportService

LOG = logs.logger(__file__)


def build_session(token: str | None = None, retries: int = 1) -> requests.Session:
    """
    Create a session with JSON headers, optional bearer auth and GET retries.

    Args:
        token: Bearer token for the Authorization header.
        retries: Retry attempts for failed GETs.

    Returns:
        Configured requests.Session.
    """
    session = requests.Session()
    session.headers.update(
        {
            "Accept": "application/json",
            "Content-Type": "application/json",
        }
    )
    if token:
        session.headers["Authorization"] = f"Bearer {token}"

    retry = Retry(
        total=retries,
        backoff_factor=1,
        status_forcelist=(502, 503, 504),
        allowed_methods=frozenset({"GET"}),
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class HttpReportService(ReportService):
    """
    Report service backed by the REST API.

    Attributes:
        base_url: API base URL including the version prefix.
        timeout: Request timeout in seconds.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        session: requests.Session | None = None,
        cache: caches.ResponseCache | None = None,
    ) -> None:
        """
        Initialize the service.

        Args:
            settings: Settings to use, defaults to the environment settings.
            session: HTTP session, built from settings when omitted.
            cache: Response cache, created in settings.cache_dir when omitted.
        """
        settings = settings or get_settings()
        self.base_url = settings.api_base_url.rstrip("/")
        self.timeout = settings.timeout
        self._session = session or build_session(settings.api_token)
        # the token itself never reaches the cache directory
        self._cache_scope = objects.stable_hash([self.base_url, settings.api_token or ""])
        self._cache = cache or caches.ResponseCache(
            settings.cache_dir, stale_seconds=settings.stale_seconds
        )

    def fetch(self, path: str, params: Mapping[str, Any]) -> dict[str, Any]:
        params = dict(params)
        key = objects.request_key(path, params, scope=self._cache_scope)
        entry = self._cache.get_or_load(key, lambda: self._get(path, params))
        if entry.hit:
            LOG.debug("Cache hit: %s %s", path, params)
        return entry.value

    def invalidate(self) -> None:
        self._cache.clear()

    def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        url = f"{self.base_url}{path}"
        LOG.info("GET %s params:%s", path, params)
        try:
            response = self._session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            raise ReportLoadError(path, f"request failed: {exc}") from exc

        if not response.ok:
            raise ReportLoadError(
                path,
                f"unexpected status {response.status_code}",
                status_code=response.status_code,
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise ReportLoadError(
                path, "response is not JSON", status_code=response.status_code
            ) from exc

        if isinstance(body, Mapping) and "data" in body:
            body = body["data"]
        if not isinstance(body, Mapping):
            raise ReportLoadError(
                path, "response payload is not an object", status_code=response.status_code
            )
        return dict(body)
