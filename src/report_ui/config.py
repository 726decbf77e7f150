"""
Runtime configuration for the Report UI.

All settings come from environment variables so the same build can point at
a local backend, a staging API or the bundled demo data.
"""

import functools
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key, "").strip()
    if not value:
        return default
    try:
        return int(value)
    except ValueError as exc:
        raise ValueError(f"{key} must be an integer, got {value!r}") from exc


@dataclass(frozen=True, slots=True)
class Settings:
    """
    Settings resolved from the environment.

    Attributes:
        service: Report service kind, "http" or "demo".
        api_base_url: Backend base URL including the API prefix.
        api_token: Optional bearer token attached to every request.
        timeout: Request timeout in seconds.
        stale_seconds: How long a cached report response stays fresh.
        cache_dir: Directory holding the response cache.
        port: Development server port.
    """

    service: str = "http"
    api_base_url: str = "http://localhost:8000/api/v1"
    api_token: str | None = None
    timeout: int = 30
    stale_seconds: int = 5 * 60
    cache_dir: Path = Path(tempfile.gettempdir()) / "report_ui_cache"
    port: int = 3000

    @classmethod
    def from_env(cls) -> "Settings":
        defaults = cls()
        cache_dir = os.getenv("REPORT_UI_CACHE_DIR")
        return cls(
            service=os.getenv("REPORT_UI_SERVICE", defaults.service).lower(),
            api_base_url=os.getenv(
                "REPORT_UI_API_BASE_URL", defaults.api_base_url
            ).rstrip("/"),
            api_token=os.getenv("REPORT_UI_API_TOKEN") or None,
            timeout=_env_int("REPORT_UI_TIMEOUT", defaults.timeout),
            stale_seconds=_env_int("REPORT_UI_STALE_SECONDS", defaults.stale_seconds),
            cache_dir=Path(cache_dir) if cache_dir else defaults.cache_dir,
            port=_env_int("REPORT_UI_PORT", defaults.port),
        )


@functools.cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings.from_env()
