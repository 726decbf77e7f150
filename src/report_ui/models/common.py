"""
Shared pieces of report payload models.

Report payloads are read through benedict so nested keys can be addressed
with dotted keypaths (``period.start``) and missing or null values fall back
to defaults instead of raising KeyError. The keypath is split here into a key
list, so payload keys that themselves contain dots (``"11.0"``) stay legal.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from benedict import benedict

from report_ui.utils.format import to_number


def wrap(data: Mapping[str, Any] | None) -> benedict:
    """Wrap a payload (or None) in a benedict for keypath access."""
    return benedict(dict(data or {}), keypath_separator=None)


def _get(b: benedict, keypath: str) -> Any:
    return b.get(keypath.split("."))


def num(b: benedict, keypath: str) -> float:
    """Numeric value at keypath, 0 when missing, null or non-numeric."""
    return to_number(_get(b, keypath))


def text(b: benedict, keypath: str, default: str = "") -> str:
    value = _get(b, keypath)
    return default if value is None else str(value)


def records(b: benedict, keypath: str) -> list[benedict]:
    """List of mappings at keypath, each wrapped; non-mapping items are dropped."""
    items = _get(b, keypath)
    if not isinstance(items, (list, tuple)):
        return []
    return [wrap(item) for item in items if isinstance(item, Mapping)]


@dataclass(slots=True)
class Period:
    """Reporting period as ISO date strings; empty when unbounded."""

    start: str = ""
    end: str = ""

    @classmethod
    def from_payload(cls, b: benedict, keypath: str = "period") -> "Period":
        """
        Read a period object.

        The backend uses both ``{start, end}`` and ``{start_date, end_date}``
        shapes depending on the report.
        """
        return cls(
            start=text(b, f"{keypath}.start") or text(b, f"{keypath}.start_date"),
            end=text(b, f"{keypath}.end") or text(b, f"{keypath}.end_date"),
        )

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}
