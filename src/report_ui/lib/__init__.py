"""
Local library modules shared across the Report UI.

Modules:
    logs: Logger factory
    objects: Stable hashing and JSON serialization
    caches: Disk-backed response cache with a staleness window
"""

from report_ui.lib import caches, logs, objects

__all__ = ["caches", "logs", "objects"]
