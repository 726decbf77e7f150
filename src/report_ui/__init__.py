"""Report UI: Indonesian financial and operational reports built with Reflex."""

__version__ = "0.1.0"
