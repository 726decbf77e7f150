"""Reflex configuration for the Report UI application."""

import reflex as rx

config = rx.Config(
    app_name="report_ui",
    # Use the src directory structure
    app_module_import="report_ui.app",
)
