"""
Static demo data for the Report UI.

Modules:
- demo_reports: report payloads keyed by endpoint path, served by
  DemoReportService
"""
