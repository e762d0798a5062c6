"""CLI helpers exposed for other modules."""

from .ui import build_report_table, configure_logging, resolve_options

__all__ = ["build_report_table", "configure_logging", "resolve_options"]
