"""Session analytics engine — filter/window, aggregates, rankings, chart series."""

from app.analytics.dashboard import compute_dashboard
from app.analytics.window import WindowConfig, parse_window, select_sessions

__all__ = ["WindowConfig", "compute_dashboard", "parse_window", "select_sessions"]
