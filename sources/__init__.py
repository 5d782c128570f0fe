"""Text sources and report sinks used around the statistics core."""

from .text import FileSource, StdinSource, UrlSource, save_report, source_for

__all__ = ["FileSource", "StdinSource", "UrlSource", "save_report", "source_for"]
