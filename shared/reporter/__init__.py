"""Logging utilities for Lumière components."""

from shared.reporter.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
