"""Reporters for filter results.

All reporters satisfy ReporterProtocol: report(result) -> str.
PlainTextReporter and JsonReporter use stdlib only; ConsoleReporter uses rich.
"""

from criteria.application.reporters.console import ConsoleConfig, ConsoleReporter
from criteria.application.reporters.json_reporter import JsonReporter
from criteria.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "PlainTextReporter",
]
