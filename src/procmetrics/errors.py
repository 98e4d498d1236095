"""Exceptions raised by procmetrics."""

from procmetrics.models import NamespacePattern


class ProcMetricsError(Exception):
    """Base exception for all procmetrics errors."""


class ConfigurationError(ProcMetricsError):
    """Invalid configuration or an unusable namespace pattern."""

    def __init__(self, message: str, pattern: NamespacePattern | None = None) -> None:
        super().__init__(message)
        self.pattern = pattern


class DataSourceError(ProcMetricsError):
    """The process table could not be read."""

    def __init__(self, message: str, root_path: str | None = None) -> None:
        super().__init__(message)
        self.root_path = root_path
