"""Domain errors raised by the reporting pipeline.

Every failure of a report action is terminal for that action. Adapters
translate library exceptions into these types so presentation layers can
notify the user without knowing about SQLAlchemy or export libraries.
"""


class ReportError(Exception):
    """Base class for reporting failures."""


class UnknownPeriodError(ReportError):
    """Raised when a period selector is not supported."""

    def __init__(self, selector: object) -> None:
        self.selector = selector
        super().__init__(f"Unknown report period: {selector!r}")


class InvalidPeriodRangeError(ReportError):
    """Raised when a custom period has missing or inverted bounds."""


class FetchFailedError(ReportError):
    """Raised when the record store cannot be read."""


class NotReadyError(ReportError):
    """Raised when an export is requested before aggregation completed."""


class PersistFailedError(ReportError):
    """Raised when a report label cannot be written to the record store."""


class UnsupportedFormatError(ReportError):
    """Raised when no exporter is registered for a report format."""


__all__ = [
    "ReportError",
    "UnknownPeriodError",
    "InvalidPeriodRangeError",
    "FetchFailedError",
    "NotReadyError",
    "PersistFailedError",
    "UnsupportedFormatError",
]
