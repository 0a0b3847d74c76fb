"""Per-session state for the displayed report.

The UI keeps one ``ReportSession`` per user session. Each aggregation
request receives a generation token; only the newest token may publish a
result, so a slow response for an older period selection is dropped
instead of overwriting newer data. Closing the session abandons every
in-flight request.
"""

from dataclasses import dataclass
from datetime import date

from src.domain.errors import NotReadyError, ReportError
from src.domain.models import ReportData
from src.infrastructure.logging.logger import get_app_logger

ReportParameters = tuple[str, date | None, date | None]


@dataclass(frozen=True)
class RequestToken:
    """Handle identifying one aggregation request."""

    generation: int
    parameters: ReportParameters


def report_parameters(
    period: str,
    start_date: date | None = None,
    end_date: date | None = None,
) -> ReportParameters:
    """Return the comparable key of a report request."""
    return (getattr(period, "value", period), start_date, end_date)


class ReportSession:
    """Track the latest report request and its published result."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()
        self._generation = 0
        self._closed = False
        self._parameters: ReportParameters | None = None
        self._report: ReportData | None = None
        self._error: ReportError | None = None

    @property
    def closed(self) -> bool:
        return self._closed

    @property
    def report(self) -> ReportData | None:
        """Return the last published report, if any."""
        return self._report

    @property
    def error(self) -> ReportError | None:
        """Return the failure of the latest request, if any."""
        return self._error

    @property
    def parameters(self) -> ReportParameters | None:
        return self._parameters

    def begin(
        self,
        period: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> RequestToken:
        """Start a request, superseding every earlier one.

        Args:
            period: Period selector of the request.
            start_date: First included day for custom periods.
            end_date: Last included day for custom periods.

        Returns:
            RequestToken: Token to pass to ``complete`` or ``fail``.
        """
        self._generation += 1
        return RequestToken(
            generation=self._generation,
            parameters=report_parameters(period, start_date, end_date),
        )

    def is_current(self, token: RequestToken) -> bool:
        """Return True when the token belongs to the newest request."""
        return not self._closed and token.generation == self._generation

    def complete(self, token: RequestToken, report: ReportData) -> bool:
        """Publish a result unless it is stale or the session is closed.

        Args:
            token: Token returned by ``begin``.
            report: Aggregated data for the token's parameters.

        Returns:
            bool: True when the result was published.
        """
        if not self.is_current(token):
            self._logger.info(
                f"Discarding stale report result "
                f"(generation={token.generation}, latest={self._generation})"
            )
            return False
        self._parameters = token.parameters
        self._report = report
        self._error = None
        return True

    def fail(self, token: RequestToken, error: ReportError) -> bool:
        """Record a failure for the newest request.

        The previously published report is cleared so no partial or
        outdated figures stay on screen for the failed parameters.
        """
        if not self.is_current(token):
            return False
        self._parameters = None
        self._report = None
        self._error = error
        return True

    def close(self) -> None:
        """Abandon in-flight requests; later results are ignored.

        The Streamlit page aggregates synchronously within a single rerun,
        so its session never has a request in flight between reruns and is
        left open. Hosts that run requests concurrently call this when the
        user leaves. A closed session stays closed; start a new one instead.
        """
        self._closed = True

    def require(
        self,
        period: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ReportData:
        """Return the published report for exactly these parameters.

        Raises:
            NotReadyError: If no aggregation completed for them.
        """
        wanted = report_parameters(period, start_date, end_date)
        if self._report is None or self._parameters != wanted:
            raise NotReadyError(
                f"No report data available for period={wanted[0]}"
            )
        return self._report


__all__ = [
    "RequestToken",
    "ReportParameters",
    "ReportSession",
    "report_parameters",
]
