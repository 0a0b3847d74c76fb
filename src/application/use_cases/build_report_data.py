"""Use case to aggregate report data for a period."""

from datetime import date

from src.application.ports.clock import ClockPort
from src.application.ports.records_repository import (
    FinancialRecordsRepositoryPort,
)
from src.domain.models import ReportData
from src.domain.services.aggregation import aggregate
from src.domain.services.periods import resolve_period
from src.infrastructure.logging.logger import get_app_logger


class BuildReportDataUseCase:
    """Fetch cash movements and ledger entries, then aggregate them.

    Nothing is cached: every call reads the live record store, so a report
    label opened later always reflects the current records.
    """

    def __init__(
        self,
        records_repository: FinancialRecordsRepositoryPort,
        clock: ClockPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing unfiltered record collections.
            clock: Port providing the reference "now".
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._clock = clock
        self._logger = logger or get_app_logger()

    def execute(
        self,
        period: str,
        start_date: date | None = None,
        end_date: date | None = None,
    ) -> ReportData:
        """Return aggregated report data for the period.

        Args:
            period: Period selector (see ``resolve_period``).
            start_date: First included day for custom periods.
            end_date: Last included day for custom periods.

        Returns:
            ReportData: Aggregated totals, breakdowns and trend.

        Raises:
            UnknownPeriodError: If the selector is not supported.
            InvalidPeriodRangeError: If a custom range is invalid.
            FetchFailedError: If the record store cannot be read.
        """
        today = self._clock.now().date()
        predicate = resolve_period(period, today, start_date, end_date)

        cash_movements = self._records_repository.fetch_cash_movements()
        ledger_entries = self._records_repository.fetch_ledger_entries()
        self._logger.info(
            f"Fetched {len(cash_movements)} cash movements and "
            f"{len(ledger_entries)} ledger entries"
        )

        report = aggregate(
            cash_movements,
            ledger_entries,
            predicate,
            today=today,
        )
        self._logger.info(
            f"Report aggregated for period={getattr(period, 'value', period)}: "
            f"income={report.total_income}, "
            f"cash_expense={report.total_cash_expense}, "
            f"ledger_debt={report.total_ledger_debt}"
        )
        return report


__all__ = ["BuildReportDataUseCase"]
