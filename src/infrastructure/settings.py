"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import dotenv

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_TIMEZONE = "America/Sao_Paulo"
DEFAULT_CURRENCY = "BRL"


@dataclass(frozen=True)
class ReportSettings:
    """Settings for report generation.

    Attributes:
        timezone: IANA timezone used to decide what "today" is.
        currency_code: Currency printed next to every amount.
        owner_auth_id: Identity provider id of the current user, if known.
    """

    timezone: str = DEFAULT_TIMEZONE
    currency_code: str = DEFAULT_CURRENCY
    owner_auth_id: str | None = None

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        timezone = cls._normalize_timezone(
            os.getenv("REPORTS_TIMEZONE", DEFAULT_TIMEZONE),
            logger=logger,
        )
        currency_code = (
            os.getenv("REPORTS_CURRENCY", DEFAULT_CURRENCY).strip().upper()
            or DEFAULT_CURRENCY
        )
        owner_auth_id = os.getenv("REPORTS_OWNER_AUTH_ID") or None
        return cls(
            timezone=timezone,
            currency_code=currency_code,
            owner_auth_id=owner_auth_id,
        )

    @staticmethod
    def _normalize_timezone(raw_timezone: str, logger) -> str:
        """Validate a timezone name, falling back to UTC.

        Args:
            raw_timezone: Raw timezone name.
            logger: Logger used for warnings.

        Returns:
            str: A timezone name known to ``zoneinfo``.
        """
        candidate = raw_timezone.strip()
        try:
            ZoneInfo(candidate)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning(
                f"Unknown timezone '{raw_timezone}'. Falling back to UTC."
            )
            return "UTC"
        return candidate


__all__ = ["ReportSettings", "DEFAULT_TIMEZONE", "DEFAULT_CURRENCY"]
