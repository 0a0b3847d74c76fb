"""Domain constants for financial reports."""

UNCATEGORIZED_LABEL = "Uncategorized"
OTHER_LEDGER_TYPE_LABEL = "Other"

TREND_MONTHS = 6
TOP_CATEGORIES_LIMIT = 10

MONTH_ABBREVIATIONS = (
    "jan",
    "fev",
    "mar",
    "abr",
    "mai",
    "jun",
    "jul",
    "ago",
    "set",
    "out",
    "nov",
    "dez",
)


__all__ = [
    "UNCATEGORIZED_LABEL",
    "OTHER_LEDGER_TYPE_LABEL",
    "TREND_MONTHS",
    "TOP_CATEGORIES_LIMIT",
    "MONTH_ABBREVIATIONS",
]
