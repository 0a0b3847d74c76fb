"""Domain normalization helpers."""

from src.domain.constants import OTHER_LEDGER_TYPE_LABEL, UNCATEGORIZED_LABEL
from src.domain.models.records import MovementType

_MOVEMENT_TYPE_CODES = {
    "receita": MovementType.INCOME,
    "entrada": MovementType.INCOME,
    "income": MovementType.INCOME,
    "despesa": MovementType.EXPENSE,
    "saida": MovementType.EXPENSE,
    "saída": MovementType.EXPENSE,
    "expense": MovementType.EXPENSE,
}


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def normalize_category(category: str | None) -> str:
    """Return the grouping key for a cash movement category.

    Args:
        category: Raw category value from a repository.

    Returns:
        str: Trimmed category, or ``"Uncategorized"`` when null or blank.
    """
    return _clean(category) or UNCATEGORIZED_LABEL


def normalize_ledger_type(entry_type: str | None) -> str:
    """Return the grouping key for a ledger entry type.

    Args:
        entry_type: Raw type value from a repository.

    Returns:
        str: Trimmed type, or ``"Other"`` when null or blank.
    """
    return _clean(entry_type) or OTHER_LEDGER_TYPE_LABEL


def normalize_description(description: str | None) -> str | None:
    """Trim free-text descriptions, mapping blanks to None."""
    return _clean(description)


def normalize_movement_type(raw_type: str | None) -> MovementType | None:
    """Map store movement codes to MovementType.

    Args:
        raw_type: Raw type code (``receita``/``despesa`` or English).

    Returns:
        MovementType | None: Parsed type, or None when unrecognized.
    """
    cleaned = _clean(raw_type)
    if cleaned is None:
        return None
    return _MOVEMENT_TYPE_CODES.get(cleaned.lower())


__all__ = [
    "normalize_category",
    "normalize_ledger_type",
    "normalize_description",
    "normalize_movement_type",
]
