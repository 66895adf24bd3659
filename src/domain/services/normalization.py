"""Domain normalization helpers."""

from collections.abc import Iterable

from src.domain.constants import INVOICE_STATUSES


def normalize_choice(
    value,
    choices: Iterable[str],
    field_name: str,
) -> str:
    """Return a stripped, lower-cased enumerated value.

    Args:
        value: Raw value from a payload.
        choices: Allowed values.
        field_name: Field name used in the error message.

    Returns:
        str: Normalized value.

    Raises:
        ValueError: If the value is not one of the allowed choices.
    """
    cleaned = str(value).strip().lower() if value is not None else ""
    allowed = tuple(choices)
    if cleaned not in allowed:
        raise ValueError(
            f"Invalid {field_name}: {value!r}. Expected one of {allowed}."
        )
    return cleaned


def normalize_optional_status(value) -> str | None:
    """Normalize an optional payment status; empty values become None."""
    if not value:
        return None
    return normalize_choice(value, INVOICE_STATUSES, "status")


def normalize_label(value: str | None) -> str:
    """Strip surrounding whitespace from free-form labels."""
    if not value:
        return ""
    return value.strip()


__all__ = ["normalize_choice", "normalize_optional_status", "normalize_label"]
