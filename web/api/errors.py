"""API errors and validation helpers."""

from app.services.revenue import PERIODS, VIEW_MODES, is_fixed_year


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Oldest calendar year a fixed-year chart may ask for
MIN_YEAR = 2000


def validate_view_mode(mode: str | int) -> None:
    """Validate a chart view mode ("6M", "YTD", "MTD", "ALL" or a year)."""
    if is_fixed_year(mode):
        if int(mode) < MIN_YEAR:
            raise ValidationError(f"Invalid year: {mode}. Must be {MIN_YEAR} or later")
        return
    if mode not in VIEW_MODES:
        raise ValidationError(f"Invalid view mode: {mode}. Must be one of {', '.join(VIEW_MODES)} or a year")


def validate_period(period: str) -> None:
    """Validate a revenue summary period."""
    if period not in PERIODS:
        raise ValidationError(f"Invalid period: {period}. Must be one of {', '.join(PERIODS)}")
