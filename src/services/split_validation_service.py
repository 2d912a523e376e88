# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Pre-flight validation and summaries for leave split drafts.

These checks mirror what the backend enforces on save, minus leave balance
lookups, so a draft can be corrected before it is sent.
"""

from collections.abc import Iterable, Mapping
from datetime import date

import holidays

from src.dates import iter_days, to_iso_date
from src.models.enums import HalfDayType, SplitStatus
from src.schemas.leave import (
    LeaveApplication,
    LeaveSplit,
    SplitBreakdown,
    SplitSummary,
    SplitValidationResult,
    split_days,
)
from src.services.split_draft_service import split_key


def original_day_count(application: LeaveApplication) -> float:
    """Return the application's day count, deriving it from the range if unset."""
    if application.number_of_days is not None:
        return application.number_of_days
    if application.is_half_day and application.from_date == application.to_date:
        return 0.5
    if application.to_date < application.from_date:
        return 0.0
    return float((application.to_date - application.from_date).days + 1)


def get_public_holidays(
    country_code: str,
    years: int | Iterable[int],
    subdiv: str | None = None,
) -> dict[date, str]:
    """Get public holidays for a country.

    Args:
        country_code: ISO 2-letter country code.
        years: Year or years to include.
        subdiv: Optional state/region code.

    Returns:
        Dictionary mapping dates to holiday names.

    Raises:
        ValueError: If the country or subdivision is not supported.
    """
    try:
        calendar = holidays.country_holidays(country_code, years=years, subdiv=subdiv)
    except NotImplementedError as e:
        raise ValueError(f"No holiday calendar for country: {country_code}") from e
    return dict(calendar.items())


def validate_splits(
    application: LeaveApplication,
    splits: list[LeaveSplit],
    holiday_calendar: Mapping[date, str] | None = None,
) -> SplitValidationResult:
    """Validate a split draft against its leave application.

    Args:
        application: The original leave application.
        splits: The draft to check.
        holiday_calendar: Optional public holidays; approved splits on these
            dates produce a warning.

    Returns:
        The validation result with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []
    seen: set[str] = set()
    total_split_days = 0.0
    original_total_days = original_day_count(application)
    range_label = (
        f"{application.from_date.isoformat()} to {application.to_date.isoformat()}"
    )

    for split in splits:
        iso = to_iso_date(split.date)

        if not split.leave_type:
            errors.append(f"Split for {iso} missing leave type")
            continue

        if split.status == SplitStatus.APPROVED:
            total_split_days += split_days(split.is_half_day)

        if split.date < application.from_date or split.date > application.to_date:
            errors.append(
                f"Split date {iso} is outside original leave range ({range_label})"
            )
            continue

        key = split_key(split)
        if key in seen:
            suffix = f" ({key.split('_', 1)[1]})" if split.is_half_day else ""
            errors.append(f"Duplicate split for {iso}{suffix}")
            continue
        seen.add(key)

        if split.is_half_day and split.half_day_type is None:
            errors.append(
                f"Split for {iso} is marked as half-day but missing halfDayType"
            )
            continue

        if (
            holiday_calendar
            and split.status == SplitStatus.APPROVED
            and split.date in holiday_calendar
        ):
            warnings.append(
                f"Split date {iso} falls on a public holiday "
                f"({holiday_calendar[split.date]})"
            )

    if total_split_days > original_total_days:
        errors.append(
            f"Total approved split days ({total_split_days:g}) exceeds "
            f"original leave days ({original_total_days:g})"
        )

    covered = {split_key(split) for split in splits}
    if application.is_half_day:
        half = application.half_day_type or HalfDayType.FIRST_HALF
        if f"{to_iso_date(application.from_date)}_{half.value}" not in covered:
            warnings.append("Original half-day is not covered in splits")
    else:
        for day in iter_days(application.from_date, application.to_date):
            iso = to_iso_date(day)
            if f"{iso}_full" not in covered:
                warnings.append(f"Date {iso} is not covered in splits")

    return SplitValidationResult(
        is_valid=not errors,
        errors=errors,
        warnings=warnings,
        total_split_days=total_split_days,
        original_total_days=original_total_days,
    )


def summarize_splits(
    application: LeaveApplication,
    splits: list[LeaveSplit],
) -> SplitSummary:
    """Summarize approved and rejected days per leave type."""
    approved_days = 0.0
    rejected_days = 0.0
    breakdown: dict[tuple[str | None, SplitStatus], float] = {}

    for split in splits:
        days = split_days(split.is_half_day)
        if split.status == SplitStatus.APPROVED:
            approved_days += days
        else:
            rejected_days += days
        key = (split.leave_type, split.status)
        breakdown[key] = breakdown.get(key, 0.0) + days

    return SplitSummary(
        original_days=original_day_count(application),
        original_leave_type=application.leave_type,
        total_splits=len(splits),
        approved_days=approved_days,
        rejected_days=rejected_days,
        breakdown=[
            SplitBreakdown(leave_type=leave_type, status=status, days=days)
            for (leave_type, status), days in breakdown.items()
        ],
    )
