# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for split_validation_service."""

from datetime import date

import pytest

from src.models.enums import HalfDayType, SplitStatus
from src.schemas.leave import LeaveSplit
from src.services.split_draft_service import build_initial_splits
from src.services.split_validation_service import (
    get_public_holidays,
    original_day_count,
    summarize_splits,
    validate_splits,
)


def _split(day: str, **kwargs) -> LeaveSplit:
    kwargs.setdefault("leave_type", "CL")
    return LeaveSplit(date=day, **kwargs)


class TestValidateSplits:
    """Tests for validate_splits."""

    def test_initial_draft_is_valid(self, application):
        result = validate_splits(application, build_initial_splits(application))

        assert result.is_valid is True
        assert result.errors == []
        assert result.warnings == []
        assert result.total_split_days == 3
        assert result.original_total_days == 3

    def test_missing_leave_type(self, application):
        splits = [
            _split("2024-01-05", leave_type=None),
            _split("2024-01-06"),
            _split("2024-01-07"),
        ]
        result = validate_splits(application, splits)

        assert result.is_valid is False
        assert result.errors == ["Split for 2024-01-05 missing leave type"]

    def test_outside_range(self, application):
        splits = [_split("2024-01-05"), _split("2024-01-06"), _split("2024-01-09")]
        result = validate_splits(application, splits)

        assert result.errors == [
            "Split date 2024-01-09 is outside original leave range "
            "(2024-01-05 to 2024-01-07)"
        ]
        assert "Date 2024-01-07 is not covered in splits" in result.warnings

    def test_half_day_without_type(self, application):
        splits = [
            _split("2024-01-05"),
            _split("2024-01-06", is_half_day=True, number_of_days=0.5),
            _split("2024-01-07"),
        ]
        result = validate_splits(application, splits)
        assert result.errors == [
            "Split for 2024-01-06 is marked as half-day but missing halfDayType"
        ]

    def test_duplicates(self, application):
        splits = [
            _split("2024-01-05", status=SplitStatus.REJECTED),
            _split("2024-01-05", status=SplitStatus.REJECTED),
            _split("2024-01-06", is_half_day=True, half_day_type=HalfDayType.SECOND_HALF),
            _split("2024-01-06", is_half_day=True, half_day_type=HalfDayType.SECOND_HALF),
            _split("2024-01-07"),
        ]
        result = validate_splits(application, splits)

        assert result.errors == [
            "Duplicate split for 2024-01-05",
            "Duplicate split for 2024-01-06 (second_half)",
        ]

    def test_duplicate_reported_before_missing_half_day_type(self, application):
        splits = [
            _split("2024-01-05"),
            _split("2024-01-06", is_half_day=True, status=SplitStatus.REJECTED),
            _split("2024-01-06", is_half_day=True, status=SplitStatus.REJECTED),
            _split("2024-01-07"),
        ]
        result = validate_splits(application, splits)

        assert result.errors == [
            "Split for 2024-01-06 is marked as half-day but missing halfDayType",
            "Duplicate split for 2024-01-06 (first_half)",
        ]

    def test_two_halves_of_one_day_are_not_duplicates(self, make_application):
        app = make_application(toDate="2024-01-05", numberOfDays=1)
        splits = [
            _split("2024-01-05", is_half_day=True, half_day_type="first_half"),
            _split("2024-01-05", is_half_day=True, half_day_type="second_half",
                   status=SplitStatus.REJECTED),
        ]
        result = validate_splits(app, splits)

        assert result.is_valid is True
        assert result.total_split_days == 0.5
        # Neither half is the full day the application asked for
        assert result.warnings == ["Date 2024-01-05 is not covered in splits"]

    def test_total_exceeds_original(self, make_application):
        app = make_application(numberOfDays=2)
        result = validate_splits(app, build_initial_splits(app))

        assert result.is_valid is False
        assert result.errors == [
            "Total approved split days (3) exceeds original leave days (2)"
        ]

    def test_rejected_days_do_not_count(self, application):
        splits = [
            _split("2024-01-05"),
            _split("2024-01-06", status=SplitStatus.REJECTED),
            _split("2024-01-07", leave_type="LOP"),
        ]
        result = validate_splits(application, splits)

        assert result.is_valid is True
        assert result.total_split_days == 2

    def test_uncovered_days_warn(self, application):
        result = validate_splits(application, [_split("2024-01-06")])

        assert result.is_valid is True
        assert result.warnings == [
            "Date 2024-01-05 is not covered in splits",
            "Date 2024-01-07 is not covered in splits",
        ]

    def test_uncovered_half_day_warns(self, make_application):
        app = make_application(
            toDate="2024-01-05",
            isHalfDay=True,
            halfDayType="second_half",
            numberOfDays=0.5,
        )
        splits = [_split("2024-01-05", is_half_day=True, half_day_type="first_half")]
        result = validate_splits(app, splits)

        assert result.warnings == ["Original half-day is not covered in splits"]

    def test_public_holiday_warns_for_approved_only(self, make_application):
        app = make_application(fromDate="2024-01-25", toDate="2024-01-27")
        calendar = {date(2024, 1, 26): "Republic Day"}
        splits = [
            _split("2024-01-25"),
            _split("2024-01-26"),
            _split("2024-01-27"),
        ]

        result = validate_splits(app, splits, calendar)
        assert result.is_valid is True
        assert result.warnings == [
            "Split date 2024-01-26 falls on a public holiday (Republic Day)"
        ]

        splits[1] = splits[1].model_copy(update={"status": SplitStatus.REJECTED})
        assert validate_splits(app, splits, calendar).warnings == []

    def test_empty_draft(self, application):
        result = validate_splits(application, [])
        assert result.is_valid is True
        assert len(result.warnings) == 3


class TestOriginalDayCount:
    """Tests for original_day_count."""

    def test_uses_stored_value(self, make_application):
        assert original_day_count(make_application(numberOfDays=2.5)) == 2.5

    def test_derived_from_range(self, make_application):
        assert original_day_count(make_application(numberOfDays=None)) == 3

    def test_derived_half_day(self, make_application):
        app = make_application(toDate="2024-01-05", isHalfDay=True, numberOfDays=None)
        assert original_day_count(app) == 0.5


class TestSummarizeSplits:
    """Tests for summarize_splits."""

    def test_breakdown(self, application):
        splits = [
            _split("2024-01-05"),
            _split("2024-01-06", is_half_day=True, half_day_type="first_half"),
            _split("2024-01-06", is_half_day=True, half_day_type="second_half",
                   leave_type="LOP"),
            _split("2024-01-07", status=SplitStatus.REJECTED),
        ]
        summary = summarize_splits(application, splits)

        assert summary.original_days == 3
        assert summary.original_leave_type == "CL"
        assert summary.total_splits == 4
        assert summary.approved_days == 2
        assert summary.rejected_days == 1
        breakdown = {(b.leave_type, b.status): b.days for b in summary.breakdown}
        assert breakdown == {
            ("CL", SplitStatus.APPROVED): 1.5,
            ("LOP", SplitStatus.APPROVED): 0.5,
            ("CL", SplitStatus.REJECTED): 1.0,
        }


class TestPublicHolidays:
    """Tests for get_public_holidays."""

    def test_india_republic_day(self):
        calendar = get_public_holidays("IN", 2024)
        assert date(2024, 1, 26) in calendar

    def test_multiple_years(self):
        calendar = get_public_holidays("IN", [2024, 2025])
        assert date(2024, 8, 15) in calendar
        assert date(2025, 8, 15) in calendar

    def test_unknown_country(self):
        with pytest.raises(ValueError, match="No holiday calendar"):
            get_public_holidays("XX", 2024)
