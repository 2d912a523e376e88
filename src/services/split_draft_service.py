# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave split draft building, reconciliation and editing.

A split draft is the per-day outcome list for one leave application. It is
built once when a leave is opened for splitting, edited row by row, and sent
back to the backend as a whole replacement set.
"""

import logging
from collections.abc import Iterable, Mapping
from datetime import date
from typing import Any

from pydantic import ValidationError

from src.dates import iter_days, parse_date_only, to_iso_date
from src.models.enums import HalfDayType, SplitStatus
from src.schemas.leave import (
    LeaveApplication,
    LeaveSplit,
    LeaveSplitPayload,
    LeaveSplitUpdate,
    split_days,
)

logger = logging.getLogger(__name__)


def split_key(split: LeaveSplit) -> str:
    """Return the deduplication key ``{isoDate}_{half}`` for a split.

    The half designator is ``full`` for full days, else the half-day type.
    """
    if split.is_half_day:
        half = (split.half_day_type or HalfDayType.FIRST_HALF).value
    else:
        half = "full"
    return f"{to_iso_date(split.date)}_{half}"


def _normalize_split(split: LeaveSplit) -> LeaveSplit:
    """Recompute derived fields of a split."""
    half_day_type = None
    if split.is_half_day:
        half_day_type = split.half_day_type or HalfDayType.FIRST_HALF
    return split.model_copy(
        update={
            "half_day_type": half_day_type,
            "number_of_days": split_days(split.is_half_day),
        }
    )


def _coerce_split(candidate: LeaveSplit | Mapping[str, Any]) -> LeaveSplit | None:
    if isinstance(candidate, LeaveSplit):
        return candidate
    try:
        return LeaveSplit.model_validate(dict(candidate))
    except ValidationError as e:
        logger.warning(
            f"Dropping malformed split {dict(candidate)!r}: "
            f"{e.error_count()} validation error(s)"
        )
        return None


def clamp_splits_to_range(
    application: LeaveApplication,
    candidates: Iterable[LeaveSplit | Mapping[str, Any]],
) -> list[LeaveSplit]:
    """Reduce candidate splits to a clean, ordered set within the leave range.

    Candidates outside ``[from_date, to_date]``, duplicates of an already
    kept ``(date, half)`` key and records that cannot be parsed are dropped
    and logged; nothing is raised.

    Args:
        application: The parent leave application.
        candidates: Split records, e.g. as loaded from the backend.

    Returns:
        Kept splits sorted ascending by date, first occurrence per key.
    """
    start, end = application.from_date, application.to_date
    kept: dict[str, LeaveSplit] = {}

    for candidate in candidates:
        split = _coerce_split(candidate)
        if split is None:
            continue

        if split.date < start or split.date > end:
            logger.warning(
                f"Dropping split dated {split.date.isoformat()} outside leave "
                f"{application.id} range {start.isoformat()}..{end.isoformat()}"
            )
            continue

        key = split_key(split)
        if key in kept:
            logger.warning(f"Dropping duplicate split {key} for leave {application.id}")
            continue
        kept[key] = _normalize_split(split)

    return sorted(kept.values(), key=lambda s: s.date)


def build_date_range(
    from_date: date | str,
    to_date: date | str,
    is_half_day: bool = False,
    half_day_type: HalfDayType | str | None = None,
) -> list[LeaveSplit]:
    """Expand a date range into one full-day row per calendar day.

    A single-day range flagged as half-day yields one half-day row instead.

    Args:
        from_date: First day (inclusive).
        to_date: Last day (inclusive).
        is_half_day: Whether the original leave is a half day.
        half_day_type: Which half; defaults to the first half.

    Returns:
        Rows in ascending date order, empty if the range is inverted.
    """
    start = parse_date_only(from_date)
    end = parse_date_only(to_date)
    single_half_day = is_half_day and start == end

    rows: list[LeaveSplit] = []
    for day in iter_days(start, end):
        if single_half_day:
            rows.append(
                LeaveSplit(
                    date=day,
                    is_half_day=True,
                    half_day_type=half_day_type or HalfDayType.FIRST_HALF,
                    number_of_days=0.5,
                )
            )
        else:
            rows.append(
                LeaveSplit(
                    date=day,
                    is_half_day=False,
                    half_day_type=None,
                    number_of_days=1.0,
                )
            )
    return rows


def build_initial_splits(application: LeaveApplication) -> list[LeaveSplit]:
    """Build the draft shown when a leave application is opened for splitting.

    Persisted splits are reconciled against the application's range. Without
    any, every day of the range is proposed as approved under the
    application's leave type.
    """
    if application.splits:
        candidates = []
        for raw in application.splits:
            record = dict(raw)
            if not record.get("leaveType") and not record.get("leave_type"):
                record["leaveType"] = application.leave_type
            candidates.append(record)
        return clamp_splits_to_range(application, candidates)

    rows = build_date_range(
        application.from_date,
        application.to_date,
        application.is_half_day,
        application.half_day_type,
    )
    return [
        row.model_copy(
            update={
                "leave_type": application.leave_type,
                "status": SplitStatus.APPROVED,
            }
        )
        for row in rows
    ]


def update_split_draft(
    drafts: list[LeaveSplit],
    index: int,
    changes: LeaveSplitUpdate | Mapping[str, Any],
) -> list[LeaveSplit]:
    """Return a new draft with one row changed.

    ``number_of_days`` is recomputed and ``half_day_type`` is cleared when
    the row is not a half day, whatever ``changes`` says. Range and duplicate
    checks are left to validation.

    Args:
        drafts: The current draft; not modified.
        index: Row to change.
        changes: Fields to apply (snake_case or camelCase keys).

    Returns:
        A new list with the changed row in place.

    Raises:
        IndexError: If index does not address a row.
    """
    if not 0 <= index < len(drafts):
        raise IndexError(f"Split index {index} out of range for {len(drafts)} rows")

    if not isinstance(changes, LeaveSplitUpdate):
        changes = LeaveSplitUpdate.model_validate(dict(changes))

    merged = drafts[index].model_dump(by_alias=True)
    merged.update(changes.model_dump(by_alias=True, exclude_unset=True))
    row = LeaveSplit.model_validate(merged)
    row = row.model_copy(
        update={
            "number_of_days": split_days(row.is_half_day),
            "half_day_type": row.half_day_type if row.is_half_day else None,
        }
    )

    return [row if i == index else split for i, split in enumerate(drafts)]


def build_split_payload(drafts: Iterable[LeaveSplit]) -> list[dict[str, Any]]:
    """Serialize a draft into the backend's save format."""
    return [
        LeaveSplitPayload(
            date=split.date,
            leave_type=split.leave_type,
            is_half_day=split.is_half_day,
            half_day_type=split.half_day_type if split.is_half_day else None,
            status=split.status,
            notes=split.notes,
        ).model_dump(by_alias=True, mode="json")
        for split in drafts
    ]
