# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave application and leave split schemas."""

from datetime import date
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.dates import parse_date_only
from src.models.enums import HalfDayType, LeaveNature, SplitStatus
from src.schemas.common import CamelModel, Ref, resolve_id


def split_days(is_half_day: bool) -> float:
    """Number of days a split row counts for."""
    return 0.5 if is_half_day else 1.0


# --- Workflow ---


class WorkflowInfo(CamelModel):
    """Workflow snapshot attached to an application by the backend."""

    next_approver_role: str | None = None
    reporting_manager_ids: list[str] = []
    approval_chain: list[dict[str, Any]] = []

    @field_validator("reporting_manager_ids", mode="before")
    @classmethod
    def _resolve_ids(cls, value: Any) -> Any:
        if isinstance(value, list):
            ids = (resolve_id(item) for item in value)
            return [i.strip() for i in ids if i and i.strip()]
        return value


# --- Leave Application ---


class LeaveApplication(CamelModel):
    """A leave request as returned by the backend."""

    id: str | None = Field(default=None, alias="_id")
    employee_id: Ref | None = None
    from_date: date
    to_date: date
    leave_type: str
    is_half_day: bool = False
    half_day_type: HalfDayType | None = None
    number_of_days: float | None = None
    status: str = "pending"
    # Raw persisted split records; reconciled by build_initial_splits
    splits: list[dict[str, Any]] = []
    workflow: WorkflowInfo | None = None

    @field_validator("from_date", "to_date", mode="before")
    @classmethod
    def _normalize_dates(cls, value: Any) -> date:
        return parse_date_only(value)


# --- Leave Split ---


class LeaveSplit(CamelModel):
    """One calendar day's outcome within a leave application."""

    id: str | None = Field(default=None, alias="_id")
    date: date
    leave_type: str | None = None
    leave_nature: LeaveNature | None = None
    is_half_day: bool = False
    half_day_type: HalfDayType | None = None
    status: SplitStatus = SplitStatus.APPROVED
    number_of_days: float = 1.0
    notes: str | None = None

    @field_validator("date", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> date:
        return parse_date_only(value)


class LeaveSplitUpdate(CamelModel):
    """Partial changes to a single draft row.

    Only fields explicitly set are applied.
    """

    # A field named ``date`` with a default would shadow the type in this body
    day: date | None = Field(default=None, alias="date")
    leave_type: str | None = None
    leave_nature: LeaveNature | None = None
    is_half_day: bool | None = None
    half_day_type: HalfDayType | None = None
    status: SplitStatus | None = None
    notes: str | None = None

    # Omitted means unchanged; an explicit null cannot be applied to these
    @field_validator("day", "is_half_day", "status", mode="before")
    @classmethod
    def _reject_null(cls, value: Any) -> Any:
        if value is None:
            raise ValueError("may be omitted but not null")
        return value

    @field_validator("day", mode="before")
    @classmethod
    def _normalize_date(cls, value: Any) -> date:
        return parse_date_only(value)


class LeaveSplitPayload(CamelModel):
    """A split as sent to the backend on save.

    ``number_of_days`` is display-only and never sent.
    """

    date: date
    leave_type: str | None = None
    is_half_day: bool = False
    half_day_type: HalfDayType | None = None
    status: SplitStatus = SplitStatus.APPROVED
    notes: str | None = None


# --- Results ---


class SplitValidationResult(CamelModel):
    """Outcome of validating a split draft."""

    is_valid: bool
    errors: list[str] = []
    warnings: list[str] = []
    total_split_days: float | None = None
    original_total_days: float | None = None


class SplitSaveResult(CamelModel):
    """Outcome of saving a split draft."""

    success: bool
    data: list[LeaveSplit] = []
    errors: list[str] = []
    warnings: list[str] = []


class SplitBreakdown(CamelModel):
    """Days per leave type and outcome."""

    leave_type: str | None
    status: SplitStatus
    days: float


class SplitSummary(CamelModel):
    """Totals for a set of splits against the original application."""

    original_days: float
    original_leave_type: str
    total_splits: int
    approved_days: float
    rejected_days: float
    breakdown: list[SplitBreakdown] = []


# --- API request bodies ---


class SplitDraftEditRequest(CamelModel):
    """Request to edit one row of a draft."""

    drafts: list[LeaveSplit]
    index: int
    changes: LeaveSplitUpdate


class SplitCheckRequest(CamelModel):
    """An application together with a split draft."""

    application: LeaveApplication
    splits: list[LeaveSplit]


class SplitSubmitRequest(CamelModel):
    """Draft rows to submit for a leave application."""

    splits: list[LeaveSplit]


class PublicHolidayResponse(BaseModel):
    """A public holiday."""

    date: date
    name: str
