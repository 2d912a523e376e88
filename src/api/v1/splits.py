# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave split API endpoints."""

import logging
from datetime import date
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import ValidationError

from src.api.deps import get_leave_api_client, holiday_calendar_for
from src.integrations.leave_api import LeaveApiClient, LeaveApiError, LeaveNotFoundError
from src.models.enums import HalfDayType
from src.schemas.leave import (
    LeaveApplication,
    LeaveSplit,
    PublicHolidayResponse,
    SplitCheckRequest,
    SplitDraftEditRequest,
    SplitSaveResult,
    SplitSubmitRequest,
    SplitSummary,
    SplitValidationResult,
)
from src.services import split_draft_service, split_validation_service
from src.services.split_editor_service import SplitEditor

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/leave-splits/draft", response_model=list[LeaveSplit])
def build_draft(application: LeaveApplication) -> list[LeaveSplit]:
    """Build the initial split draft for a leave application."""
    return split_draft_service.build_initial_splits(application)


@router.get("/leave-splits/range", response_model=list[LeaveSplit])
def expand_range(
    from_date: date = Query(...),
    to_date: date = Query(...),
    is_half_day: bool = Query(False),
    half_day_type: HalfDayType | None = Query(None),
) -> list[LeaveSplit]:
    """Expand a date range into one row per day."""
    return split_draft_service.build_date_range(
        from_date, to_date, is_half_day, half_day_type
    )


@router.post("/leave-splits/draft/edit", response_model=list[LeaveSplit])
def edit_draft(data: SplitDraftEditRequest) -> list[LeaveSplit]:
    """Apply changes to one row of a draft."""
    try:
        return split_draft_service.update_split_draft(data.drafts, data.index, data.changes)
    except (IndexError, ValidationError) as e:
        raise HTTPException(
            status_code=422,
            detail=str(e),
        ) from e


@router.post("/leave-splits/payload")
def build_payload(drafts: list[LeaveSplit]) -> list[dict[str, Any]]:
    """Serialize a draft into the backend's save format."""
    return split_draft_service.build_split_payload(drafts)


@router.post("/leave-splits/validate", response_model=SplitValidationResult)
def validate_draft(data: SplitCheckRequest) -> SplitValidationResult:
    """Validate a draft locally, including public holiday warnings."""
    calendar = holiday_calendar_for(data.application.from_date, data.application.to_date)
    return split_validation_service.validate_splits(data.application, data.splits, calendar)


@router.post("/leave-splits/summary", response_model=SplitSummary)
def summarize_draft(data: SplitCheckRequest) -> SplitSummary:
    """Summarize approved and rejected days of a draft."""
    return split_validation_service.summarize_splits(data.application, data.splits)


@router.get("/holidays", response_model=list[PublicHolidayResponse])
def list_public_holidays(year: int = Query(..., ge=1900, le=2100)) -> list[PublicHolidayResponse]:
    """List public holidays of the configured country for a year."""
    calendar = holiday_calendar_for(date(year, 1, 1), date(year, 12, 31))
    return [
        PublicHolidayResponse(date=day, name=name)
        for day, name in sorted(calendar.items())
    ]


@router.get("/leaves/{leave_id}/split-draft", response_model=list[LeaveSplit])
async def get_split_draft(
    leave_id: str,
    client: LeaveApiClient = Depends(get_leave_api_client),
) -> list[LeaveSplit]:
    """Fetch a leave from the backend and build its split draft.

    Persisted splits are fetched separately when the leave body does not
    embed them.
    """
    application = await _fetch_leave(client, leave_id)
    if not application.splits:
        application = await _attach_splits(client, leave_id, application)
    return SplitEditor(application).drafts


@router.post("/leaves/{leave_id}/splits", response_model=SplitSaveResult)
async def submit_splits(
    leave_id: str,
    data: SplitSubmitRequest,
    response: Response,
    client: LeaveApiClient = Depends(get_leave_api_client),
) -> SplitSaveResult:
    """Validate and save a split draft through the backend.

    On success the returned data is the draft rebuilt from what the backend
    stored.
    """
    application = await _fetch_leave(client, leave_id)
    editor = SplitEditor(application)
    editor.drafts = data.splits

    saved = await editor.submit(client)
    if not saved:
        response.status_code = 422
        return SplitSaveResult(success=False, errors=editor.errors, warnings=editor.warnings)
    return SplitSaveResult(success=True, data=editor.drafts, warnings=editor.warnings)


async def _fetch_leave(client: LeaveApiClient, leave_id: str) -> LeaveApplication:
    try:
        return await client.get_leave(leave_id)
    except LeaveNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Leave not found",
        ) from e
    except LeaveApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Leave service unavailable: {e}",
        ) from e


async def _attach_splits(
    client: LeaveApiClient,
    leave_id: str,
    application: LeaveApplication,
) -> LeaveApplication:
    try:
        splits = await client.get_leave_splits(leave_id)
    except LeaveNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Leave not found",
        ) from e
    except LeaveApiError as e:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Leave service unavailable: {e}",
        ) from e
    return application.model_copy(
        update={"splits": [split.model_dump(by_alias=True, mode="json") for split in splits]}
    )
