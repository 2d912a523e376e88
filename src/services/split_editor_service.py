# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Editing state for splitting one leave application."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Any

from src.schemas.common import resolve_entity, resolve_id
from src.schemas.leave import (
    LeaveApplication,
    LeaveSplit,
    LeaveSplitUpdate,
    SplitValidationResult,
)
from src.services.split_draft_service import (
    build_initial_splits,
    build_split_payload,
    update_split_draft,
)
from src.services.split_validation_service import validate_splits

if TYPE_CHECKING:
    from src.integrations.leave_api import LeaveApiClient

logger = logging.getLogger(__name__)


class SplitEditor:
    """Draft state for one leave application's split dialog.

    The draft is rebuilt from the application when the editor is created and
    after every successful save. Failed validations and saves keep the draft
    as it is so the user can correct and resubmit.
    """

    def __init__(self, application: LeaveApplication) -> None:
        """Initialize the editor.

        Args:
            application: The leave application being split.
        """
        self.application = application
        self.drafts: list[LeaveSplit] = []
        self.errors: list[str] = []
        self.warnings: list[str] = []
        self.reset()

    def reset(self) -> None:
        """Discard edits and rebuild the draft from the application."""
        self.drafts = build_initial_splits(self.application)
        self.errors = []
        self.warnings = []

    def edit(self, index: int, changes: LeaveSplitUpdate | Mapping[str, Any]) -> LeaveSplit:
        """Apply changes to one row and return the updated row."""
        self.drafts = update_split_draft(self.drafts, index, changes)
        return self.drafts[index]

    def payload(self) -> list[dict[str, Any]]:
        """The draft in the backend's save format."""
        return build_split_payload(self.drafts)

    def check(self, holiday_calendar: Mapping[date, str] | None = None) -> SplitValidationResult:
        """Validate the draft locally, without calling the backend."""
        result = validate_splits(self.application, self.drafts, holiday_calendar)
        self.errors = list(result.errors)
        self.warnings = list(result.warnings)
        return result

    async def submit(self, client: LeaveApiClient) -> bool:
        """Validate and save the draft through the backend.

        Args:
            client: Backend client.

        Returns:
            True if the splits were saved.
        """
        leave_id = self.application.id
        if not leave_id:
            self.errors = ["Leave application has no id"]
            self.warnings = []
            return False

        validation = await client.validate_leave_splits(leave_id, self.drafts)
        if not validation.is_valid:
            self.errors = list(validation.errors)
            self.warnings = list(validation.warnings)
            return False

        saved = await client.create_leave_splits(leave_id, self.drafts)
        if not saved.success:
            self.errors = list(saved.errors)
            self.warnings = list(saved.warnings) or list(validation.warnings)
            return False

        employee = resolve_entity(self.application.employee_id)
        who = employee.name if employee and employee.name else None
        who = who or resolve_id(self.application.employee_id)
        logger.info(f"Saved {len(saved.data)} splits for leave {leave_id} of {who}")
        self.application = self.application.model_copy(
            update={
                "splits": [
                    split.model_dump(by_alias=True, mode="json") for split in saved.data
                ]
            }
        )
        self.reset()
        self.warnings = list(saved.warnings)
        return True
