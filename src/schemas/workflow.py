# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Workflow schemas."""

from src.models.enums import ApproverRole, LeaveStatus, WorkflowAction
from src.schemas.common import CamelModel
from src.schemas.leave import LeaveApplication


class TransitionRequest(CamelModel):
    """Request to compute the next workflow status."""

    status: LeaveStatus
    role: ApproverRole
    action: WorkflowAction


class TransitionResponse(CamelModel):
    """Resulting workflow status."""

    status: LeaveStatus
    available_actions: list[WorkflowAction] = []


class ActorSchema(CamelModel):
    """The acting user."""

    id: str | None = None
    role: str | None = None


class CanActRequest(CamelModel):
    """Request to check whether an actor may act on an application."""

    actor: ActorSchema
    application: LeaveApplication


class CanActResponse(CamelModel):
    """Permission decision and the rule that made it."""

    allowed: bool
    rule: str
