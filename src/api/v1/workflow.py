# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Workflow API endpoints."""

from fastapi import APIRouter, HTTPException, status

from src.rbac.permissions import Actor, resolve_action_rule
from src.rbac.workflow import InvalidTransitionError, available_actions, next_status
from src.schemas.workflow import (
    CanActRequest,
    CanActResponse,
    TransitionRequest,
    TransitionResponse,
)

router = APIRouter()


@router.post("/transition", response_model=TransitionResponse)
def transition(data: TransitionRequest) -> TransitionResponse:
    """Compute the status an application moves to after an action."""
    try:
        new_status = next_status(data.status, data.role, data.action)
    except InvalidTransitionError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    return TransitionResponse(
        status=new_status,
        available_actions=available_actions(new_status, data.role),
    )


@router.post("/can-act", response_model=CanActResponse)
def can_act(data: CanActRequest) -> CanActResponse:
    """Check whether an actor may approve or reject an application."""
    actor = Actor(id=data.actor.id, role=data.actor.role)
    rule, allowed = resolve_action_rule(actor, data.application)
    return CanActResponse(allowed=allowed, rule=rule)
