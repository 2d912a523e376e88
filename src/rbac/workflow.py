# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Leave approval workflow as an explicit state machine.

Transitions are keyed by ``(current status, actor role, action)``. Anything
not listed in the table is illegal.
"""

from src.models.enums import ApproverRole, LeaveStatus, WorkflowAction
from src.rbac.roles import APPROVER_ROLES, OVERRIDE_ROLES, normalize_role

OPEN_STATUSES = frozenset(
    {
        LeaveStatus.PENDING,
        LeaveStatus.MANAGER_APPROVED,
        LeaveStatus.HOD_APPROVED,
        LeaveStatus.VERIFIED,
        LeaveStatus.HR_APPROVED,
    }
)

TERMINAL_STATUSES = frozenset(
    {LeaveStatus.APPROVED, LeaveStatus.REJECTED, LeaveStatus.CANCELLED}
)


class InvalidTransitionError(ValueError):
    """The requested action is not allowed from the current status."""


def _build_transitions() -> dict[tuple[LeaveStatus, ApproverRole, WorkflowAction], LeaveStatus]:
    approve, reject = WorkflowAction.APPROVE, WorkflowAction.REJECT
    table = {
        (LeaveStatus.PENDING, ApproverRole.MANAGER, approve): LeaveStatus.MANAGER_APPROVED,
        (LeaveStatus.PENDING, ApproverRole.REPORTING_MANAGER, approve): LeaveStatus.MANAGER_APPROVED,
        (LeaveStatus.PENDING, ApproverRole.HOD, approve): LeaveStatus.HOD_APPROVED,
        (LeaveStatus.MANAGER_APPROVED, ApproverRole.HOD, approve): LeaveStatus.HOD_APPROVED,
        (LeaveStatus.PENDING, ApproverRole.HR, WorkflowAction.VERIFY): LeaveStatus.VERIFIED,
        (LeaveStatus.PENDING, ApproverRole.EMPLOYEE, WorkflowAction.CANCEL): LeaveStatus.CANCELLED,
    }

    # HR is the final authority once the department has signed off
    for status in (LeaveStatus.HOD_APPROVED, LeaveStatus.VERIFIED, LeaveStatus.HR_APPROVED):
        table[(status, ApproverRole.HR, approve)] = LeaveStatus.APPROVED
        table[(status, ApproverRole.FINAL_AUTHORITY, approve)] = LeaveStatus.APPROVED

    for status in OPEN_STATUSES:
        for role in APPROVER_ROLES | OVERRIDE_ROLES:
            table[(status, role, reject)] = LeaveStatus.REJECTED
        for role in OVERRIDE_ROLES:
            table[(status, role, approve)] = LeaveStatus.APPROVED

    return table


TRANSITIONS = _build_transitions()


def _coerce(status: str | LeaveStatus, role: str | ApproverRole, action: str | WorkflowAction):
    try:
        return (
            LeaveStatus(status),
            ApproverRole(normalize_role(role)),
            WorkflowAction(action),
        )
    except ValueError as e:
        raise InvalidTransitionError(str(e)) from e


def next_status(
    status: str | LeaveStatus,
    role: str | ApproverRole,
    action: str | WorkflowAction,
) -> LeaveStatus:
    """Return the status an application moves to.

    Args:
        status: Current status.
        role: Role of the acting user.
        action: The action taken.

    Returns:
        The resulting status.

    Raises:
        InvalidTransitionError: If the transition is not in the table.
    """
    key = _coerce(status, role, action)
    try:
        return TRANSITIONS[key]
    except KeyError:
        current, actor, act = key
        raise InvalidTransitionError(
            f"Role {actor.value} cannot {act.value} a leave in status {current.value}"
        ) from None


def available_actions(status: str | LeaveStatus, role: str | ApproverRole) -> list[WorkflowAction]:
    """List the actions a role may take from a status."""
    try:
        current = LeaveStatus(status)
        actor = ApproverRole(normalize_role(role))
    except ValueError:
        return []
    return [
        action
        for action in WorkflowAction
        if (current, actor, action) in TRANSITIONS
    ]


def is_open(status: str | LeaveStatus | None) -> bool:
    """Whether an application in this status still awaits a decision."""
    try:
        return LeaveStatus(status) in OPEN_STATUSES
    except ValueError:
        return False


def is_terminal(status: str | LeaveStatus) -> bool:
    """Whether no further transitions are possible."""
    try:
        return LeaveStatus(status) in TERMINAL_STATUSES
    except ValueError:
        return False
