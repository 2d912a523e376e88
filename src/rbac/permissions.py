# src/rbac/permissions.py
"""Who may approve or reject a pending application.

Rules are checked in order and the first one that matches decides.
"""

from collections.abc import Callable
from dataclasses import dataclass

from src.models.enums import ApproverRole
from src.rbac.roles import OVERRIDE_ROLES, ROLE_STAND_INS, normalize_role
from src.rbac.workflow import is_open
from src.schemas.leave import LeaveApplication


@dataclass
class Actor:
    """The user attempting an action."""

    id: str | None
    role: str | None


def _next_role(application: LeaveApplication) -> str:
    workflow = application.workflow
    return normalize_role(workflow.next_approver_role if workflow else None)


def _is_reporting_manager(actor: Actor, application: LeaveApplication) -> bool:
    if not application.workflow or not actor.id:
        return False
    return str(actor.id).strip() in application.workflow.reporting_manager_ids


def _fills_stand_in(actor: Actor, application: LeaveApplication) -> bool:
    try:
        placeholder = ApproverRole(_next_role(application))
    except ValueError:
        return False
    return normalize_role(actor.role) in {
        role.value for role in ROLE_STAND_INS.get(placeholder, ())
    }


# (name, matches, allowed)
ACTION_RULES: list[tuple[str, Callable[[Actor, LeaveApplication], bool], bool]] = [
    ("no_actor", lambda actor, app: not normalize_role(actor.role), False),
    ("closed", lambda actor, app: not is_open(app.status), False),
    (
        "admin_override",
        lambda actor, app: normalize_role(actor.role) in {r.value for r in OVERRIDE_ROLES},
        True,
    ),
    ("no_next_approver", lambda actor, app: not _next_role(app), False),
    ("role_match", lambda actor, app: normalize_role(actor.role) == _next_role(app), True),
    ("final_authority", _fills_stand_in, True),
    (
        "reporting_manager",
        lambda actor, app: _next_role(app) == ApproverRole.REPORTING_MANAGER.value
        and _is_reporting_manager(actor, app),
        True,
    ),
]


def resolve_action_rule(actor: Actor, application: LeaveApplication) -> tuple[str, bool]:
    """Return the deciding rule name and whether the action is allowed."""
    for name, matches, allowed in ACTION_RULES:
        if matches(actor, application):
            return name, allowed
    return "default", False


def can_perform_action(actor: Actor, application: LeaveApplication) -> bool:
    """Whether the actor may approve or reject the application now."""
    _, allowed = resolve_action_rule(actor, application)
    return allowed
