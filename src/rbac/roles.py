# src/rbac/roles.py
from src.models.enums import ApproverRole

# Roles that may act on any open application regardless of workflow position
OVERRIDE_ROLES = frozenset({ApproverRole.SUPER_ADMIN, ApproverRole.SUB_ADMIN})

# Roles that approve or reject as part of a workflow
APPROVER_ROLES = frozenset(
    {
        ApproverRole.MANAGER,
        ApproverRole.REPORTING_MANAGER,
        ApproverRole.HOD,
        ApproverRole.HR,
        ApproverRole.FINAL_AUTHORITY,
    }
)

# Workflow placeholders and the concrete roles that fill them
ROLE_STAND_INS = {
    ApproverRole.FINAL_AUTHORITY: frozenset({ApproverRole.HR}),
}


def normalize_role(role: str | ApproverRole | None) -> str:
    """Lower-case, trimmed role name; empty string when unknown."""
    if role is None:
        return ""
    if isinstance(role, ApproverRole):
        return role.value
    return str(role).strip().lower()
