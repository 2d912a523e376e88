"""Pydantic schemas package."""
from src.schemas.common import (
    CamelModel,
    EntityRef,
    HealthResponse,
    Ref,
    resolve_entity,
    resolve_id,
)
from src.schemas.leave import (
    LeaveApplication,
    LeaveSplit,
    LeaveSplitPayload,
    LeaveSplitUpdate,
    SplitSaveResult,
    SplitSummary,
    SplitValidationResult,
    WorkflowInfo,
)
from src.schemas.workflow import (
    ActorSchema,
    CanActRequest,
    CanActResponse,
    TransitionRequest,
    TransitionResponse,
)

__all__ = [
    # Common
    "CamelModel",
    "EntityRef",
    "HealthResponse",
    "Ref",
    "resolve_entity",
    "resolve_id",
    # Leave
    "LeaveApplication",
    "LeaveSplit",
    "LeaveSplitPayload",
    "LeaveSplitUpdate",
    "SplitSaveResult",
    "SplitSummary",
    "SplitValidationResult",
    "WorkflowInfo",
    # Workflow
    "ActorSchema",
    "CanActRequest",
    "CanActResponse",
    "TransitionRequest",
    "TransitionResponse",
]
