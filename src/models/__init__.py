# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Domain enumerations package."""

from src.models.enums import (
    ApproverRole,
    HalfDayType,
    LeaveNature,
    LeaveStatus,
    SplitStatus,
    WorkflowAction,
)

__all__ = [
    "ApproverRole",
    "HalfDayType",
    "LeaveNature",
    "LeaveStatus",
    "SplitStatus",
    "WorkflowAction",
]
