# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Enumeration types for leave and workflow records."""

from enum import Enum


class HalfDayType(str, Enum):
    """Which half of the day a half-day leave covers."""

    FIRST_HALF = "first_half"
    SECOND_HALF = "second_half"


class SplitStatus(str, Enum):
    """Outcome of a single split day."""

    APPROVED = "approved"
    REJECTED = "rejected"


class LeaveNature(str, Enum):
    """Pay treatment of a leave type."""

    PAID = "paid"
    LOP = "lop"  # Loss of pay
    WITHOUT_PAY = "without_pay"


class LeaveStatus(str, Enum):
    """Leave application status.

    Status flow:
        PENDING → MANAGER_APPROVED → HOD_APPROVED → APPROVED
           ↓                              ↑
        VERIFIED ─────────────────────────┘
        Any open state → REJECTED
        PENDING → CANCELLED (by the applicant)
    """

    PENDING = "pending"
    MANAGER_APPROVED = "manager_approved"
    HOD_APPROVED = "hod_approved"
    VERIFIED = "verified"
    HR_APPROVED = "hr_approved"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class WorkflowAction(str, Enum):
    """Actions an actor can take on an application."""

    APPROVE = "approve"
    REJECT = "reject"
    VERIFY = "verify"
    CANCEL = "cancel"


class ApproverRole(str, Enum):
    """Roles that take part in approval workflows."""

    EMPLOYEE = "employee"
    MANAGER = "manager"
    REPORTING_MANAGER = "reporting_manager"
    HOD = "hod"
    HR = "hr"
    FINAL_AUTHORITY = "final_authority"
    SUB_ADMIN = "sub_admin"
    SUPER_ADMIN = "super_admin"
