# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integrations package."""
from src.integrations.leave_api import (
    GENERIC_ERROR,
    LeaveApiClient,
    LeaveApiError,
    LeaveNotFoundError,
)

__all__ = [
    "GENERIC_ERROR",
    "LeaveApiClient",
    "LeaveApiError",
    "LeaveNotFoundError",
]
