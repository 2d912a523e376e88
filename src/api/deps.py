# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""API dependencies for dependency injection."""

import logging
from collections.abc import AsyncGenerator
from datetime import date

from fastapi import Header

from src.config import settings
from src.integrations.leave_api import LeaveApiClient
from src.services.split_validation_service import get_public_holidays

logger = logging.getLogger(__name__)


async def get_leave_api_client(
    authorization: str | None = Header(default=None),
) -> AsyncGenerator[LeaveApiClient, None]:
    """Get a backend client acting with the caller's credentials."""
    client = LeaveApiClient(
        settings.leave_api_url,
        token=authorization or settings.leave_api_token,
        timeout=settings.leave_api_timeout,
    )
    try:
        yield client
    finally:
        await client.close()


def holiday_calendar_for(start: date, end: date) -> dict[date, str]:
    """Public holidays of the configured country covering a date range.

    Returns an empty calendar when no country is configured or the country
    is not supported.
    """
    if not settings.holiday_country or end < start:
        return {}
    years = list(range(start.year, end.year + 1))
    try:
        return get_public_holidays(
            settings.holiday_country, years, subdiv=settings.holiday_subdiv
        )
    except ValueError as e:
        logger.warning(f"Holiday warnings disabled: {e}")
        return {}
