# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
import os

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app
os.environ["LEAVE_API_URL"] = "http://leave-api.test"
os.environ["LEAVE_API_TOKEN"] = "test-token"  # nosec - test-only token  # noqa: S105
os.environ["HOLIDAY_COUNTRY"] = "IN"

from src.main import app
from src.schemas.leave import LeaveApplication

LEAVE_API_URL = "http://leave-api.test"


@pytest.fixture(scope="function")
def client():
    """Create a test client."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_application():
    """Factory for leave applications with sensible defaults."""

    def _make(**overrides) -> LeaveApplication:
        data = {
            "_id": "leave-1",
            "employeeId": {"_id": "emp-1", "name": "Asha Rao"},
            "fromDate": "2024-01-05",
            "toDate": "2024-01-07",
            "leaveType": "CL",
            "isHalfDay": False,
            "numberOfDays": 3,
            "status": "pending",
        }
        data.update(overrides)
        return LeaveApplication.model_validate(data)

    return _make


@pytest.fixture
def application(make_application) -> LeaveApplication:
    """A three-day casual leave from 2024-01-05 to 2024-01-07."""
    return make_application()
