# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Tests for reference resolution and camelCase schemas."""

from src.schemas.common import EntityRef, resolve_entity, resolve_id
from src.schemas.leave import LeaveApplication


class TestResolveId:
    """Tests for resolve_id."""

    def test_bare_id(self):
        assert resolve_id("emp-1") == "emp-1"

    def test_populated_entity(self):
        assert resolve_id(EntityRef.model_validate({"_id": "emp-1", "name": "Asha"})) == "emp-1"

    def test_raw_dicts(self):
        assert resolve_id({"_id": "emp-1"}) == "emp-1"
        assert resolve_id({"id": 42}) == "42"

    def test_numeric_id(self):
        assert resolve_id(42) == "42"

    def test_missing(self):
        assert resolve_id(None) is None
        assert resolve_id("") is None
        assert resolve_id({"name": "nobody"}) is None


class TestResolveEntity:
    """Tests for resolve_entity."""

    def test_keeps_extra_fields(self):
        entity = resolve_entity({"_id": "emp-1", "name": "Asha", "department": "Ops"})
        assert entity.id == "emp-1"
        assert entity.model_extra == {"department": "Ops"}

    def test_bare_id_has_no_entity(self):
        assert resolve_entity("emp-1") is None
        assert resolve_entity(None) is None


class TestLeaveApplicationRefs:
    """Employee references arrive populated or as bare ids."""

    def _app(self, employee):
        return LeaveApplication.model_validate(
            {
                "_id": "leave-1",
                "employeeId": employee,
                "fromDate": "2024-01-05",
                "toDate": "2024-01-05",
                "leaveType": "CL",
            }
        )

    def test_bare_employee_id(self):
        app = self._app("emp-1")
        assert resolve_id(app.employee_id) == "emp-1"
        assert resolve_entity(app.employee_id) is None

    def test_populated_employee(self):
        app = self._app({"_id": "emp-1", "name": "Asha Rao"})
        assert resolve_id(app.employee_id) == "emp-1"
        assert resolve_entity(app.employee_id).name == "Asha Rao"

    def test_reporting_manager_ids_are_resolved(self):
        app = LeaveApplication.model_validate(
            {
                "fromDate": "2024-01-05",
                "toDate": "2024-01-05",
                "leaveType": "CL",
                "workflow": {
                    "reportingManagerIds": [" m1 ", 7, None, "", {"_id": "m2", "name": "Ravi"}, {}],
                },
            }
        )
        assert app.workflow.reporting_manager_ids == ["m1", "7", "m2"]
