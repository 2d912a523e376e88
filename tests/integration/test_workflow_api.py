# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Integration tests for workflow API endpoints."""


def _application(next_role, **overrides):
    app = {
        "_id": "leave-1",
        "employeeId": "emp-1",
        "fromDate": "2024-01-05",
        "toDate": "2024-01-07",
        "leaveType": "CL",
        "status": "pending",
        "workflow": {"nextApproverRole": next_role, "reportingManagerIds": ["mgr-1"]},
    }
    app.update(overrides)
    return app


class TestTransitionEndpoint:
    """Tests for POST /api/v1/workflow/transition."""

    def test_hod_approves(self, client):
        response = client.post(
            "/api/v1/workflow/transition",
            json={"status": "pending", "role": "hod", "action": "approve"},
        )

        assert response.status_code == 200
        assert response.json() == {"status": "hod_approved", "availableActions": ["reject"]}

    def test_final_approval(self, client):
        response = client.post(
            "/api/v1/workflow/transition",
            json={"status": "verified", "role": "hr", "action": "approve"},
        )

        assert response.json() == {"status": "approved", "availableActions": []}

    def test_illegal_transition(self, client):
        response = client.post(
            "/api/v1/workflow/transition",
            json={"status": "rejected", "role": "manager", "action": "approve"},
        )

        assert response.status_code == 409
        assert "cannot approve" in response.json()["detail"]

    def test_unknown_role(self, client):
        response = client.post(
            "/api/v1/workflow/transition",
            json={"status": "pending", "role": "janitor", "action": "approve"},
        )
        assert response.status_code == 422


class TestCanActEndpoint:
    """Tests for POST /api/v1/workflow/can-act."""

    def test_hr_as_final_authority(self, client):
        response = client.post(
            "/api/v1/workflow/can-act",
            json={
                "actor": {"id": "hr-1", "role": "HR"},
                "application": _application("final_authority"),
            },
        )

        assert response.status_code == 200
        assert response.json() == {"allowed": True, "rule": "final_authority"}

    def test_reporting_manager(self, client):
        response = client.post(
            "/api/v1/workflow/can-act",
            json={
                "actor": {"id": "mgr-1", "role": "manager"},
                "application": _application("reporting_manager"),
            },
        )

        assert response.json() == {"allowed": True, "rule": "reporting_manager"}

    def test_closed_application(self, client):
        response = client.post(
            "/api/v1/workflow/can-act",
            json={
                "actor": {"id": "a-1", "role": "super_admin"},
                "application": _application("hod", status="cancelled"),
            },
        )

        assert response.json() == {"allowed": False, "rule": "closed"}

    def test_missing_actor_role(self, client):
        response = client.post(
            "/api/v1/workflow/can-act",
            json={"actor": {"id": "u-1"}, "application": _application("hod")},
        )

        assert response.json() == {"allowed": False, "rule": "no_actor"}
