# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""HR backend client for leave applications and leave splits."""

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from src.schemas.leave import (
    LeaveApplication,
    LeaveSplit,
    SplitSaveResult,
    SplitValidationResult,
)
from src.services.split_draft_service import build_split_payload

logger = logging.getLogger(__name__)

# Shown to the user when the backend cannot be reached at all
GENERIC_ERROR = "Unable to reach the leave service"


class LeaveApiError(Exception):
    """Base exception for leave API errors."""


class LeaveNotFoundError(LeaveApiError):
    """Leave application does not exist."""


def _json_body(response: httpx.Response) -> dict[str, Any] | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _error_messages(body: dict[str, Any] | None, response: httpx.Response) -> list[str]:
    """Pull error strings out of a failed response."""
    if body:
        errors = body.get("errors")
        if isinstance(errors, list) and errors:
            return [str(e) for e in errors]
        for key in ("message", "error"):
            if body.get(key):
                return [str(body[key])]
    return [f"Leave service returned HTTP {response.status_code}"]


class LeaveApiClient:
    """Async client for the backend's leave endpoints.

    Validation and save never raise for transport failures; they return a
    failed result carrying ``GENERIC_ERROR`` so the caller can show it and
    keep the draft. Nothing is retried automatically.
    """

    def __init__(
        self,
        base_url: str,
        token: str | None = None,
        timeout: float = 30.0,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: Backend base URL.
            token: Bearer token, with or without the ``Bearer`` prefix.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        headers = {}
        if token:
            if not token.lower().startswith("bearer "):
                token = f"Bearer {token}"
            headers["Authorization"] = token
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers=headers,
            timeout=timeout,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def get_leave(self, leave_id: str) -> LeaveApplication:
        """Fetch a leave application.

        Raises:
            LeaveNotFoundError: If the backend has no such leave.
            LeaveApiError: On transport errors or unexpected responses.
        """
        body = await self._get(f"/api/leaves/{leave_id}", what=f"leave {leave_id}")
        data = body.get("data", body)
        try:
            return LeaveApplication.model_validate(data)
        except ValidationError as e:
            raise LeaveApiError(f"Malformed leave {leave_id}: {e}") from e

    async def get_leave_splits(self, leave_id: str) -> list[LeaveSplit]:
        """Fetch the persisted splits of a leave application.

        Raises:
            LeaveNotFoundError: If the backend has no such leave.
            LeaveApiError: On transport errors or unexpected responses.
        """
        body = await self._get(
            f"/api/leaves/{leave_id}/splits", what=f"splits of leave {leave_id}"
        )
        data = body.get("data", [])
        try:
            return [LeaveSplit.model_validate(item) for item in data]
        except ValidationError as e:
            raise LeaveApiError(f"Malformed splits for leave {leave_id}: {e}") from e

    async def validate_leave_splits(
        self,
        leave_id: str,
        splits: list[LeaveSplit],
    ) -> SplitValidationResult:
        """Ask the backend to validate a split draft without saving it."""
        try:
            resp = await self._client.post(
                f"/api/leaves/{leave_id}/splits/validate",
                json={"splits": build_split_payload(splits)},
            )
        except httpx.HTTPError as e:
            logger.error(f"Failed to validate splits for leave {leave_id}: {e}")
            return SplitValidationResult(is_valid=False, errors=[GENERIC_ERROR])

        body = _json_body(resp)
        data = body.get("data") if body and isinstance(body.get("data"), dict) else body
        if data and "isValid" in data:
            try:
                return SplitValidationResult.model_validate(data)
            except ValidationError as e:
                logger.error(f"Unexpected validation response for leave {leave_id}: {e}")

        return SplitValidationResult(
            is_valid=False,
            errors=_error_messages(body, resp),
            warnings=(body or {}).get("warnings") or [],
        )

    async def create_leave_splits(
        self,
        leave_id: str,
        splits: list[LeaveSplit],
    ) -> SplitSaveResult:
        """Replace the persisted splits of a leave with the given draft."""
        try:
            resp = await self._client.post(
                f"/api/leaves/{leave_id}/splits",
                json={"splits": build_split_payload(splits)},
            )
        except httpx.HTTPError as e:
            logger.error(f"Failed to save splits for leave {leave_id}: {e}")
            return SplitSaveResult(success=False, errors=[GENERIC_ERROR])

        body = _json_body(resp)
        if resp.is_success and body and body.get("success"):
            try:
                return SplitSaveResult.model_validate(body)
            except ValidationError as e:
                logger.error(f"Unexpected save response for leave {leave_id}: {e}")
                return SplitSaveResult(
                    success=False,
                    errors=["Leave service returned an unexpected response"],
                )

        return SplitSaveResult(
            success=False,
            errors=_error_messages(body, resp),
            warnings=(body or {}).get("warnings") or [],
        )

    async def _get(self, url: str, what: str) -> dict[str, Any]:
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as e:
            logger.error(f"Failed to fetch {what}: {e}")
            raise LeaveApiError(f"Failed to fetch {what}: {e}") from e

        if resp.status_code == 404:
            raise LeaveNotFoundError(f"{what[:1].upper()}{what[1:]} not found")
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise LeaveApiError(f"Failed to fetch {what}: HTTP {resp.status_code}") from e

        body = _json_body(resp)
        if body is None:
            raise LeaveApiError(f"Failed to fetch {what}: response is not a JSON object")
        return body
