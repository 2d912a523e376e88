# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Main API router for v1 endpoints."""

from fastapi import APIRouter

from src.api.v1 import splits, workflow

api_router = APIRouter()

# Leave split routes
api_router.include_router(splits.router, tags=["leave-splits"])

# Workflow routes
api_router.include_router(workflow.router, prefix="/workflow", tags=["workflow"])
