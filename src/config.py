# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application settings loaded from the environment."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration.

    Values are read from environment variables (case-insensitive) and an
    optional ``.env`` file in the working directory.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # HR backend that owns leave applications and their splits
    leave_api_url: str = "http://localhost:5000"
    leave_api_token: str | None = None
    leave_api_timeout: float = 30.0

    # Public holiday calendar used for split date warnings
    holiday_country: str | None = "IN"
    holiday_subdiv: str | None = None

    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:3000"]


settings = Settings()
