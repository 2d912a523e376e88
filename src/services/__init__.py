"""Services package."""
from src.services import (
    split_draft_service,
    split_validation_service,
)

__all__ = [
    "split_draft_service",
    "split_validation_service",
]
