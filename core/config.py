# core/config.py

import os

from pydantic import BaseModel, Field

from core.models import FINE_PER_DAY

DEFAULT_LOAN_DAYS = 7


class LibrarySettings(BaseModel):
    """Circulation rules for a library"""
    fine_per_day: float = Field(FINE_PER_DAY, ge=0)
    default_loan_days: int = Field(DEFAULT_LOAN_DAYS, ge=0)

    @classmethod
    def from_env(cls) -> "LibrarySettings":
        """Build settings from LIBRARY_* environment variables, falling back to defaults"""
        return cls(
            fine_per_day=os.getenv("LIBRARY_FINE_PER_DAY", FINE_PER_DAY),
            default_loan_days=os.getenv("LIBRARY_DEFAULT_LOAN_DAYS", DEFAULT_LOAN_DAYS)
        )
