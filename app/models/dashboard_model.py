# /halaqat-backend/app/models/dashboard_model.py

# --- Core Imports ---
from typing import Dict

from pydantic import BaseModel, Field

# --- Model Definition ---

class DashboardSummary(BaseModel):
    """
    Defines the data contract for a teacher's dashboard cards: how many
    students are in the circle and how much has been recorded for them.
    """

    studentCount: int = Field(..., description="Students currently assigned to the teacher.", examples=[12])
    recordCount: int = Field(..., description="Daily records the teacher has entered.", examples=[148])
    quranErrorCount: int = Field(..., description="Verse marks across the teacher's students.", examples=[37])
    levelCounts: Dict[str, int] = Field(
        default_factory=dict,
        description="Students per level, keyed by the English level value.",
    )
