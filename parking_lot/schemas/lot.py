from typing import Dict
from pydantic import BaseModel, Field


class LotStatus(BaseModel):
    rows: int = Field(..., ge=0)
    cols: int = Field(..., ge=0)
    total_spots: int = Field(..., ge=0)
    occupied_spots: int = Field(..., ge=0)
    available_spots: int = Field(..., ge=0)
    occupancy_rate: float
    spots_by_type: Dict[str, int]
