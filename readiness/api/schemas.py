"""API response schemas."""

from pydantic import BaseModel, Field


class ACWRStatusResponse(BaseModel):
    """Response for GET /readiness/acwr."""

    date: str = Field(description="ISO 8601 reference date (YYYY-MM-DD)")
    acute_load: float = Field(description="Training load over the last 7 days")
    chronic_load: float = Field(description="Training load over the last 28 days divided by 4")
    ratio: float = Field(description="acute_load / chronic_load, 0 when chronic_load is 0")
    is_danger: bool = Field(description="True when ratio is above 1.5")
