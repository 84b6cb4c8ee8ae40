"""Usage statistics model."""

from pydantic import BaseModel, Field, StrictInt


class ImageCount(BaseModel):
    """Current versus allowed number of stored images."""

    current: StrictInt = Field(..., description="Images currently stored")
    allowed: StrictInt = Field(..., description="Images allowed by the plan")


class UsageStats(BaseModel):
    """Read-only snapshot of account usage."""

    count: ImageCount
