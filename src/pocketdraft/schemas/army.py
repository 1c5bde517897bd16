from pydantic import BaseModel, Field


class UnitRead(BaseModel):
    troops: list[str] = Field(..., description="Troop references in this unit")
    names: list[str] = Field(..., description="Troop names, matching troops")
    points: int = Field(..., ge=0)
    wounds: int = Field(..., ge=0)
    formation: int = Field(..., description="Unit capacity (minimum formation value)")
    engagement_dice: list[str]
    shooting_dice: list[str]
    powers: list[str]


class ArmyRead(BaseModel):
    faction: str
    strategy: str
    requested_points: int
    points: int = Field(..., description="Total deployment points actually drafted")
    units: list[UnitRead]
    powers: list[str]
    summary: str = Field(..., description="Human readable listing")
