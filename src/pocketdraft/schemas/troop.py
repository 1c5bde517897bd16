from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


def _split_faces(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return [str(face) for face in value]
    return [face for face in str(value).split("-") if face]


class TroopRecord(BaseModel):
    """A troop entry as written in a faction YAML file."""

    name: str = Field(..., min_length=1, description="Name of the troop")
    points: int | None = Field(None, ge=0, description="Deployment points; omitted for copies")
    formation: int | Literal["*"] | None = Field(
        None, description="Formation value, '*' for no limit"
    )
    wounds: int = Field(default=0, ge=0, description="Number of wounds")
    engagement: list[str] = Field(default_factory=list, description="Engagement die faces")
    shooting: list[str] = Field(default_factory=list, description="Shooting die faces")
    powers: list[str] = Field(default_factory=list, description="Power names")

    @field_validator("engagement", "shooting", mode="before")
    @classmethod
    def _parse_faces(cls, value: Any) -> list[str]:
        return _split_faces(value)

    @field_validator("powers", mode="before")
    @classmethod
    def _no_powers(cls, value: Any) -> Any:
        return [] if value is None else value

    @field_validator("wounds", mode="before")
    @classmethod
    def _no_wounds(cls, value: Any) -> Any:
        return 0 if value is None else value

    @model_validator(mode="after")
    def _complete_troops_need_formation(self) -> "TroopRecord":
        if self.points is not None and self.formation is None:
            raise ValueError(f"troop {self.name!r} has points but no formation")
        return self


class TroopRead(BaseModel):
    reference: str = Field(..., description="Faction-wide reference, e.g. Celts-05")
    number: int = Field(..., ge=1)
    name: str
    points: int
    formation: int
    wounds: int
    engagement: list[str]
    shooting: list[str]
    powers: list[str]


class FactionRead(BaseModel):
    name: str
    troops: list[TroopRead]
