"""HTTP routes for the pocketdraft API."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel, Field

from pocketdraft.api.runtime import ApiState, DraftOrder
from pocketdraft.domain.analysis import calculate_points
from pocketdraft.domain.drafting import DraftError, DraftFailedError, FactionNotFoundError
from pocketdraft.domain.enums import Strategy
from pocketdraft.domain.policies import available_policies
from pocketdraft.domain.powers import POWERS
from pocketdraft.schemas import ArmyRead, FactionRead

router = APIRouter()


def get_state(request: Request) -> ApiState:
    state = getattr(request.app.state, "api_state", None)
    if state is None:  # pragma: no cover - FastAPI should always initialise state
        raise RuntimeError("API state not initialised")
    return state


ApiStateDep = Annotated[ApiState, Depends(get_state)]


class DraftRequest(BaseModel):
    faction: str = Field(min_length=1)
    points: int | None = Field(default=None, ge=0)
    strategy: Strategy | None = None
    seed_units: list[list[str]] | None = None
    variant: str | None = None
    seed: str | None = None


class PointsRequest(BaseModel):
    lines: list[str] = Field(
        default_factory=list, description="Lines of the form 'Celts 1 02 23'"
    )


class PointsResponse(BaseModel):
    troops: list[str]
    unknown: list[str]
    total: int
    victory_threshold: int


@router.get("/health")
async def health(state: ApiStateDep) -> dict[str, object]:
    return {
        "status": "ok",
        "factions": len(state.drafts.catalog),
        "default_strategy": state.settings.default_strategy.value,
        "policies": available_policies(),
    }


@router.get("/factions", response_model=list[str])
async def list_factions(state: ApiStateDep) -> list[str]:
    return state.drafts.catalog.faction_names()


@router.get("/factions/{name}", response_model=FactionRead)
async def get_faction(name: str, state: ApiStateDep) -> FactionRead:
    faction = state.drafts.catalog.get_faction(name)
    if faction is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="faction not found")
    return FactionRead.model_validate(state.drafts.faction_to_dict(faction))


@router.get("/powers", response_model=dict[str, str])
async def list_powers() -> dict[str, str]:
    return dict(POWERS)


@router.post("/drafts", response_model=ArmyRead, status_code=status.HTTP_201_CREATED)
async def create_draft(request: DraftRequest, state: ApiStateDep) -> ArmyRead:
    order = DraftOrder(
        faction=request.faction,
        points=request.points,
        strategy=request.strategy,
        seed_units=request.seed_units,
        variant=request.variant,
        seed=request.seed,
    )
    try:
        army, strategy, points = state.drafts.draft(order)
    except FactionNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except DraftFailedError as exc:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc)
        ) from exc
    except (DraftError, ValueError) as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc

    payload = state.drafts.army_to_dict(
        army, faction=request.faction, strategy=strategy, requested_points=points
    )
    return ArmyRead.model_validate(payload)


@router.post("/points", response_model=PointsResponse)
async def price_army(request: PointsRequest, state: ApiStateDep) -> PointsResponse:
    report = calculate_points(state.drafts.catalog, request.lines)
    return PointsResponse(
        troops=[t.reference for t in report.troops],
        unknown=report.unknown,
        total=report.total,
        victory_threshold=report.victory_threshold,
    )
