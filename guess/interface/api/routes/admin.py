"""Admin routes: time constraints and vote moderation."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials
from pydantic import BaseModel

from guess.application.usecase.admin import GetDashboardResponse, GetDashboardUseCase
from guess.application.usecase.constraint import (
    ConstraintResponse,
    CreateConstraintRequest,
    CreateConstraintUseCase,
    DeleteConstraintRequest,
    DeleteConstraintResponse,
    DeleteConstraintUseCase,
    ToggleConstraintRequest,
    ToggleConstraintUseCase,
)
from guess.application.usecase.vote import (
    DeleteVoteRequest,
    DeleteVoteResponse,
    DeleteVoteUseCase,
)
from guess.config import Settings
from guess.domain.error import NotFoundError
from guess.domain.value import ConstraintKind
from guess.interface.api.auth import ADMIN_REALM, verify_admin
from guess.interface.error import AdminNotConfiguredError, AuthenticationError
from guess.util.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/admin", tags=["admin"], route_class=DishkaRoute)

basic_auth = HTTPBasic(auto_error=False, realm=ADMIN_REALM)


class CreateConstraintAPIRequest(BaseModel):
    """API request for adding a time constraint."""

    start: datetime
    end: datetime
    type: str
    enabled: bool = True
    note: str | None = None


def _require_admin(
    credentials: HTTPBasicCredentials | None, settings: Settings
) -> str:
    """Translate admin auth failures into HTTP errors."""
    try:
        return verify_admin(credentials, settings.admin)
    except AdminNotConfiguredError as e:
        logger.error(str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=str(e),
        )
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
            headers={"WWW-Authenticate": f'Basic realm="{ADMIN_REALM}"'},
        )


@router.get("", response_model=GetDashboardResponse)
async def get_dashboard(
    settings: FromDishka[Settings],
    dashboard_use_case: FromDishka[GetDashboardUseCase],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> GetDashboardResponse:
    """List all constraints and the latest votes.

    Requires admin credentials.
    """
    _require_admin(credentials, settings)
    return await dashboard_use_case.execute()


@router.post(
    "/constraints",
    response_model=ConstraintResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_constraint(
    body: CreateConstraintAPIRequest,
    settings: FromDishka[Settings],
    create_constraint_use_case: FromDishka[CreateConstraintUseCase],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> ConstraintResponse:
    """Add an include or exclude time range.

    Args:
        body: Range bounds, type ("include" or "exclude"), enabled flag, note
        settings: Application settings from DI
        create_constraint_use_case: Create constraint use case from DI
        credentials: Basic auth credentials

    Returns:
        The stored constraint

    Raises:
        HTTPException: 401/500 on auth failure, 400 on unknown type
    """
    admin = _require_admin(credentials, settings)

    try:
        kind = ConstraintKind(body.type)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid constraint type.",
        )

    response = await create_constraint_use_case.execute(
        CreateConstraintRequest(
            start_time=body.start,
            end_time=body.end,
            kind=kind,
            enabled=body.enabled,
            note=body.note,
        )
    )
    logger.info(f"Constraint {response.id} created by {admin}")
    return response


@router.post("/constraints/{constraint_id}/toggle", response_model=ConstraintResponse)
async def toggle_constraint(
    constraint_id: int,
    settings: FromDishka[Settings],
    toggle_constraint_use_case: FromDishka[ToggleConstraintUseCase],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> ConstraintResponse:
    """Flip a constraint between enabled and disabled."""
    _require_admin(credentials, settings)

    try:
        return await toggle_constraint_use_case.execute(
            ToggleConstraintRequest(constraint_id=constraint_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/constraints/{constraint_id}/delete", response_model=DeleteConstraintResponse
)
async def delete_constraint(
    constraint_id: int,
    settings: FromDishka[Settings],
    delete_constraint_use_case: FromDishka[DeleteConstraintUseCase],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> DeleteConstraintResponse:
    """Remove a constraint permanently."""
    admin = _require_admin(credentials, settings)

    try:
        response = await delete_constraint_use_case.execute(
            DeleteConstraintRequest(constraint_id=constraint_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    logger.info(f"Constraint {constraint_id} deleted by {admin}")
    return response


@router.post("/votes/{vote_id}/delete", response_model=DeleteVoteResponse)
async def delete_vote(
    vote_id: int,
    settings: FromDishka[Settings],
    delete_vote_use_case: FromDishka[DeleteVoteUseCase],
    credentials: HTTPBasicCredentials | None = Depends(basic_auth),
) -> DeleteVoteResponse:
    """Remove a vote permanently."""
    admin = _require_admin(credentials, settings)

    try:
        response = await delete_vote_use_case.execute(DeleteVoteRequest(vote_id=vote_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    logger.info(f"Vote {vote_id} deleted by {admin}")
    return response
