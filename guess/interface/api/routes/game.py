"""Game routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Request, Response, status
from pydantic import BaseModel

from guess.application.usecase.game import GameInfoResponse, GetGameInfoUseCase
from guess.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from guess.domain.error import (
    CaptchaVerificationError,
    RateLimitExceededError,
    ValidationError,
)
from guess.interface.api.request_context import ensure_player_cookie, get_client_ip

router = APIRouter(tags=["game"], route_class=DishkaRoute)


class CastVoteAPIRequest(BaseModel):
    """API request for submitting a guess."""

    value: int
    captcha_token: str | None = None


@router.get("/", response_model=GameInfoResponse)
async def get_game_info(
    response: Response,
    game_info_use_case: FromDishka[GetGameInfoUseCase],
    player_id: str | None = Cookie(default=None),
) -> GameInfoResponse:
    """Describe the game and hand out a player cookie.

    Args:
        response: Outgoing response (for the player cookie)
        game_info_use_case: Game info use case from DI
        player_id: Player cookie, if the client already has one

    Returns:
        Allowed range and CAPTCHA configuration
    """
    ensure_player_cookie(response, player_id)
    return await game_info_use_case.execute()


@router.post("/vote", response_model=CastVoteResponse)
async def cast_vote(
    body: CastVoteAPIRequest,
    request: Request,
    response: Response,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    player_id: str | None = Cookie(default=None),
) -> CastVoteResponse:
    """Submit a guess.

    Args:
        body: Guess and CAPTCHA token
        request: Incoming request (for the client address)
        response: Outgoing response (for the player cookie)
        cast_vote_use_case: Cast vote use case from DI
        player_id: Player cookie, if the client already has one

    Returns:
        Current average, target, whether this guess is winning and the
        latest eligible votes

    Raises:
        HTTPException: 400 on CAPTCHA failure or out-of-range value,
            429 when rate limited
    """
    resolved_player_id = ensure_player_cookie(response, player_id)

    try:
        return await cast_vote_use_case.execute(
            CastVoteRequest(
                value=body.value,
                captcha_token=body.captcha_token,
                ip_address=get_client_ip(request),
                player_id=resolved_player_id,
            )
        )
    except (CaptchaVerificationError, ValidationError) as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
    except RateLimitExceededError as e:
        raise HTTPException(
            status_code=status.HTTP_429_TOO_MANY_REQUESTS,
            detail=str(e),
            headers={"Retry-After": str(e.window_seconds)},
        )
