"""Game use cases."""

from .get_game_info import GameInfoResponse, GetGameInfoUseCase

__all__ = [
    "GameInfoResponse",
    "GetGameInfoUseCase",
]
