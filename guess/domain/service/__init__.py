"""Domain services."""

from .captcha_service import CaptchaService, CaptchaVerifier
from .constraint_service import ConstraintService
from .eligibility import filter_eligible_votes, is_eligible
from .game_service import GameService
from .geolocation_service import GeolocationService, Geolocator
from .stats import compute_game_stats
from .vote_service import VoteService

__all__ = [
    "CaptchaService",
    "CaptchaVerifier",
    "ConstraintService",
    "GameService",
    "GeolocationService",
    "Geolocator",
    "VoteService",
    "compute_game_stats",
    "filter_eligible_votes",
    "is_eligible",
]
