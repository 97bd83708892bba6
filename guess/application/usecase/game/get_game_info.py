"""Game info use case."""

from pydantic import BaseModel

from guess.config import CaptchaSettings
from guess.domain.value import MAX_VOTE_VALUE, MIN_VOTE_VALUE


class GameInfoResponse(BaseModel):
    """What a client needs before submitting a guess."""

    min_value: int
    max_value: int
    captcha_enabled: bool
    recaptcha_site_key: str


class GetGameInfoUseCase:
    """Use case describing the game rules to a client."""

    def __init__(self, captcha_settings: CaptchaSettings) -> None:
        self.captcha_settings = captcha_settings

    async def execute(self) -> GameInfoResponse:
        return GameInfoResponse(
            min_value=MIN_VOTE_VALUE,
            max_value=MAX_VOTE_VALUE,
            captcha_enabled=self.captcha_settings.enabled,
            recaptcha_site_key=self.captcha_settings.site_key,
        )
