"""Dependency injection module."""

from typing import Type

from guess.util.di.application import ProdApplicationProvider
from guess.util.di.base import Component, ProviderBase, get_provider
from guess.util.di.core import ProdConfigProvider
from guess.util.di.domain import ProdDomainProvider
from guess.util.di.infrastructure import (
    CaptchaProvider,
    GeolocationProvider,
    PersistenceProvider,
    ProdCaptchaProvider,
    ProdGeolocationProvider,
    ProdPersistenceProvider,
)

# Every provider the app needs; mockable ones are resolved via get_provider
PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    GeolocationProvider,
    CaptchaProvider,
]

MOCKABLE_COMPONENTS: frozenset[Component] = frozenset(
    p.__mock_component__ for p in PROVIDERS if p.__mock_component__
)

__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "MOCKABLE_COMPONENTS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "CaptchaProvider",
    "GeolocationProvider",
    "PersistenceProvider",
    "ProdCaptchaProvider",
    "ProdGeolocationProvider",
    "ProdPersistenceProvider",
]
