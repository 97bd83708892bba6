"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal, Type

from dishka import Provider

# Components with a mock implementation for tests
Component = Literal["persistence", "geolocation", "captcha"]


class ProviderBase(Provider):
    """Base for all DI providers.

    A provider with no subclasses is concrete and used as-is. A provider
    with subclasses is a mockable component: it names itself in
    ``__mock_component__`` and each subclass sets ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Pick the implementation of a provider.

    Args:
        base: Provider base class
        use_mock: Whether to pick the mock implementation

    Returns:
        Provider class (not instantiated)

    Raises:
        ValueError: If the requested implementation is not registered
    """
    implementations = base.__subclasses__()
    if not implementations:
        return base

    for impl in implementations:
        if impl.__is_mock__ is use_mock:
            return impl

    kind = "mock" if use_mock else "production"
    raise ValueError(
        f"No {kind} implementation for {base.__mock_component__ or base.__name__}"
    )
