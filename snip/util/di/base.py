"""Base classes for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with a swappable test double
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Base for every provider listed in PROVIDERS.

    A provider class with subclasses is a mockable component; its subclasses
    declare which one is the mock through ``__is_mock__``.

    Attributes:
        __mock_component__: Component name, None for concrete providers
        __is_mock__: Whether this subclass is the test double
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
