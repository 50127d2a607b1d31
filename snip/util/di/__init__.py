"""Dependency injection wiring.

PROVIDERS is the ordered list of provider classes making up the app.
Entries with subclasses are mockable components; ``get_provider`` picks
the production or the mock subclass for them.
"""

from typing import Type

from snip.util.di.application import ProdApplicationProvider
from snip.util.di.base import Component, ProviderBase
from snip.util.di.core import ProdConfigProvider
from snip.util.di.domain import ProdDomainProvider
from snip.util.di.infrastructure import PersistenceProvider, ProdPersistenceProvider

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
]


def is_mockable(base: Type[ProviderBase]) -> bool:
    """Whether the provider has swappable production and mock subclasses."""
    return bool(base.__subclasses__())


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve the provider class to instantiate for an entry of PROVIDERS.

    Args:
        base: Entry of PROVIDERS
        use_mock: Pick the mock subclass of a mockable component

    Returns:
        The base itself for concrete providers, else the matching subclass

    Raises:
        ValueError: If the component has no subclass of the requested kind
    """
    if not is_mockable(base):
        return base

    for candidate in base.__subclasses__():
        if candidate.__is_mock__ == use_mock:
            return candidate

    kind = "mock" if use_mock else "production"
    raise ValueError(f"No {kind} implementation for {base.__mock_component__}")


__all__ = [
    "Component",
    "PROVIDERS",
    "PersistenceProvider",
    "ProdApplicationProvider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdPersistenceProvider",
    "ProviderBase",
    "get_provider",
    "is_mockable",
]
