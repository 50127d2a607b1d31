"""Container for tests: mock components unless asked otherwise."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from snip.util.di import PROVIDERS, Component, get_provider, is_mockable


def mockable_components() -> set[Component]:
    """Names of every component that has a mock implementation."""
    return {base.__mock_component__ for base in PROVIDERS if is_mockable(base)}


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where mockable components use their test doubles.

    Args:
        unmock: Components to run with their production implementation.
            ``{"persistence"}`` needs a reachable PostgreSQL.

    Raises:
        ValueError: If unmock names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - mockable_components()
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    providers = [
        get_provider(
            base,
            use_mock=is_mockable(base) and base.__mock_component__ not in unmock,
        )()
        for base in PROVIDERS
    ]
    # FastapiProvider lets API tests share this container with the app
    return make_async_container(*providers, FastapiProvider())
