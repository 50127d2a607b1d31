"""Production dependency injection container."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from snip.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build the container with the production implementation of every component.

    Persistence resolves to PostgreSQL; the engine is created lazily on the
    first request that needs a session and disposed when the container closes.
    """
    providers = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*providers, FastapiProvider())
