"""Test doubles for mockable DI components."""

# Registers MockPersistenceProvider as a PersistenceProvider subclass
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = ["MockPersistenceProvider", "build_test_container"]
