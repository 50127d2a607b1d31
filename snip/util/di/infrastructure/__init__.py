"""Infrastructure providers.

Importing the production subclass here registers it with
PersistenceProvider.__subclasses__(), which get_provider relies on.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
