"""Infrastructure components."""

from .persistence import PersistenceProvider

# Registers the production implementation as a subclass
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = ["PersistenceProvider"]
