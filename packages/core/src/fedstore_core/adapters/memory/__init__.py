from .dictionary import EntityDictionary
from .multiplex import MultiplexManager, MultiplexTransaction

__all__ = [
    "EntityDictionary",
    "MultiplexManager",
    "MultiplexTransaction",
]
