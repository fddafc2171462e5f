import logging

from collectionkit.arraylist.arr_model import ArrayList
from collectionkit.core.contracts import (
    Collection,
    IteratorContract,
    ListContract,
    MapContract,
    QueueContract,
    StackContract,
)
from collectionkit.core.errors import (
    CollectionError,
    KeyNotFoundError,
    OutOfBoundsError,
    UnderflowError,
)
from collectionkit.core.settings import CollectionSettings, default_settings
from collectionkit.hashmap.hm_model import HashMap
from collectionkit.iteration.it_model import CollectionIterator
from collectionkit.linklist.sl_model import LinkedList, Node
from collectionkit.queue.q_model import Queue
from collectionkit.stack.st_model import Stack

__version__ = "0.1.0"

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

__all__ = (
    "ArrayList",
    "Collection",
    "CollectionError",
    "CollectionIterator",
    "CollectionSettings",
    "HashMap",
    "IteratorContract",
    "KeyNotFoundError",
    "LinkedList",
    "ListContract",
    "MapContract",
    "Node",
    "OutOfBoundsError",
    "Queue",
    "QueueContract",
    "Stack",
    "StackContract",
    "UnderflowError",
    "default_settings",
    "logger",
)
