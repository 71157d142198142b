from .errors import (
    EmptyTreeError,
    InvalidArgumentError,
    InvariantError,
    KeyNotFoundError,
    TreeError,
)
from .rbtree import Colour, Node, OrderedTree

__all__ = [
    "Colour",
    "EmptyTreeError",
    "InvalidArgumentError",
    "InvariantError",
    "KeyNotFoundError",
    "Node",
    "OrderedTree",
    "TreeError",
]
