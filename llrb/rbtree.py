import enum
import logging
from typing import Iterable, Iterator, List, Optional

from .errors import (
    EmptyTreeError,
    InvalidArgumentError,
    InvariantError,
    KeyNotFoundError,
)

logger = logging.getLogger(__name__)


class Colour(enum.Enum):
    BLACK = 0
    RED = 1

    def flipped(self) -> "Colour":
        return Colour.BLACK if self is Colour.RED else Colour.RED


class Node:

    def __init__(self, key, colour: Colour = Colour.RED, size: int = 1):
        self.right: Optional[Node] = None
        self.left: Optional[Node] = None
        # colour of the link from the parent to this node
        self.colour = colour
        self.size = size
        self.key = key

    def replace(self, node: "Node"):
        self.key = node.key

    def __repr__(self):
        return f"Node({self.key!r}, {self.colour.name}, size={self.size})"


def is_red(node: Optional[Node]) -> bool:
    # null links are black
    return node is not None and node.colour == Colour.RED


def subtree_size(node: Optional[Node]) -> int:
    return 0 if node is None else node.size


def _resize(node: Node):
    node.size = 1 + subtree_size(node.left) + subtree_size(node.right)


def rotate_left(h: Node) -> Node:
    """Make a right-leaning red link lean to the left"""
    x = h.right
    h.right = x.left
    x.left = h
    x.colour = h.colour
    h.colour = Colour.RED
    _resize(h)
    _resize(x)
    return x


def rotate_right(h: Node) -> Node:
    """Make a left-leaning red link lean to the right"""
    x = h.left
    h.left = x.right
    x.right = h
    x.colour = h.colour
    h.colour = Colour.RED
    _resize(h)
    _resize(x)
    return x


def flip_colours(h: Node):
    h.colour = h.colour.flipped()
    h.left.colour = h.left.colour.flipped()
    h.right.colour = h.right.colour.flipped()


def move_red_left(h: Node) -> Node:
    """Make h.left or one of its children red.

    Assumes h is red and both h.left and h.left.left are black.
    """
    flip_colours(h)
    if is_red(h.right.left):
        # borrow from the right sibling without leaving a right-leaning red
        h.right = rotate_right(h.right)
        h = rotate_left(h)
        flip_colours(h)
    return h


def move_red_right(h: Node) -> Node:
    """Make h.right or one of its children red.

    Assumes h is red and both h.right and h.right.left are black.
    """
    flip_colours(h)
    if is_red(h.left.left):
        h = rotate_right(h)
        flip_colours(h)
    return h


def balance(h: Node) -> Node:
    """Restore the red-black invariants on the way back up the tree"""
    if is_red(h.right):
        h = rotate_left(h)
    if is_red(h.left) and is_red(h.left.left):
        h = rotate_right(h)
    if is_red(h.left) and is_red(h.right):
        flip_colours(h)
    _resize(h)
    return h


def min_node(node: Node) -> Node:
    while node.left is not None:
        node = node.left
    return node


def max_node(node: Node) -> Node:
    while node.right is not None:
        node = node.right
    return node


class OrderedTree:
    """Ordered set of comparable keys stored in a left-leaning red-black tree.

    Every mutator rebuilds the path from the root to the affected node and
    re-establishes the invariants on the way back up, so the height stays
    within 2 * log2(n + 1).

    The tree is not thread-safe. Callers sharing an instance between threads
    must serialise access themselves; concurrent mutation corrupts the
    structure.
    """

    def __init__(self, keys: Optional[Iterable] = None):
        self.root: Optional[Node] = None
        if keys is not None:
            for key in keys:
                self.insert(key)

    def size(self) -> int:
        return subtree_size(self.root)

    def __len__(self):
        return self.size()

    def is_empty(self) -> bool:
        return self.root is None

    def __bool__(self):
        return not self.is_empty()

    def height(self) -> int:
        """Returns the number of links on the longest root-to-leaf path, -1 if empty"""
        return self._height(self.root)

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(self._height(node.left), self._height(node.right))

    def black_height(self) -> int:
        """Returns the number of black nodes on any path from the root to a null link"""
        count = 0
        node = self.root
        while node is not None:
            if not is_red(node):
                count += 1
            node = node.left
        return count

    def min(self):
        if self.is_empty():
            raise EmptyTreeError("min")
        return min_node(self.root).key

    def max(self):
        if self.is_empty():
            raise EmptyTreeError("max")
        return max_node(self.root).key

    def search(self, key) -> Optional[Node]:
        """Returns the node holding key, or None"""
        node = self.root
        while node is not None:
            if key < node.key:
                node = node.left
            elif node.key < key:
                node = node.right
            else:
                return node
        return None

    def contains(self, key) -> bool:
        if key is None:
            return False
        return self.search(key) is not None

    def __contains__(self, key):
        return self.contains(key)

    def insert(self, key):
        """Insert key, overwriting an equal key already in the tree"""
        self._check_key(key)
        before = self.size()
        self.root = self._insert(self.root, key)
        self.root.colour = Colour.BLACK
        if self.size() == before:
            logger.debug("overwrote key %r", key)
        else:
            logger.debug("inserted key %r, size is now %d", key, self.size())

    def _insert(self, h: Optional[Node], key) -> Node:
        if h is None:
            return Node(key)

        if key < h.key:
            h.left = self._insert(h.left, key)
        elif h.key < key:
            h.right = self._insert(h.right, key)
        else:
            h.key = key

        # fix up any right-leaning links and split temporary 4-nodes
        if is_red(h.right) and not is_red(h.left):
            h = rotate_left(h)
        if is_red(h.left) and is_red(h.left.left):
            h = rotate_right(h)
        if is_red(h.left) and is_red(h.right):
            flip_colours(h)
        _resize(h)
        return h

    def delete(self, key):
        """Remove key from the tree.

        Raises EmptyTreeError if the tree is empty and KeyNotFoundError if key
        is not present. The tree is left untouched in both cases.
        """
        self._check_key(key)
        if self.is_empty():
            raise EmptyTreeError("delete")
        # the descent restructures the tree, so reject absent keys up front
        if self.search(key) is None:
            raise KeyNotFoundError(key)

        self._redden_root()
        self.root = self._delete(self.root, key)
        self._blacken_root()
        logger.debug("deleted key %r, size is now %d", key, self.size())

    def _delete(self, h: Node, key) -> Optional[Node]:
        if key < h.key:
            if not is_red(h.left) and not is_red(h.left.left):
                h = move_red_left(h)
            h.left = self._delete(h.left, key)
        else:
            if is_red(h.left):
                h = rotate_right(h)
            if not h.key < key and h.right is None:
                return None
            if not is_red(h.right) and not is_red(h.right.left):
                h = move_red_right(h)
            if not h.key < key:
                # copy the successor up and remove it from the right subtree
                h.replace(min_node(h.right))
                h.right = self._delete_min(h.right)
            else:
                h.right = self._delete(h.right, key)
        return balance(h)

    def delete_min(self):
        if self.is_empty():
            raise EmptyTreeError("delete_min")
        self._redden_root()
        self.root = self._delete_min(self.root)
        self._blacken_root()
        logger.debug("deleted minimum, size is now %d", self.size())

    def _delete_min(self, h: Node) -> Optional[Node]:
        if h.left is None:
            return None
        if not is_red(h.left) and not is_red(h.left.left):
            h = move_red_left(h)
        h.left = self._delete_min(h.left)
        return balance(h)

    def delete_max(self):
        if self.is_empty():
            raise EmptyTreeError("delete_max")
        self._redden_root()
        self.root = self._delete_max(self.root)
        self._blacken_root()
        logger.debug("deleted maximum, size is now %d", self.size())

    def _delete_max(self, h: Node) -> Optional[Node]:
        if is_red(h.left):
            h = rotate_right(h)
        if h.right is None:
            return None
        if not is_red(h.right) and not is_red(h.right.left):
            h = move_red_right(h)
        h.right = self._delete_max(h.right)
        return balance(h)

    def _redden_root(self):
        # a root with two black children is a 2-node; colour it red so the
        # first move_red_left/move_red_right of a delete has a red to push down
        if not is_red(self.root.left) and not is_red(self.root.right):
            self.root.colour = Colour.RED

    def _blacken_root(self):
        if self.root is not None:
            self.root.colour = Colour.BLACK

    def keys(self) -> List:
        """Returns all keys in ascending order"""
        if self.is_empty():
            return []
        return self.keys_in_range(self.min(), self.max())

    def keys_in_range(self, low, high) -> List:
        """Returns the keys k with low <= k <= high in ascending order"""
        if low is None:
            raise InvalidArgumentError("low bound cannot be None")
        if high is None:
            raise InvalidArgumentError("high bound cannot be None")
        keys = []
        self._collect(self.root, keys, low, high)
        return keys

    def _collect(self, node: Optional[Node], keys: list, low, high):
        if node is None:
            return
        if low < node.key:
            self._collect(node.left, keys, low, high)
        if low <= node.key <= high:
            keys.append(node.key)
        if high > node.key:
            self._collect(node.right, keys, low, high)

    def count_in_range(self, low, high) -> int:
        return len(self.keys_in_range(low, high))

    def __iter__(self) -> Iterator:
        # iterate over a snapshot so mutation during iteration is harmless
        return iter(self.keys())

    def clear(self):
        self.root = None

    def validate(self):
        """Raises InvariantError if any of the red-black invariants is broken"""
        if self.root is None:
            return
        if is_red(self.root):
            raise InvariantError(f"root {self.root.key!r} is red")
        self._validate(self.root, None, None)

    def _validate(self, node: Optional[Node], low, high) -> int:
        """Checks the subtree rooted at node and returns its black height.

        low and high are the exclusive key bounds inherited from the ancestors,
        None meaning unbounded.
        """
        if node is None:
            return 0

        if low is not None and not low < node.key:
            raise InvariantError(f"key {node.key!r} is not greater than {low!r}")
        if high is not None and not node.key < high:
            raise InvariantError(f"key {node.key!r} is not less than {high!r}")
        if is_red(node.right):
            raise InvariantError(f"right link of {node.key!r} is red")
        if is_red(node) and is_red(node.left):
            raise InvariantError(f"consecutive red links at {node.key!r}")

        left = self._validate(node.left, low, node.key)
        right = self._validate(node.right, node.key, high)
        if left != right:
            raise InvariantError(
                f"black height mismatch below {node.key!r}: {left} != {right}")
        if node.size != 1 + subtree_size(node.left) + subtree_size(node.right):
            raise InvariantError(f"stale size {node.size} at {node.key!r}")

        return left + (0 if is_red(node) else 1)

    def pprint(self) -> str:
        return self._pprint(self.root, "ROOT", 0)

    def _pprint(self, node: Optional[Node], side: str, depth: int) -> str:
        if node is None:
            return "\t" * depth + "|_ null\n"
        # recursively draw a tree
        return ("\t" * depth + f"|_ {side} | {node.key}: {node.colour} | {node.size}\n"
                + self._pprint(node.left, "LEFT", depth + 1)
                + self._pprint(node.right, "RIGHT", depth + 1))

    def _check_key(self, key):
        if key is None:
            raise InvalidArgumentError("key cannot be None")

    def __repr__(self):
        return f"{type(self).__name__}({self.keys()!r})"
