class TreeError(Exception):
    """Base class for errors raised by an OrderedTree"""


class EmptyTreeError(TreeError, LookupError):

    def __init__(self, operation: str):
        super().__init__(f"{operation}() called on an empty tree")
        self.operation = operation


class KeyNotFoundError(TreeError, KeyError):

    def __init__(self, key):
        super().__init__(key)
        self.key = key

    def __str__(self):
        return f"key not in tree: {self.key!r}"


class InvalidArgumentError(TreeError, ValueError):
    pass


class InvariantError(TreeError, AssertionError):
    """Raised by OrderedTree.validate() when the tree structure is broken"""
