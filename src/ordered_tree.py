"""
Ordered tree -- an unbalanced binary search tree over any totally-ordered type.

Every structural operation is a recursive procedure that takes the handle of
a subtree (a node, or None for an empty slot) and returns the handle that
should now occupy that slot. The caller assigns the result back into its own
link, so inserting at an empty slot and splicing out a removed node are both
plain reassignments.

There is no rebalancing: inserting values in sorted order builds a chain, and
recursion depth then grows with the number of elements.
"""

import logging
from copy import deepcopy
from typing import TypeVar, Generic, Iterable, Iterator, List, Optional, TextIO

logger = logging.getLogger(__name__)

T = TypeVar('T')


class EmptyTreeError(ValueError):
    """Raised when an extreme value is requested from an empty tree."""


class OrderedTree(Generic[T]):
    class Node:
        def __init__(
            self,
            value: T,
            left: Optional['OrderedTree.Node'] = None,
            right: Optional['OrderedTree.Node'] = None,
        ) -> None:
            self.value: T = value
            self.left: Optional['OrderedTree.Node'] = left
            self.right: Optional['OrderedTree.Node'] = right

    def __init__(self, values: Optional[Iterable[T]] = None) -> None:
        self._root: Optional[OrderedTree.Node] = None
        self._size: int = 0
        if values is not None:
            for value in values:
                self.insert(value)

    # -- insertion and removal ------------------------------------------------

    def _insert(self, node: Optional[Node], value: T) -> Node:
        if node is None:
            created = OrderedTree.Node(value)
            self._size += 1
            return created

        if value < node.value:
            node.left = self._insert(node.left, value)
        elif node.value < value:
            node.right = self._insert(node.right, value)
        # equivalent value: duplicate, leave the subtree as is
        return node

    def insert(self, value: T) -> None:
        self._root = self._insert(self._root, value)

    def _remove(self, node: Optional[Node], value: T) -> Optional[Node]:
        if node is None:
            return None

        if value < node.value:
            node.left = self._remove(node.left, value)
        elif node.value < value:
            node.right = self._remove(node.right, value)
        elif node.left is not None and node.right is not None:
            # Take over the in-order successor's value, then delete the
            # successor itself; it has no left child, so that removal ends
            # in the splice branch below.
            node.value = self._find_min(node.right).value
            node.right = self._remove(node.right, node.value)
        else:
            replacement = node.left if node.left is not None else node.right
            node.left = node.right = None
            self._size -= 1
            return replacement

        return node

    def remove(self, value: T) -> None:
        self._root = self._remove(self._root, value)

    # -- queries ----------------------------------------------------------------

    def _contains(self, node: Optional[Node], value: T) -> bool:
        # An empty slot must be checked before its value is compared.
        if node is None:
            return False
        if value < node.value:
            return self._contains(node.left, value)
        if node.value < value:
            return self._contains(node.right, value)
        return True

    def contains(self, value: T) -> bool:
        return self._contains(self._root, value)

    def _find_min(self, node: Node) -> Node:
        if node.left is None:
            return node
        return self._find_min(node.left)

    def _find_max(self, node: Node) -> Node:
        while node.right is not None:
            node = node.right
        return node

    def min(self) -> T:
        if self._root is None:
            raise EmptyTreeError("min from empty tree")
        return self._find_min(self._root).value

    def max(self) -> T:
        if self._root is None:
            raise EmptyTreeError("max from empty tree")
        return self._find_max(self._root).value

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._root is None

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return 0
        return 1 + max(self._height(node.left), self._height(node.right))

    def height(self) -> int:
        """Number of nodes on the longest root-to-leaf path (0 when empty)."""
        return self._height(self._root)

    # -- whole-tree lifecycle ---------------------------------------------------

    def _clear(self, node: Optional[Node]) -> None:
        if node is not None:
            self._clear(node.left)
            self._clear(node.right)
            node.left = node.right = None

    def clear(self) -> None:
        if self._root is not None:
            logger.debug("clearing tree of %d elements", self._size)
        self._clear(self._root)
        self._root = None
        self._size = 0

    def _clone(self, node: Optional[Node], memo: Optional[dict] = None) -> Optional[Node]:
        # With a memo, elements are deep-copied as well as nodes.
        if node is None:
            return None
        value = node.value if memo is None else deepcopy(node.value, memo)
        return OrderedTree.Node(value, self._clone(node.left, memo), self._clone(node.right, memo))

    def copy(self) -> 'OrderedTree[T]':
        """Return an independent tree with the same shape and values.

        Values themselves are shared, not copied; only the nodes are new.
        """
        clone: OrderedTree[T] = OrderedTree()
        clone._root = self._clone(self._root)
        clone._size = self._size
        return clone

    def assign(self, other: 'OrderedTree[T]') -> 'OrderedTree[T]':
        """Replace this tree's contents with a deep copy of ``other``."""
        if not isinstance(other, OrderedTree):
            raise TypeError(f"cannot assign {type(other).__name__} to OrderedTree")
        if other is self:
            return self
        logger.debug("copy-assigning %d elements over %d", other._size, self._size)
        self.clear()
        self._root = self._clone(other._root)
        self._size = other._size
        return self

    def move_from(self, source: 'OrderedTree[T]') -> 'OrderedTree[T]':
        """Take ownership of ``source``'s nodes, leaving ``source`` empty.

        Whatever this tree held before is released first.
        """
        if not isinstance(source, OrderedTree):
            raise TypeError(f"cannot move {type(source).__name__} into OrderedTree")
        if source is self:
            return self
        logger.debug("moving %d elements, releasing %d", source._size, self._size)
        self.clear()
        self._root, source._root = source._root, None
        self._size, source._size = source._size, 0
        return self

    @classmethod
    def take(cls, source: 'OrderedTree[T]') -> 'OrderedTree[T]':
        """Build a new tree that owns ``source``'s nodes; ``source`` ends up empty."""
        tree: OrderedTree[T] = cls()
        return tree.move_from(source)

    # -- traversal --------------------------------------------------------------

    def _print_tree(self, node: Optional[Node], sink: TextIO) -> None:
        if node is not None:
            self._print_tree(node.left, sink)
            sink.write(f"{node.value}\n")
            self._print_tree(node.right, sink)

    def print_tree(self, sink: TextIO) -> None:
        """Write the elements to ``sink`` in ascending order, one per line.

        An empty tree writes ``Empty tree`` instead.
        """
        if self._root is None:
            sink.write("Empty tree\n")
        else:
            self._print_tree(self._root, sink)

    def _walk(self, first_child: str, second_child: str) -> Iterator[T]:
        # Visits a node before its subtrees; the child pushed last is
        # visited first.
        stack: List[OrderedTree.Node] = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            for name in (second_child, first_child):
                child = getattr(node, name)
                if child is not None:
                    stack.append(child)

    def in_order(self) -> List[T]:
        return list(self)

    def pre_order(self) -> List[T]:
        return list(self._walk("left", "right"))

    def post_order(self) -> List[T]:
        # node-right-left, reversed, is left-right-node
        values = list(self._walk("right", "left"))
        values.reverse()
        return values

    # -- protocol ---------------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        """Yield the elements in ascending order without recursing."""
        pending: List[OrderedTree.Node] = []
        node = self._root
        while pending or node is not None:
            if node is not None:
                pending.append(node)
                node = node.left
                continue
            node = pending.pop()
            yield node.value
            node = node.right

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedTree):
            return NotImplemented
        return self._size == other._size and all(a == b for a, b in zip(self, other))

    def __copy__(self) -> 'OrderedTree[T]':
        return self.copy()

    def __deepcopy__(self, memo: dict) -> 'OrderedTree[T]':
        clone: OrderedTree[T] = OrderedTree()
        memo[id(self)] = clone
        clone._root = self._clone(self._root, memo)
        clone._size = self._size
        return clone

    def __repr__(self) -> str:
        return f"OrderedTree({self.in_order()})"

    def __str__(self) -> str:
        return f"OrderedTree(size={self._size})"
