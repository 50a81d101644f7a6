from typing import Any, Callable, Iterator, List, Optional, Tuple

from comparable import EQ, LT, Comparable, sign

DONE = True
CONTINUE = False

Visitor = Callable[[Any], bool]


class BinarySearchTree:
    """
    Unbalanced binary search tree of Comparable items.

    Nodes own their children only; the parent of a node is re-derived on every
    walk from the root. Probes passed to lookups and remove() may be Comparable
    items (their own compare() decides the direction) or plain values (the
    stored item compares against them).
    """

    class Node:
        def __init__(self, item: Comparable) -> None:
            self.item: Comparable = item
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None

        @property
        def value(self) -> Any:
            return self.item.value()

        def __repr__(self) -> str:
            return f"Node({self.value!r})"

    def __init__(self) -> None:
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional['BinarySearchTree.Node']:
        return self._root

    def insert(self, item: Comparable) -> 'BinarySearchTree':
        """
        Add `item`, or update the equal item already stored.

        When the update moves the stored value to a different place in the
        ordering, its node is removed and the item inserted again from the root.
        """
        if not isinstance(item, Comparable):
            raise TypeError("item must be Comparable")

        found, node, parent = self._locate(item)
        if found:
            before = node.value
            node.item.update(item.value())
            if sign(node.item.compare(before)) != EQ:
                moved = node.item
                self._remove_node(node, parent)
                self.insert(moved)
            return self

        node = BinarySearchTree.Node(item)
        if parent is None:
            self._root = node
        elif sign(item.compare(parent.value)) == LT:
            parent.left = node
        else:
            parent.right = node
        self._size += 1
        return self

    def remove(self, probe: Any) -> 'BinarySearchTree':
        found, node, parent = self._locate(probe)
        if found:
            self._remove_node(node, parent)
        return self

    def contains(self, probe: Any) -> bool:
        found, _, _ = self._locate(probe)
        return found

    def get(self, probe: Any, default: Any = None) -> Any:
        found, node, _ = self._locate(probe)
        if not found:
            return default
        return node.value

    def visit_in_order(self, visitor: Visitor) -> 'BinarySearchTree':
        """Call `visitor` on each value in ascending order until it returns DONE."""
        for value in self._walk(reverse=False):
            if visitor(value):
                break
        return self

    def visit_in_reverse(self, visitor: Visitor) -> 'BinarySearchTree':
        """Call `visitor` on each value in descending order until it returns DONE."""
        for value in self._walk(reverse=True):
            if visitor(value):
                break
        return self

    def min(self) -> Any:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> Any:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        if self._root is None:
            return 0
        tallest = 0
        stack: List[Tuple[BinarySearchTree.Node, int]] = [(self._root, 1)]
        while stack:
            node, depth = stack.pop()
            tallest = max(tallest, depth)
            if node.left is not None:
                stack.append((node.left, depth + 1))
            if node.right is not None:
                stack.append((node.right, depth + 1))
        return tallest

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def in_order(self) -> List[Any]:
        return list(self._walk(reverse=False))

    def _direction(self, probe: Any, node: Node) -> int:
        if isinstance(probe, Comparable):
            return sign(probe.compare(node.value))
        # stored item compares against the raw probe; flip to probe-vs-node
        return -sign(node.item.compare(probe))

    def _locate(self, probe: Any) -> Tuple[bool, Optional[Node], Optional[Node]]:
        """
        Walk from the root towards `probe`.

        Returns (found, node, parent). On a miss `node` is None and `parent` is
        the last node visited, i.e. where a new node for `probe` would hang.
        `parent` is None for a match at the root and for an empty tree.
        """
        parent: Optional[BinarySearchTree.Node] = None
        node = self._root
        while node is not None:
            direction = self._direction(probe, node)
            if direction == EQ:
                return True, node, parent
            parent = node
            node = node.left if direction == LT else node.right
        return False, None, parent

    def _remove_node(self, node: Node, parent: Optional[Node]) -> None:
        if node.left is not None and node.right is not None:
            # take over the in-order successor's item, then delete the successor
            parent = node
            successor = node.right
            while successor.left is not None:
                parent = successor
                successor = successor.left
            node.item = successor.item
            node = successor

        subtree = node.left if node.left is not None else node.right
        if parent is None:
            self._root = subtree
        elif parent.left is node:
            parent.left = subtree
        else:
            parent.right = subtree
        self._size -= 1

    def _walk(self, reverse: bool) -> Iterator[Any]:
        near = 'right' if reverse else 'left'
        far = 'left' if reverse else 'right'
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = getattr(node, near)
            node = stack.pop()
            yield node.value
            node = getattr(node, far)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, probe: Any) -> bool:
        return self.contains(probe)

    def __iter__(self) -> Iterator[Any]:
        return self._walk(reverse=False)

    def __reversed__(self) -> Iterator[Any]:
        return self._walk(reverse=True)

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.in_order()})"

    def __str__(self) -> str:
        return f"BinarySearchTree(size={self._size})"
