from typing import TypeVar, Generic, List, Optional

T = TypeVar('T')


class TreeSet(Generic[T]):
    """Ordered set of distinct elements kept in an unbalanced binary search tree.

    Elements must be mutually comparable with ``<`` and ``>``. ``None`` is not
    a valid element.
    """

    class Node:
        def __init__(self, value: T) -> None:
            self.value: T = value
            self.left: Optional['TreeSet.Node'] = None
            self.right: Optional['TreeSet.Node'] = None

    def __init__(self) -> None:
        self._root: Optional[TreeSet.Node] = None
        self._size: int = 0

    @property
    def root(self) -> Optional[Node]:
        return self._root

    def add(self, element: T) -> bool:
        self._check_element(element)
        if self._root is None:
            self._root = TreeSet.Node(element)
            self._size += 1
            return True

        node = self._root
        while True:
            if element < node.value:
                if node.left is None:
                    node.left = TreeSet.Node(element)
                    self._size += 1
                    return True
                node = node.left
            elif element > node.value:
                if node.right is None:
                    node.right = TreeSet.Node(element)
                    self._size += 1
                    return True
                node = node.right
            else:
                return False

    def contains(self, element: T) -> bool:
        self._check_element(element)
        return self._find_node(self._root, element) is not None

    def remove(self, element: T) -> bool:
        """Remove ``element`` and return True, or return False if it is absent.

        A node with two children keeps its place in the tree: it takes the
        value of its in-order predecessor (the largest element of its left
        subtree) and the predecessor node, which has no right child, is the
        one unlinked.
        """
        self._check_element(element)
        parent: Optional[TreeSet.Node] = None
        node = self._root

        while node is not None:
            if element < node.value:
                parent = node
                node = node.left
            elif element > node.value:
                parent = node
                node = node.right
            else:
                break

        if node is None:
            return False

        if node.left is not None and node.right is not None:
            target = node
            parent = node
            node = node.left
            while node.right is not None:
                parent = node
                node = node.right
            target.value = node.value

        self._unlink(node, parent)
        self._size -= 1
        return True

    def is_empty(self) -> bool:
        return self._size == 0

    def size(self) -> int:
        return self._size

    def min(self) -> T:
        if self._root is None:
            raise ValueError("min from empty tree")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.value

    def max(self) -> T:
        if self._root is None:
            raise ValueError("max from empty tree")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.value

    def height(self) -> int:
        height = 0
        level = [self._root] if self._root is not None else []
        while level:
            height += 1
            next_level: List[TreeSet.Node] = []
            for node in level:
                if node.left is not None:
                    next_level.append(node.left)
                if node.right is not None:
                    next_level.append(node.right)
            level = next_level
        return height

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def copy(self) -> 'TreeSet[T]':
        clone: TreeSet[T] = TreeSet()
        for value in self.to_list_pre_order():
            clone.add(value)
        return clone

    def to_list_in_order(self) -> List[T]:
        result: List[T] = []
        stack: List[TreeSet.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.value)
            node = node.right
        return result

    def to_list_pre_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[TreeSet.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def to_list_post_order(self) -> List[T]:
        result: List[T] = []
        if self._root is None:
            return result
        stack: List[TreeSet.Node] = [self._root]
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def subset(self, min_value: T, max_value: T) -> List[T]:
        """Return the elements ``e`` with ``min_value <= e < max_value``, ascending.

        Subtrees that cannot hold a qualifying element are never visited: the
        walk only goes left of a node at or above ``min_value`` and only goes
        right of a node below ``max_value``.
        """
        self._check_element(min_value)
        self._check_element(max_value)
        result: List[T] = []
        stack: List[TreeSet.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left if node.value >= min_value else None
            node = stack.pop()
            at_least_min = node.value >= min_value
            below_max = node.value < max_value
            if at_least_min and below_max:
                result.append(node.value)
            node = node.right if below_max else None
        return result

    def _unlink(self, node: Node, parent: Optional[Node]) -> None:
        # node has at most one child here
        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child

    def _find_node(self, node: Optional[Node], value: T) -> Optional[Node]:
        while node is not None:
            if value < node.value:
                node = node.left
            elif value > node.value:
                node = node.right
            else:
                return node
        return None

    @staticmethod
    def _check_element(element: Optional[T]) -> None:
        if element is None:
            raise ValueError("element must not be None")

    def __len__(self) -> int:
        return self._size

    def __contains__(self, element: T) -> bool:
        return self.contains(element)

    def __repr__(self) -> str:
        return f"TreeSet({self.to_list_in_order()})"

    def __str__(self) -> str:
        return "".join(str(value) for value in self.to_list_in_order())
