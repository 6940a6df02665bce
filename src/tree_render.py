"""
Text renderings of a TreeSet's shape for debugging.

Every renderer returns a string with one line per row and a trailing newline,
or an empty string for an empty tree. Walks use explicit stacks so a
degenerate (chain shaped) tree renders without hitting the recursion limit.
"""

from typing import List, Optional, Tuple

from tree_set import TreeSet

INDENT = "    "


def _line(depth: int, prefix: str, value) -> str:
    return f"{INDENT * depth}{prefix}{value}"


def _join(lines: List[str]) -> str:
    if not lines:
        return ""
    return "\n".join(lines) + "\n"


def render_pre_order(tree: TreeSet) -> str:
    """
    Indented listing, each node before its children.

    Children are indented one level deeper than their parent and labelled
    "L: " or "R: ". The root carries no label.
    """
    lines: List[str] = []
    if tree.root is None:
        return ""
    stack: List[Tuple[TreeSet.Node, int, str]] = [(tree.root, 0, "")]
    while stack:
        node, depth, prefix = stack.pop()
        lines.append(_line(depth, prefix, node.value))
        if node.right is not None:
            stack.append((node.right, depth + 1, "R: "))
        if node.left is not None:
            stack.append((node.left, depth + 1, "L: "))
    return _join(lines)


def render_in_order(tree: TreeSet) -> str:
    """Indented listing in ascending order; same labels as render_pre_order."""
    lines: List[str] = []
    stack: List[Tuple[TreeSet.Node, int, str]] = []
    node: Optional[TreeSet.Node] = tree.root
    depth, prefix = 0, ""
    while stack or node is not None:
        while node is not None:
            stack.append((node, depth, prefix))
            node, depth, prefix = node.left, depth + 1, "L: "
        node, depth, prefix = stack.pop()
        lines.append(_line(depth, prefix, node.value))
        node, depth, prefix = node.right, depth + 1, "R: "
    return _join(lines)


def render_post_order(tree: TreeSet) -> str:
    """Indented listing, children before their parent."""
    lines: List[str] = []
    if tree.root is None:
        return ""
    stack: List[Tuple[TreeSet.Node, int, str]] = [(tree.root, 0, "")]
    while stack:
        node, depth, prefix = stack.pop()
        lines.append(_line(depth, prefix, node.value))
        if node.left is not None:
            stack.append((node.left, depth + 1, "L: "))
        if node.right is not None:
            stack.append((node.right, depth + 1, "R: "))
    lines.reverse()
    return _join(lines)


def render_branches(tree: TreeSet) -> str:
    """
    Sideways drawing with connector glyphs.

    Read with the head tilted left: left subtrees sit above their parent,
    right subtrees below it.

        |   |-- 1
        |-- 3
        |   \\-- 4
    \\-- 5
        \\-- 8
    """
    lines: List[str] = []
    stack: List[Tuple[TreeSet.Node, str, bool]] = []
    node: Optional[TreeSet.Node] = tree.root
    prefix, is_left = "", False
    while stack or node is not None:
        while node is not None:
            stack.append((node, prefix, is_left))
            prefix = prefix + ("|   " if is_left else "    ")
            node, is_left = node.left, True
        node, prefix, is_left = stack.pop()
        lines.append(prefix + ("|-- " if is_left else "\\-- ") + str(node.value))
        prefix = prefix + ("|   " if is_left else "    ")
        node, is_left = node.right, False
    return _join(lines)


def render_levels(tree: TreeSet, height: Optional[int] = None) -> str:
    """
    Breadth-first picture of the tree, one row per depth.

    Every slot is as wide as the widest element, values right-aligned. Row d
    (1-based) of a picture sized for `height` rows starts with
    2**(height - d) - 1 slot widths of blanks and separates its 2**(d - 1)
    slots with 2**(height - d + 1) - 1 slot widths. Missing nodes keep their
    slot as blanks so children stay under their parents. Row d holds
    2**(d - 1) slots, so this is only practical for shallow trees.

    Args:
        tree: Tree to draw
        height: Number of rows to size the picture for; defaults to the
            tree's own height

    Returns:
        The picture, one row per line with trailing spaces stripped
    """
    tree_height = tree.height()
    if height is None:
        height = tree_height
    if height < tree_height:
        raise ValueError(f"height {height} is smaller than tree height {tree_height}")

    width = max((len(str(value)) for value in tree.to_list_in_order()), default=1)

    lines: List[str] = []
    row: List[Optional[TreeSet.Node]] = [tree.root] if tree.root is not None else []
    for depth in range(1, tree_height + 1):
        indent = (2 ** (height - depth) - 1) * width
        spacing = (2 ** (height - depth + 1) - 1) * width
        cells = [str(node.value).rjust(width) if node is not None else " " * width for node in row]
        lines.append((" " * indent + (" " * spacing).join(cells)).rstrip())

        next_row: List[Optional[TreeSet.Node]] = []
        for node in row:
            if node is None:
                next_row.extend((None, None))
            else:
                next_row.extend((node.left, node.right))
        row = next_row
    return _join(lines)
