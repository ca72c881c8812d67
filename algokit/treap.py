"""Implicit-key treap: merge, split by position and range cutting."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass(eq=False)
class TreapNode:
    """Treap node ordered by position; a node's priority exceeds its children's."""

    val: int
    priority: float = field(default_factory=random.random)
    left: TreapNode | None = None
    right: TreapNode | None = None
    size: int = 1


def size(t: TreapNode | None) -> int:
    """Number of nodes in the treap rooted at ``t``."""
    return t.size if t is not None else 0


def _pull(t: TreapNode) -> None:
    t.size = size(t.left) + size(t.right) + 1


def merge(a: TreapNode | None, b: TreapNode | None) -> TreapNode | None:
    """Concatenate treap ``a`` followed by treap ``b``."""
    if a is None:
        return b
    if b is None:
        return a
    if a.priority > b.priority:
        a.right = merge(a.right, b)
        _pull(a)
        return a
    b.left = merge(a, b.left)
    _pull(b)
    return b


def split(
    t: TreapNode | None, k: int
) -> tuple[TreapNode | None, TreapNode | None]:
    """Split into the first ``k`` elements and the rest."""
    if t is None:
        return None, None
    if size(t.left) >= k:
        first, rest = split(t.left, k)
        t.left = rest
        _pull(t)
        return first, t
    first, rest = split(t.right, k - size(t.left) - 1)
    t.right = first
    _pull(t)
    return t, rest


def build(values: Iterable[int]) -> TreapNode | None:
    """Treap holding ``values`` in order."""
    root: TreapNode | None = None
    for v in values:
        root = merge(root, TreapNode(v))
    return root


def cut(
    t: TreapNode | None, l: int, r: int
) -> tuple[TreapNode | None, TreapNode | None, TreapNode | None]:
    """Split into elements 1..l-1, l..r and r+1.. (1-based, inclusive)."""
    if not 1 <= l <= r + 1:
        raise ValueError(f"invalid range [{l}, {r}]")
    middle, right = split(t, r)
    left, middle = split(middle, l - 1)
    return left, middle, right


def to_list(t: TreapNode | None) -> list[int]:
    """Values of the treap in order."""
    out: list[int] = []
    stack: list[TreapNode] = []
    node = t
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        out.append(node.val)
        node = node.right
    return out