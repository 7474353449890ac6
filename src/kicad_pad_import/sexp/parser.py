"""S-expression tree construction and queries.

A footprint file is one root list such as::

    (footprint "R_0603"
      (pad "1" smd roundrect (at -0.8 0) (size 0.8 0.95)
           (layers "F.Cu" "F.Paste" "F.Mask") (roundrect_rratio 0.25)))

Each list becomes a :class:`TreeNode`. Its first atom is the node name, the
remaining atoms are ``items`` and nested lists are ``children``. Items and
children are kept in two separate sequences, each in source order.

Lists are built with an explicit stack of pending nodes rather than by
recursion, so deeply nested input is limited by ``max_depth`` instead of the
interpreter's recursion limit.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..exceptions import MalformedNode, NestingLimitExceeded, UnexpectedEndOfInput
from ..logging_config import create_logger
from .tokenizer import END_OF_INPUT, END_OF_LIST, LIST_START, Tokenizer

logger = create_logger(__name__)


class TreeNode:
    """A parsed list: a name plus ordered items and ordered children.

    Nodes are immutable once built.

    Usage::

        root = parse('(pad "1" smd rect (at 1 2) (size 1 1))')
        root.name               # "pad"
        root.items              # ("1", "smd", "rect")
        root.find_first("at").items  # ("1", "2")
    """

    __slots__ = ("_name", "_items", "_children")

    def __init__(
        self,
        name: str,
        items: Iterable[str] = (),
        children: Iterable[TreeNode] = (),
    ) -> None:
        self._name = name
        self._items: tuple[str, ...] = tuple(items)
        self._children: tuple[TreeNode, ...] = tuple(children)

    @property
    def name(self) -> str:
        return self._name

    @property
    def items(self) -> tuple[str, ...]:
        return self._items

    @property
    def children(self) -> tuple[TreeNode, ...]:
        return self._children

    def get_item(self, index: int) -> str | None:
        """Return the atom at ``index``, or None if there is no such item."""
        if 0 <= index < len(self._items):
            return self._items[index]
        return None

    def walk(self) -> Iterator[TreeNode]:
        """Yield this node and all descendants in depth-first pre-order."""
        stack: list[TreeNode] = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def find_first(self, tag: str) -> TreeNode | None:
        """Find the first node named ``tag``, starting with this node itself.

        Returns None when no node matches.
        """
        for node in self.walk():
            if node._name == tag:
                return node
        return None

    def find_all(self, tag: str) -> list[TreeNode]:
        """Find every node named ``tag`` in depth-first pre-order.

        Matches nested inside other matches are included. Returns an empty
        list when nothing matches.
        """
        return [node for node in self.walk() if node._name == tag]

    def to_string(self, indent: int = 0) -> str:
        """Render the node back to S-expression text.

        Items stay on the opening line; each child goes on its own line.
        """
        parts = [_quote_if_needed(self._name)]
        parts.extend(_quote_if_needed(item) for item in self._items)
        head = "(" + " ".join(parts)
        if not self._children:
            return head + ")"

        child_prefix = "  " * (indent + 1)
        lines = [head]
        for child in self._children:
            lines.append(child_prefix + child.to_string(indent + 1))
        lines[-1] += ")"
        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"TreeNode(name={self._name!r}, items={len(self._items)}, "
            f"children={len(self._children)})"
        )


def _quote_if_needed(s: str) -> str:
    """Quote an atom that would not survive as a bareword."""
    if not s:
        return '""'
    for ch in s:
        if ch.isspace() or ch in '()"':
            return f'"{s}"'
    return s


class _PendingNode:
    """A list whose closing paren has not been read yet."""

    __slots__ = ("name", "items", "children")

    def __init__(self) -> None:
        self.name: str | None = None
        self.items: list[str] = []
        self.children: list[TreeNode] = []

    def build(self) -> TreeNode | None:
        if self.name is None:
            return None
        return TreeNode(self.name, self.items, self.children)


def parse_node(tokenizer: Tokenizer, max_depth: int | None = None) -> TreeNode | None:
    """Parse one list from the tokenizer.

    Returns None if the next token is not ``(`` or if the list closes before
    it has a name. A nested list that fails the same way is dropped and
    parsing of its parent continues. Nested lists that appear before a name
    are kept as children; the first atom still becomes the name.

    Raises:
        UnexpectedEndOfInput: If the input ends before the list is closed.
        NestingLimitExceeded: If lists nest deeper than ``max_depth``.
    """
    ch = tokenizer.peek()
    if ch is None:
        raise UnexpectedEndOfInput(
            "Unexpected end of input, expected '('", position=tokenizer.position
        )
    if ch != "(":
        logger.debug(f"Expected '(' at offset {tokenizer.position}, found {ch!r}")
        return None
    tokenizer.next_token()

    stack: list[_PendingNode] = [_PendingNode()]
    while True:
        token = tokenizer.next_token()
        top = stack[-1]

        if token is END_OF_INPUT:
            raise UnexpectedEndOfInput(
                f"Unexpected end of input inside list {top.name or '(unnamed)'!r} "
                f"({len(stack)} unclosed)",
                position=tokenizer.position,
            )

        if token is LIST_START:
            if max_depth is not None and len(stack) >= max_depth:
                raise NestingLimitExceeded(
                    f"Lists nested deeper than {max_depth} levels",
                    position=tokenizer.position,
                    max_depth=max_depth,
                )
            stack.append(_PendingNode())
            continue

        if token is END_OF_LIST:
            stack.pop()
            node = top.build()
            if node is None:
                logger.debug(f"Dropping unnamed list ending at offset {tokenizer.position}")
            else:
                logger.debug(f"Found list {node.name!r} with {len(node.items)} items")
            if not stack:
                return node
            if node is not None:
                stack[-1].children.append(node)
            continue

        if top.name is None:
            top.name = token.value
        else:
            top.items.append(token.value)


def parse(text: str, max_depth: int | None = None) -> TreeNode:
    """Parse S-expression text into its root node.

    Args:
        text: The S-expression text.
        max_depth: Optional limit on list nesting.

    Returns:
        The root TreeNode. Anything after the root list is ignored.

    Raises:
        UnexpectedEndOfInput: If the text ends inside a token or list.
        MalformedNode: If the text does not start with a named list.
        NestingLimitExceeded: If lists nest deeper than ``max_depth``.
    """
    tokenizer = Tokenizer(text)
    root = parse_node(tokenizer, max_depth=max_depth)
    if root is None:
        raise MalformedNode(
            "Footprint does not start with a named list", position=tokenizer.position
        )
    return root
