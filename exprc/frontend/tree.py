"""
Expression tree for exprc.

Defines the two AST node kinds and builds a tree from postfix tokens.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .lexer import TokenKind, classify

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Literal:
    """Leaf node: an identifier or a numeral.

    Attributes:
        value: The token text, used verbatim as an IR operand
    """
    value: str


@dataclass(frozen=True)
class BinaryOp:
    """Binary operation node.

    Well-formed input always gives both children. A child is None only
    when the postfix input ran short of operands.

    Attributes:
        op: The operator ("+", "-", "*", "/")
        left: Left operand subtree
        right: Right operand subtree
    """
    op: str
    left: Optional["Node"]
    right: Optional["Node"]


Node = Union[Literal, BinaryOp]


class TreeBuilder:
    """Builds an expression tree from postfix tokens.

    Example:
        >>> render_tree(TreeBuilder().build(["3", "4", "2", "*", "+"]))
        '(+ 3 (* 4 2))'
    """

    def build(self, rpn: List[str]) -> Optional[Node]:
        """Reduce a postfix token list to a single tree.

        Args:
            rpn: Postfix token strings

        Returns:
            The root node, or None for empty input. If the input leaves
            several subtrees behind, the first one pushed is returned and
            the rest are dropped.
        """
        stack: List[Node] = []

        for token in rpn:
            kind = classify(token)
            if kind in (TokenKind.IDENTIFIER, TokenKind.NUMBER):
                stack.append(Literal(token))
            elif kind == TokenKind.OPERATOR:
                right = stack.pop() if stack else None
                left = stack.pop() if stack else None
                if left is None or right is None:
                    logger.debug("operator %r is missing an operand", token)
                stack.append(BinaryOp(token, left, right))
            else:
                logger.debug("skipping non-expression token %r", token)

        if not stack:
            return None
        if len(stack) > 1:
            logger.debug("discarding %d surplus subtrees", len(stack) - 1)
        return stack[0]


def build_tree(rpn: List[str]) -> Optional[Node]:
    """Convenience function to build a tree from postfix tokens."""
    return TreeBuilder().build(rpn)


def count_nodes(node: Optional[Node]) -> int:
    """Count the nodes in a tree; None counts as 0."""
    count = 0
    pending: List[Optional[Node]] = [node]
    while pending:
        current = pending.pop()
        if current is None:
            continue
        count += 1
        if isinstance(current, BinaryOp):
            pending.append(current.left)
            pending.append(current.right)
    return count


def tree_depth(node: Optional[Node]) -> int:
    """Height of a tree; a lone literal has depth 1."""
    depth = 0
    pending: List[Tuple[Optional[Node], int]] = [(node, 1)]
    while pending:
        current, level = pending.pop()
        if current is None:
            continue
        depth = max(depth, level)
        if isinstance(current, BinaryOp):
            pending.append((current.left, level + 1))
            pending.append((current.right, level + 1))
    return depth


def render_tree(node: Optional[Node], placeholder: str = "(empty)") -> str:
    """Render a tree as an s-expression, e.g. ``(+ 3 (* 4 2))``.

    Args:
        node: Tree root (may be None)
        placeholder: Text returned for an empty tree

    Returns:
        The rendered tree. Absent children inside a tree appear as ``_``.
    """
    if node is None:
        return placeholder

    rendered: List[str] = []
    pending: List[Tuple[Optional[Node], bool]] = [(node, False)]
    while pending:
        current, children_done = pending.pop()
        if current is None:
            rendered.append("_")
        elif isinstance(current, Literal):
            rendered.append(current.value)
        elif children_done:
            right = rendered.pop()
            left = rendered.pop()
            rendered.append(f"({current.op} {left} {right})")
        else:
            pending.append((current, True))
            pending.append((current.right, False))
            pending.append((current.left, False))
    return rendered.pop()
