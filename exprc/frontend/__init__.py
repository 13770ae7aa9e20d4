"""
Frontend module for exprc.

This module provides the lexer, the shunting-yard parser and the
expression tree builder.
"""

from .lexer import Lexer, TokenKind, classify, is_operand, tokenize
from .parser import Parser, precedence, to_rpn
from .tree import (
    Literal, BinaryOp, Node, TreeBuilder,
    build_tree, count_nodes, tree_depth, render_tree,
)

__all__ = [
    # Lexer components
    "Lexer",
    "TokenKind",
    "classify",
    "is_operand",
    "tokenize",
    # Parser components
    "Parser",
    "precedence",
    "to_rpn",
    # Tree components
    "Literal",
    "BinaryOp",
    "Node",
    "TreeBuilder",
    "build_tree",
    "count_nodes",
    "tree_depth",
    "render_tree",
]
