"""
Parser module for exprc.

Converts an infix token list into postfix (RPN) order with the
shunting-yard algorithm. Unbalanced parentheses are absorbed instead of
reported.
"""

import logging
from typing import Dict, List

from .lexer import TokenKind, classify

logger = logging.getLogger(__name__)

# All operators are left-associative; ties pop the earlier operator.
PRECEDENCE: Dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
}


def precedence(op: str) -> int:
    """Binding strength of an operator; 0 for anything else (including "(")."""
    return PRECEDENCE.get(op, 0)


class Parser:
    """Shunting-yard parser producing postfix token order.

    Example:
        >>> Parser().to_rpn(["3", "+", "4", "*", "2"])
        ['3', '4', '2', '*', '+']
    """

    def to_rpn(self, tokens: List[str]) -> List[str]:
        """Reorder infix tokens into postfix.

        Args:
            tokens: Token strings as produced by the lexer

        Returns:
            The same operands and operators in postfix order. Parentheses
            never appear in the output.
        """
        output: List[str] = []
        ops: List[str] = []

        for token in tokens:
            kind = classify(token)

            if kind in (TokenKind.IDENTIFIER, TokenKind.NUMBER):
                output.append(token)
            elif kind == TokenKind.LPAREN:
                ops.append(token)
            elif kind == TokenKind.RPAREN:
                self._close_group(ops, output)
            elif kind == TokenKind.OPERATOR:
                while ops and precedence(ops[-1]) >= precedence(token):
                    output.append(ops.pop())
                ops.append(token)
            else:
                logger.debug("ignoring unexpected token %r", token)

        while ops:
            op = ops.pop()
            if op == "(":
                logger.debug("discarding unclosed '('")
                continue
            output.append(op)

        logger.debug("converted %d tokens to %d postfix entries", len(tokens), len(output))
        return output

    @staticmethod
    def _close_group(ops: List[str], output: List[str]) -> None:
        """Pop operators up to and including the nearest "(".

        A ")" with no matching "(" pops everything and is otherwise ignored.
        """
        while ops and ops[-1] != "(":
            output.append(ops.pop())
        if ops:
            ops.pop()
        else:
            logger.debug("ignoring unmatched ')'")


def to_rpn(tokens: List[str]) -> List[str]:
    """Convenience function to convert infix tokens to postfix.

    Args:
        tokens: Infix token strings

    Returns:
        Postfix token strings
    """
    return Parser().to_rpn(tokens)
