"""
Lexer module for exprc.

Splits an infix arithmetic expression into a flat list of token strings.
Tokens are kept as plain strings; their kind is decided where they are
consumed (see :func:`classify`).
"""

import logging
import re
from enum import Enum, auto
from typing import Iterator, List

logger = logging.getLogger(__name__)


class TokenKind(Enum):
    """Structural kinds a token string can fall into."""
    IDENTIFIER = auto()  # x, rate_2
    NUMBER = auto()      # 42, 3.14
    OPERATOR = auto()    # + - * /
    LPAREN = auto()      # (
    RPAREN = auto()      # )
    UNKNOWN = auto()     # anything a caller passed in that the lexer never produces


OPERATORS = frozenset("+-*/")

# One identifier word, one numeral with at most one decimal point, or one
# grouping/operator character. Everything else is skipped.
_TOKEN_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*|[0-9]+(?:\.[0-9]+)?|[()+\-*/]")

_IDENTIFIER_RE = re.compile(r"[A-Za-z_]")


def classify(token: str) -> TokenKind:
    """Classify a token string by its shape.

    Args:
        token: A token as produced by :func:`tokenize`

    Returns:
        The token's kind
    """
    if not token:
        return TokenKind.UNKNOWN
    if _IDENTIFIER_RE.match(token):
        return TokenKind.IDENTIFIER
    if token[0] in "0123456789":
        return TokenKind.NUMBER
    if token in OPERATORS:
        return TokenKind.OPERATOR
    if token == "(":
        return TokenKind.LPAREN
    if token == ")":
        return TokenKind.RPAREN
    return TokenKind.UNKNOWN


def is_operand(token: str) -> bool:
    """True for identifiers and numerals."""
    return classify(token) in (TokenKind.IDENTIFIER, TokenKind.NUMBER)


class Lexer:
    """Tokenizer for infix arithmetic expressions.

    Unrecognized characters are dropped rather than reported, so any
    string tokenizes successfully.

    Example:
        >>> Lexer().tokenize("3 + 4 * 2")
        ['3', '+', '4', '*', '2']
    """

    def tokenize(self, source: str) -> List[str]:
        """Tokenize an expression.

        Args:
            source: Raw expression text

        Returns:
            Token strings in source order (empty if nothing matched)
        """
        tokens = list(self.tokenize_iter(source))
        logger.debug("tokenized %d chars into %d tokens", len(source), len(tokens))
        return tokens

    def tokenize_iter(self, source: str) -> Iterator[str]:
        """Tokenize an expression lazily.

        Args:
            source: Raw expression text

        Yields:
            Token strings one at a time
        """
        pos = 0
        for match in _TOKEN_RE.finditer(source):
            self._note_skipped(source[pos:match.start()], pos)
            pos = match.end()
            yield match.group()
        self._note_skipped(source[pos:], pos)

    @staticmethod
    def _note_skipped(text: str, offset: int) -> None:
        dropped = text.strip()
        if dropped:
            logger.debug("dropped unrecognized input %r at offset %d", dropped, offset)


def tokenize(source: str) -> List[str]:
    """Convenience function to tokenize an expression.

    Args:
        source: Raw expression text

    Returns:
        List of token strings
    """
    return Lexer().tokenize(source)
