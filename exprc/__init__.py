"""
exprc - Infix Expression to Three-Address IR Compiler

A small compiler that turns one infix arithmetic expression into a
three-address intermediate representation and folds constants in it.

Example:
    >>> from exprc import Compiler
    >>> compiler = Compiler()
    >>> result = compiler.compile("3 + 4 * 2")
    >>> [str(instr) for instr in compiler.optimize(result.ir).optimized]
    ['t0 = 8', 't1 = 11']

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "exprc Team"

from .core import Compiler, CompileResult, OptimizeResult, Session
from .errors import ExprcError, SourceError

__all__ = [
    "__version__",
    "__author__",
    "Compiler",
    "CompileResult",
    "OptimizeResult",
    "Session",
    "ExprcError",
    "SourceError",
]
