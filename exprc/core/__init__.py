"""
Core compiler module for exprc.

This module contains the pipeline driver and the snapshot session used by
front-ends.
"""

from .compiler import Compiler, CompileResult, OptimizeResult, FileCompileResult, read_source
from .session import Session

__all__ = [
    "Compiler",
    "CompileResult",
    "OptimizeResult",
    "FileCompileResult",
    "read_source",
    "Session",
]
