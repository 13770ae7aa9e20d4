"""
Backend module for exprc.

This module lowers expression trees to IR and optimizes the IR.
"""

from .emitter import IREmitter, EmitResult, emit_ir
from .optimizer import ConstantFolder, fold_constants, parse_number

__all__ = [
    "IREmitter",
    "EmitResult",
    "emit_ir",
    "ConstantFolder",
    "fold_constants",
    "parse_number",
]
