"""
Intermediate Representation (IR) module for exprc.

This module defines the three-address instructions produced by the
emitter and rewritten by the optimizer, plus their text rendering.
"""

from .nodes import Assign, ConstAssign, Instruction, MISSING_OPERAND
from .numbers import format_number
from .render import EMPTY_PLACEHOLDER, render_instruction, render_listing

__all__ = [
    # Instructions
    "Assign",
    "ConstAssign",
    "Instruction",
    # Rendering
    "EMPTY_PLACEHOLDER",
    "MISSING_OPERAND",
    "format_number",
    "render_instruction",
    "render_listing",
]
