"""
Text rendering of IR instructions and listings.
"""

from typing import Iterable

from .nodes import MISSING_OPERAND, Instruction

EMPTY_PLACEHOLDER = "(empty)"


def render_instruction(instr: Instruction, missing_operand: str = MISSING_OPERAND) -> str:
    """Render one instruction.

    Args:
        instr: The instruction
        missing_operand: Text used for an absent operand

    Returns:
        ``"<dest> = <lhs> <op> <rhs>"`` or ``"<dest> = <value>"``
    """
    return instr.render(missing_operand)


def render_listing(
    instructions: Iterable[Instruction],
    placeholder: str = EMPTY_PLACEHOLDER,
    missing_operand: str = MISSING_OPERAND,
) -> str:
    """Render instructions one per line, or the placeholder if there are none."""
    lines = [render_instruction(instr, missing_operand) for instr in instructions]
    return "\n".join(lines) or placeholder
