"""
IR instruction definitions for exprc.

The IR is a flat list of three-address instructions. Order is evaluation
order: an instruction only reads temporaries written by earlier ones.
"""

from dataclasses import dataclass
from typing import Optional, Union

from .numbers import format_number

MISSING_OPERAND = "null"


@dataclass(frozen=True)
class Assign:
    """Binary operation into a fresh temporary (``t1 = 3 + t0``).

    Attributes:
        dest: Destination temporary name
        lhs: Left operand (temporary, numeral or identifier); None when the
            tree it came from was missing that operand
        op: The operator ("+", "-", "*", "/")
        rhs: Right operand, same forms as ``lhs``
    """
    dest: str
    lhs: Optional[str]
    op: str
    rhs: Optional[str]

    def render(self, missing_operand: str = MISSING_OPERAND) -> str:
        """Text form, with ``missing_operand`` standing in for an absent operand."""
        lhs = missing_operand if self.lhs is None else self.lhs
        rhs = missing_operand if self.rhs is None else self.rhs
        return f"{self.dest} = {lhs} {self.op} {rhs}"

    def __str__(self) -> str:
        return self.render()


@dataclass(frozen=True)
class ConstAssign:
    """Folded instruction holding a compile-time value (``t0 = 8``).

    Attributes:
        dest: Destination temporary name
        value: The folded numeric value
    """
    dest: str
    value: float

    def render(self, missing_operand: str = MISSING_OPERAND) -> str:
        """Text form; a folded instruction has no operands to go missing."""
        return f"{self.dest} = {format_number(self.value)}"

    def __str__(self) -> str:
        return self.render()


Instruction = Union[Assign, ConstAssign]
