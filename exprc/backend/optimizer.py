"""
Constant folding for exprc IR.

A single forward pass over the instruction list. Temporaries whose value
is known at compile time are tracked in a local map, and any instruction
whose two operands are known is replaced by a ConstAssign. The output has
one instruction per input instruction, in the same order.
"""

import logging
import math
import operator
import re
from typing import Callable, Dict, List, Optional

from ..ir import Assign, ConstAssign, Instruction

logger = logging.getLogger(__name__)

# ASCII numerals only; float() alone would also take "1_000", " 3" and
# non-ASCII digits.
_NUMERAL_RE = re.compile(r"[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?")


def _divide(lhs: float, rhs: float) -> float:
    # Division by zero folds to +inf whatever the dividend's sign.
    if rhs == 0:
        logger.debug("folding division by zero to Infinity")
        return math.inf
    return lhs / rhs


_FOLDERS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def parse_number(text: Optional[str]) -> Optional[float]:
    """Parse an operand as a finite number.

    Returns:
        The value, or None for identifiers, temporaries, absent operands,
        anything that is not an ASCII numeral, and numerals too large to
        be finite
    """
    if text is None or not _NUMERAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


class ConstantFolder:
    """Folds constant operations in a linear IR.

    The folder keeps no state between calls, so folding the same list
    twice yields equal results. The input list is never modified.

    Example:
        >>> from exprc.ir import Assign
        >>> ir = [Assign("t0", "4", "*", "2"), Assign("t1", "3", "+", "t0")]
        >>> [str(instr) for instr in ConstantFolder().fold(ir)]
        ['t0 = 8', 't1 = 11']
    """

    def fold(self, instructions: List[Instruction]) -> List[Instruction]:
        """Fold constants.

        Args:
            instructions: IR in evaluation order

        Returns:
            A new list of the same length
        """
        constants: Dict[str, float] = {}
        folded: List[Instruction] = []
        folded_count = 0

        for instr in instructions:
            if not isinstance(instr, Assign) or instr.op not in _FOLDERS:
                folded.append(instr)
                continue

            lhs = self._resolve(instr.lhs, constants)
            rhs = self._resolve(instr.rhs, constants)
            if lhs is None or rhs is None:
                folded.append(instr)
                continue

            value = _FOLDERS[instr.op](lhs, rhs)
            constants[instr.dest] = value
            folded.append(ConstAssign(dest=instr.dest, value=value))
            folded_count += 1

        logger.debug("folded %d of %d instructions", folded_count, len(instructions))
        return folded

    @staticmethod
    def _resolve(operand: Optional[str], constants: Dict[str, float]) -> Optional[float]:
        """Value of an operand if known: a folded temporary or a numeral."""
        if operand is not None and operand in constants:
            return constants[operand]
        return parse_number(operand)


def fold_constants(instructions: List[Instruction]) -> List[Instruction]:
    """Convenience function to fold constants in an instruction list."""
    return ConstantFolder().fold(instructions)
