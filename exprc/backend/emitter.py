"""
IR emission for exprc.

Walks an expression tree in post-order and emits one three-address
instruction per operator node.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..frontend.tree import BinaryOp, Literal, Node
from ..ir import Assign, Instruction

logger = logging.getLogger(__name__)


class _EmitState:
    """Per-emission state: the temp counter and the instruction list."""

    def __init__(self, temp_prefix: str = "t") -> None:
        self.temp_prefix = temp_prefix
        self.temp_counter = 0
        self.instructions: List[Instruction] = []

    def next_temp(self) -> str:
        """Return a fresh temporary name (t0, t1, ...)."""
        name = f"{self.temp_prefix}{self.temp_counter}"
        self.temp_counter += 1
        return name


@dataclass(frozen=True)
class EmitResult:
    """Output of one emission.

    Attributes:
        instructions: Emitted instructions in evaluation order
        result: Operand holding the whole expression's value (a temporary,
            or the literal itself for a single-leaf tree); None for an
            empty tree
    """
    instructions: List[Instruction]
    result: Optional[str]


class IREmitter:
    """Lowers an expression tree to three-address IR.

    Temporaries are numbered from 0 on every call to :meth:`emit`.

    Example:
        >>> from exprc.frontend import build_tree
        >>> emitted = IREmitter().emit(build_tree(["3", "4", "2", "*", "+"]))
        >>> [str(instr) for instr in emitted.instructions]
        ['t0 = 4 * 2', 't1 = 3 + t0']
    """

    def __init__(self, temp_prefix: str = "t"):
        self._temp_prefix = temp_prefix

    def emit(self, root: Optional[Node]) -> EmitResult:
        """Emit IR for a tree.

        Args:
            root: Tree root (may be None)

        Returns:
            EmitResult with the instructions and the final operand
        """
        state = _EmitState(self._temp_prefix)
        result = self._emit_tree(root, state)
        logger.debug("emitted %d instructions", len(state.instructions))
        return EmitResult(instructions=state.instructions, result=result)

    def _emit_tree(self, root: Optional[Node], state: _EmitState) -> Optional[str]:
        """Emit code for a tree and return the operand holding its value.

        Post-order walk with an explicit stack, so tree depth is not bound
        by the interpreter's recursion limit. Each operator node is visited
        twice: once to schedule its children, once to emit its instruction.
        """
        operands: List[Optional[str]] = []
        pending: List[Tuple[Optional[Node], bool]] = [(root, False)]

        while pending:
            node, children_done = pending.pop()

            if node is None:
                operands.append(None)
            elif isinstance(node, Literal):
                operands.append(node.value)
            elif isinstance(node, BinaryOp):
                if children_done:
                    right = operands.pop()
                    left = operands.pop()
                    temp = state.next_temp()
                    state.instructions.append(Assign(dest=temp, lhs=left, op=node.op, rhs=right))
                    operands.append(temp)
                else:
                    # Left is pushed last so it is emitted first; temp
                    # numbering depends on it.
                    pending.append((node, True))
                    pending.append((node.right, False))
                    pending.append((node.left, False))
            else:
                raise TypeError(f"Unsupported tree node: {type(node).__name__}")

        return operands.pop()


def emit_ir(root: Optional[Node], temp_prefix: str = "t") -> List[Instruction]:
    """Convenience function returning just the instruction list."""
    return IREmitter(temp_prefix).emit(root).instructions
