"""
Snapshot session for exprc front-ends.

A Session keeps the current tree, IR and optimized IR for whatever drives
the compiler (a CLI, an editor panel, a visualizer). Each compile replaces
the whole snapshot; re-optimizing reuses the IR of the last compile.
"""

import logging
from typing import List, Optional

from ..frontend import Node, render_tree
from ..ir import Instruction, render_listing
from ..utils.settings import Settings
from .compiler import Compiler, CompileResult, OptimizeResult

logger = logging.getLogger(__name__)


class Session:
    """Holds the current compile snapshot.

    Example:
        >>> session = Session()
        >>> _ = session.compile("5/0")
        >>> session.render_optimized()
        't0 = Infinity'
    """

    def __init__(self, compiler: Optional[Compiler] = None, settings: Optional[Settings] = None):
        self._compiler = compiler or Compiler(settings)
        self.root: Optional[Node] = None
        self.ir: List[Instruction] = []
        self.optimized: List[Instruction] = []
        self.node_count = 0
        self.opt_count = 0

    @property
    def settings(self) -> Settings:
        """Settings of the underlying compiler."""
        return self._compiler.settings

    @property
    def ir_count(self) -> int:
        """Number of instructions in the unoptimized IR."""
        return len(self.ir)

    def compile(self, source: str) -> CompileResult:
        """Compile ``source`` and replace the snapshot with its outputs."""
        result = self._compiler.compile(source)
        self.root = result.root
        self.ir = result.ir
        self.node_count = result.node_count
        if self.settings.fold_on_compile:
            self.reoptimize()
        else:
            self.optimized = []
            self.opt_count = 0
        return result

    def reoptimize(self) -> OptimizeResult:
        """Fold constants in the IR from the last compile; no re-parse."""
        result = self._compiler.optimize(self.ir)
        self.optimized = result.optimized
        self.opt_count = result.opt_count
        logger.debug("re-optimized %d instructions", len(self.ir))
        return result

    def render_tree(self) -> str:
        """Current tree as an s-expression, or the empty placeholder."""
        return render_tree(self.root, self.settings.empty_placeholder)

    def render_ir(self) -> str:
        """Current IR listing, one instruction per line."""
        return render_listing(self.ir, self.settings.empty_placeholder, self.settings.missing_operand)

    def render_optimized(self) -> str:
        """Optimized listing; empty until a fold has run."""
        return render_listing(self.optimized, self.settings.empty_placeholder, self.settings.missing_operand)
