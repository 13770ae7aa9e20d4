"""
Main compiler orchestration module for exprc.

This module provides the Compiler class that runs the pipeline
tokenize -> postfix -> tree -> IR, and the separate constant-folding step.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..backend import ConstantFolder, IREmitter
from ..errors import SourceError
from ..frontend import Lexer, Node, Parser, TreeBuilder, count_nodes
from ..ir import Instruction
from ..utils.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    """Result of compiling one expression.

    Attributes:
        root: Expression tree root (None for empty input)
        ir: Unoptimized instructions
        node_count: Number of nodes in the tree
        ir_count: Number of instructions
        tokens: Tokens the lexer produced
        rpn: Tokens in postfix order
    """
    root: Optional[Node]
    ir: List[Instruction]
    node_count: int
    ir_count: int
    tokens: List[str] = field(default_factory=list)
    rpn: List[str] = field(default_factory=list)


@dataclass
class OptimizeResult:
    """Result of folding constants in an IR list.

    Attributes:
        optimized: Folded instructions, one per input instruction
        opt_count: Number of folded-output instructions
    """
    optimized: List[Instruction]
    opt_count: int


@dataclass
class FileCompileResult:
    """Result of compiling an expression read from a file.

    Attributes:
        success: Whether the file could be read
        result: The compile result (if the file was read)
        error_message: Error message if reading failed
    """
    success: bool
    result: Optional[CompileResult] = None
    error_message: Optional[str] = None


class Compiler:
    """Main compiler class for exprc.

    Malformed input never raises: it compiles to whatever partial tree
    and IR can be recovered.

    Example:
        >>> compiler = Compiler()
        >>> result = compiler.compile("(1+2)*x")
        >>> [str(instr) for instr in result.ir]
        ['t0 = 1 + 2', 't1 = t0 * x']
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the compiler.

        Args:
            settings: Compiler settings. Defaults to DEFAULT_SETTINGS.
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._lexer = Lexer()
        self._parser = Parser()
        self._builder = TreeBuilder()
        self._emitter = IREmitter(temp_prefix=self._settings.temp_prefix)
        self._folder = ConstantFolder()

    @property
    def settings(self) -> Settings:
        """Settings this compiler was created with."""
        return self._settings

    def compile(self, source: str) -> CompileResult:
        """Compile an expression to unoptimized IR.

        Args:
            source: Expression text

        Returns:
            CompileResult: Tree, IR and both counts
        """
        tokens = self._lexer.tokenize(source)
        rpn = self._parser.to_rpn(tokens)
        root = self._builder.build(rpn)
        ir = self._emitter.emit(root).instructions

        node_count = count_nodes(root)
        logger.debug("compiled %r: %d nodes, %d instructions", source, node_count, len(ir))
        return CompileResult(
            root=root,
            ir=ir,
            node_count=node_count,
            ir_count=len(ir),
            tokens=tokens,
            rpn=rpn,
        )

    def optimize(self, ir: List[Instruction]) -> OptimizeResult:
        """Fold constants in an IR list.

        Independent of :meth:`compile`; may be called any number of times
        on the same list.

        Args:
            ir: Instructions in evaluation order

        Returns:
            OptimizeResult: Folded instructions and their count
        """
        optimized = self._folder.fold(ir)
        return OptimizeResult(optimized=optimized, opt_count=len(optimized))

    def compile_file(self, path: Path) -> FileCompileResult:
        """Compile the expression stored in a text file.

        Args:
            path: Path to a UTF-8 text file

        Returns:
            FileCompileResult: The compile result, or an error message if
            the file could not be read
        """
        try:
            source = read_source(path)
        except SourceError as e:
            return FileCompileResult(success=False, error_message=str(e))
        return FileCompileResult(success=True, result=self.compile(source))


def read_source(path: Path) -> str:
    """Read expression text from a file.

    Raises:
        SourceError: If the file does not exist or cannot be decoded
    """
    if not path.exists():
        raise SourceError("file not found", path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceError(f"cannot read file: {e}", path) from e
