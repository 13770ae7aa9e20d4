"""
Pytest configuration and fixtures for exprc tests.
"""

import pytest
import tempfile
from pathlib import Path


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp:
        yield Path(tmp)


@pytest.fixture
def sample_expression_file(temp_dir):
    """Create a sample expression file for testing."""
    expr_file = temp_dir / "expr.txt"
    expr_file.write_text("3 + 4 * 2\n", encoding="utf-8")
    return expr_file


@pytest.fixture
def compiler():
    """Provide a Compiler instance."""
    from exprc import Compiler
    return Compiler()


@pytest.fixture
def session():
    """Provide a Session instance."""
    from exprc import Session
    return Session()


@pytest.fixture
def lexer():
    """Provide a Lexer instance."""
    from exprc.frontend import Lexer
    return Lexer()


@pytest.fixture
def parser():
    """Provide a shunting-yard Parser instance."""
    from exprc.frontend import Parser
    return Parser()


@pytest.fixture
def builder():
    """Provide a TreeBuilder instance."""
    from exprc.frontend import TreeBuilder
    return TreeBuilder()


@pytest.fixture
def emitter():
    """Provide an IREmitter instance."""
    from exprc.backend import IREmitter
    return IREmitter()


@pytest.fixture
def folder():
    """Provide a ConstantFolder instance."""
    from exprc.backend import ConstantFolder
    return ConstantFolder()
