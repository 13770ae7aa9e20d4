"""
Test suite for exprc.

This package contains tests for the exprc compiler including:
- Unit tests for each pipeline stage
- Property tests over generated expressions
- End-to-end tests for the compiler, session and CLI
"""

__version__ = "0.1.0"
