"""
Configuration settings for exprc.

This module contains default configuration values and settings used
throughout the compiler.
"""

from dataclasses import dataclass


@dataclass
class Settings:
    """Compiler settings and configuration.

    Attributes:
        temp_prefix: Prefix for emitted temporaries (``t`` gives t0, t1, ...)
        empty_placeholder: Text shown for an empty listing or tree
        fold_on_compile: Whether a session folds constants on every compile
        missing_operand: Text shown for an operand lost to malformed input
    """
    temp_prefix: str = "t"
    empty_placeholder: str = "(empty)"
    fold_on_compile: bool = True
    missing_operand: str = "null"

    def __post_init__(self):
        if not self.temp_prefix:
            raise ValueError("temp_prefix must not be empty")
        # Temporaries must never read back as numerals.
        if not (self.temp_prefix[0].isalpha() or self.temp_prefix[0] == "_"):
            raise ValueError(f"temp_prefix must start with a letter or underscore: {self.temp_prefix!r}")
        if not self.empty_placeholder:
            raise ValueError("empty_placeholder must not be empty")


# Global default settings instance
DEFAULT_SETTINGS = Settings()
