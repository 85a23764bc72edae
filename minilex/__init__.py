"""Shell command-line lexing: expansion, tokenizing, syntax checks and string helpers."""

__version__ = "0.1.0"
__all__ = ["__version__"]