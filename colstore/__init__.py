"""Typed in-memory column tables with relational operators, and an employee registry with a command shell."""

__version__ = "0.1.0"
__all__ = ["__version__"]