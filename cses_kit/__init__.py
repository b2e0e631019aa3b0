"""Solutions to CSES introductory and dynamic-programming problems, with a command line solver."""

__version__ = "0.1.0"
__all__ = ["cli", "dynamic", "intro_math", "intro_search"]