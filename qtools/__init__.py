"""BNF grammar reading, transformation and analysis tools, and a cQASM program model with semantic checks."""

__version__ = "0.1.0"