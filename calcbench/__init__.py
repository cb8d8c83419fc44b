"""Polynomial arithmetic, infix expression evaluation and social-graph analysis."""

__version__ = "0.1.0"
__all__ = ["polynomial", "expression", "social_graph"]