"""Classic algorithm solutions for arrays, strings, linked lists, trees and graphs."""

__version__ = "0.1.0"
__all__ = ["structures", "arrays", "text", "linked", "trees", "graphs"]