"""Source parsing and component classification."""

from .classifier import ComponentClassifier
from .parser import ParseError, SyntaxParser, SyntaxTree

__all__ = ["ComponentClassifier", "ParseError", "SyntaxParser", "SyntaxTree"]
