"""Tree-sitter parser for JavaScript/TypeScript sources with JSX."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

import tree_sitter_typescript
from tree_sitter import Language, Node, Parser, Tree

# The TSX grammar accepts plain JavaScript, JSX and type annotations in one pass.
TSX_LANGUAGE = Language(tree_sitter_typescript.language_tsx())


class ParseError(RuntimeError):
    """Raised when source text cannot be parsed without syntax errors."""

    def __init__(self, filename: str, line: int, column: int) -> None:
        super().__init__(f"Syntax error in {filename} at line {line}, column {column}")
        self.filename = filename
        self.line = line
        self.column = column


@dataclass
class SyntaxTree:
    """Parsed representation of one source file."""

    filename: str
    source: bytes
    tree: Tree

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def top_level_statements(self) -> Iterator[Node]:
        for child in self.root.named_children:
            if child.type != "comment":
                yield child

    def text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")


class SyntaxParser:
    """Parses module source text into a :class:`SyntaxTree`."""

    def __init__(self) -> None:
        self._parser: Optional[Parser] = None

    def parse(self, source: str, filename: str = "<source>") -> SyntaxTree:
        source_bytes = source.encode("utf-8")
        tree = self._get_parser().parse(source_bytes)
        if tree.root_node.has_error:
            line, column = _first_error_position(tree.root_node)
            raise ParseError(filename, line, column)
        return SyntaxTree(filename=filename, source=source_bytes, tree=tree)

    def _get_parser(self) -> Parser:
        if self._parser is None:
            self._parser = Parser(TSX_LANGUAGE)
        return self._parser


def _first_error_position(node: Node) -> tuple[int, int]:
    error = _find_error(node)
    row, column = (error or node).start_point
    return row + 1, column + 1


def _find_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node
    if not node.has_error:
        return None
    for child in node.children:
        found = _find_error(child)
        if found is not None:
            return found
    return None


__all__ = ["ParseError", "SyntaxParser", "SyntaxTree", "TSX_LANGUAGE"]
