"""Decide whether a parsed module declares a React-style function component."""

from __future__ import annotations

from typing import Iterator, Optional

from tree_sitter import Node

from ..logging import get_logger
from .parser import SyntaxTree

logger = get_logger("parsing.classifier")

_FUNCTION_DECLARATIONS = {"function_declaration", "generator_function_declaration"}
_JSX_ELEMENTS = {"jsx_element", "jsx_self_closing_element"}


class ComponentClassifier:
    """Flags modules with a named top-level function that directly returns JSX.

    Only ``function Name() { ... return <Jsx/>; }`` declarations at module
    level (optionally exported) are considered, and only ``return`` statements
    sitting directly in the function body. Arrow functions, function
    expressions, class components and returns nested in inner blocks are not
    detected.
    """

    def classify(self, tree: SyntaxTree) -> bool:
        for declaration in self._function_declarations(tree):
            name_node = declaration.child_by_field_name("name")
            if name_node is None:
                continue
            if self._returns_jsx(declaration):
                logger.info(
                    "Detected react component %s in file %s",
                    tree.text(name_node),
                    tree.filename,
                )
                return True
        return False

    def _function_declarations(self, tree: SyntaxTree) -> Iterator[Node]:
        for statement in tree.top_level_statements():
            if statement.type == "export_statement":
                declaration = statement.child_by_field_name("declaration")
                if declaration is None:
                    continue
                statement = declaration
            if statement.type in _FUNCTION_DECLARATIONS:
                yield statement

    def _returns_jsx(self, declaration: Node) -> bool:
        body = declaration.child_by_field_name("body")
        if body is None:
            return False
        for statement in body.named_children:
            if statement.type != "return_statement":
                continue
            # A bare `return;` has no argument; later returns are still inspected.
            argument = _unwrap_parentheses(_first_expression(statement))
            if argument is not None and _is_jsx_element(argument):
                return True
        return False


def _first_expression(node: Node) -> Optional[Node]:
    for child in node.named_children:
        if child.type != "comment":
            return child
    return None


def _unwrap_parentheses(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type == "parenthesized_expression":
        node = _first_expression(node)
    return node


def _is_jsx_element(node: Node) -> bool:
    if node.type not in _JSX_ELEMENTS:
        return False
    if node.type == "jsx_element":
        # Fragments (<>...</>) have an opening tag with no name or attributes.
        open_tag = node.named_children[0] if node.named_children else None
        return open_tag is not None and open_tag.named_child_count > 0
    return True


__all__ = ["ComponentClassifier"]
