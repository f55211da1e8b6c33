"""Tests for the tree-sitter source parser."""

from __future__ import annotations

import pytest

from authorcheck.parsing import ParseError, SyntaxParser


def test_parser_parses_jsx_module() -> None:
    source = "import React from 'react';\n\nfunction Foo() {\n    return <div className=\"foo\" />;\n}\n"

    tree = SyntaxParser().parse(source, "src/Foo.jsx")

    assert tree.filename == "src/Foo.jsx"
    assert tree.root.type == "program"
    kinds = [node.type for node in tree.top_level_statements()]
    assert kinds == ["import_statement", "function_declaration"]


def test_parser_accepts_type_annotations() -> None:
    source = """
interface Props {
    name: string;
}

export default function Greeting({name}: Props): JSX.Element {
    return <span>{name}</span>;
}
"""

    tree = SyntaxParser().parse(source, "src/Greeting.tsx")

    assert [node.type for node in tree.top_level_statements()] == [
        "interface_declaration",
        "export_statement",
    ]


def test_parser_accepts_plain_javascript() -> None:
    tree = SyntaxParser().parse("module.exports = {add: (a, b) => a + b};\n", "lib/add.js")

    assert not tree.root.has_error


def test_top_level_statements_skip_comments() -> None:
    tree = SyntaxParser().parse("// header\nconst a = 1;\n/* trailing */\n", "a.js")

    assert [node.type for node in tree.top_level_statements()] == ["lexical_declaration"]


def test_syntax_tree_returns_node_text() -> None:
    tree = SyntaxParser().parse("function Foo() { return 1; }\n", "a.js")
    declaration = next(tree.top_level_statements())

    assert tree.text(declaration.child_by_field_name("name")) == "Foo"


def test_parser_raises_on_unbalanced_braces() -> None:
    with pytest.raises(ParseError) as excinfo:
        SyntaxParser().parse("function Foo() {\n    return <div/>;\n", "src/Broken.jsx")

    error = excinfo.value
    assert error.filename == "src/Broken.jsx"
    assert error.line >= 1
    assert error.column >= 1
    assert "src/Broken.jsx" in str(error)


def test_parser_reports_error_location() -> None:
    source = "const ok = 1;\nconst broken = ;\n"

    with pytest.raises(ParseError) as excinfo:
        SyntaxParser().parse(source, "broken.js")

    assert excinfo.value.line == 2


def test_parser_instance_is_reusable_after_error() -> None:
    parser = SyntaxParser()
    with pytest.raises(ParseError):
        parser.parse("function {", "bad.js")

    tree = parser.parse("function good() {}\n", "good.js")

    assert tree.root.type == "program"
