"""Tests for the author checklist registry."""

from __future__ import annotations

from pathlib import Path

from authorcheck.checklist import CHECKLIST_ITEMS, render_checklist


def test_checklist_items_are_fixed_and_ordered() -> None:
    assert isinstance(CHECKLIST_ITEMS, tuple)
    assert len(CHECKLIST_ITEMS) == 10
    assert CHECKLIST_ITEMS[0] == "I verified that similar component doesn't exist in the codebase"
    assert CHECKLIST_ITEMS[-1].startswith("I verified that each component has the minimum amount of code")


def test_render_checklist_produces_task_list() -> None:
    rendered = render_checklist()
    lines = rendered.splitlines()

    assert len(lines) == len(CHECKLIST_ITEMS)
    assert all(line.startswith("- [ ] ") for line in lines)
    assert lines[2] == "- [ ] I verified that each file is named correctly"
    assert "`onClick={this.submit}`" in rendered


def test_render_checklist_with_custom_items() -> None:
    assert render_checklist(["first", "second"]) == "- [ ] first\n- [ ] second\n"
    assert render_checklist([]) == ""


def test_render_checklist_honours_templates_dir(tmp_path: Path) -> None:
    (tmp_path / "checklist.md.j2").write_text(
        "{% for item in items %}\n* {{ item }}\n{% endfor %}\n", encoding="utf-8"
    )

    assert render_checklist(["one"], templates_dir=tmp_path) == "* one\n"
