"""Author checklist surfaced when a pull request adds a new component."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

from jinja2 import Environment, FileSystemLoader

CHECKLIST_ITEMS: tuple[str, ...] = (
    "I verified that similar component doesn't exist in the codebase",
    "I verified that all props are defined accurately and each prop has a `/** comment above it */`",
    "I verified that each file is named correctly",
    "I verified that each component has a clear name that is non-ambiguous and the purpose of the component can be inferred from the name alone",
    "I verified that the only data being stored in component state is data necessary for rendering and nothing else",
    "In component if we are not using the full Onyx data that we loaded, I've added the proper selector in order to ensure the component only re-renders when the data it is using changes",
    "For Class Components, any internal methods passed to components event handlers are bound to `this` properly so there are no scoping issues (i.e. for `onClick={this.submit}` the method `this.submit` should be bound to `this` in the constructor)",
    "I verified that component internal methods bound to `this` are necessary to be bound (i.e. avoid `this.submit = this.submit.bind(this);` if `this.submit` is never passed to a component event handler like `onClick`)",
    "I verified that all JSX used for rendering exists in the render method",
    "I verified that each component has the minimum amount of code necessary for its purpose, and it is broken down into smaller components in order to separate concerns and functions",
)

TEMPLATES_DIR = Path(__file__).with_name("templates")
CHECKLIST_TEMPLATE = "checklist.md.j2"


def render_checklist(
    items: Sequence[str] = CHECKLIST_ITEMS,
    *,
    templates_dir: Path | None = None,
) -> str:
    """Render checklist items as a Markdown task list."""
    env = Environment(
        loader=FileSystemLoader(str(templates_dir or TEMPLATES_DIR)),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
        keep_trailing_newline=True,
    )
    template = env.get_template(CHECKLIST_TEMPLATE)
    return template.render(items=list(items))


__all__ = ["CHECKLIST_ITEMS", "render_checklist"]
