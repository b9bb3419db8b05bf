from dataclasses import dataclass

from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.comment import render_prefixed_lines


@dataclass(repr=False)
class Docs(Item):
    """A ``///`` documentation block."""
    text: str

    def render(self, fmt):
        render_prefixed_lines(fmt, '///', self.text.splitlines())
