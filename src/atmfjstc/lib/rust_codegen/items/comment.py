from dataclasses import dataclass
from typing import Iterable

from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.items.base import Item


def render_prefixed_lines(fmt: Formatter, prefix: str, lines: Iterable[str]):
    """
    Writes each line with a comment marker in front of it. Empty lines get the bare marker, with no trailing space.
    """
    for line in lines:
        fmt.write_line((prefix + ' ' + line).rstrip())


@dataclass(repr=False)
class Comment(Item):
    """
    A ``//`` line comment. Multiline text produces one comment line per line of text; there is no reflowing.
    """
    text: str

    def render(self, fmt):
        render_prefixed_lines(fmt, '//', self.text.splitlines())
