from dataclasses import dataclass

from atmfjstc.lib.rust_codegen.items.base import Item


@dataclass(repr=False)
class Raw(Item):
    """
    Verbatim text that will be rendered as-is (save for indentation), followed by a newline.
    """
    text: str

    def render(self, fmt):
        fmt.write_line(self.text)
