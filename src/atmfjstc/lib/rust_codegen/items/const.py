from typing import List, Optional

from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.comment import render_prefixed_lines
from atmfjstc.lib.rust_codegen.items.type import Type, TypeLike, as_type


class Const(Item):
    """
    A constant definition, e.g. ``pub const MAX_SIZE: usize = 1024;``

    The value is given as source text and rendered verbatim.
    """
    name: str
    ty: Type
    value: str
    documentation: List[str]
    visibility: Optional[str] = None

    def __init__(self, name: str, ty: TypeLike, value: str):
        self.name = name
        self.ty = as_type(ty)
        self.value = value
        self.documentation = []
        self.visibility = None

    def doc(self, documentation: List[str]) -> 'Const':
        self.documentation = list(documentation)
        return self

    def vis(self, visibility: Optional[str]) -> 'Const':
        self.visibility = visibility
        return self

    def render(self, fmt):
        render_prefixed_lines(fmt, '///', self.documentation)

        if self.visibility is not None:
            fmt.write(f"{self.visibility} ")

        fmt.write(f"const {self.name}: ")
        self.ty.render(fmt)
        fmt.write_line(f" = {self.value};")
