from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from atmfjstc.lib.ez_repr import EZRepr

from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.items.docs import Docs
from atmfjstc.lib.rust_codegen.items.type import Bound, Type, TypeLike, as_type, render_bounds, render_type_list


@dataclass(repr=False)
class TypeDef(EZRepr):
    """
    The part shared by all type declarations (structs, enums, traits): the declared type, its visibility, docs,
    attributes and ``where`` bounds.
    """
    ty: Type
    visibility: Optional[str] = None
    docs: Optional[Docs] = None
    derive: List[str] = field(default_factory=list)
    allow: List[str] = field(default_factory=list)
    repr: Optional[str] = None
    bounds: List[Bound] = field(default_factory=list)
    macros: List[str] = field(default_factory=list)

    def __post_init__(self):
        self.ty = as_type(self.ty)

    def render_head(self, fmt: Formatter, keyword: str, parents: Sequence[Type] = ()):
        """
        Renders the declaration up to (but not including) the body, e.g. ``#[derive(Debug)]\\npub struct Foo<T>``.

        The output is left in the middle of the line, so the caller can follow up with a block or a semicolon.
        """
        if self.docs is not None:
            self.docs.render(fmt)

        for allow in self.allow:
            fmt.write_line(f"#[allow({allow})]")

        if len(self.derive) > 0:
            fmt.write_line(f"#[derive({', '.join(self.derive)})]")

        if self.repr is not None:
            fmt.write_line(f"#[repr({self.repr})]")

        for macro in self.macros:
            fmt.write_line(macro)

        if self.visibility is not None:
            fmt.write(f"{self.visibility} ")

        fmt.write(f"{keyword} ")
        self.ty.render(fmt)

        render_type_list(fmt, parents, ': ', ' + ', '')
        render_bounds(fmt, self.bounds)


class TypeDefItem:
    """
    Mixin providing the fluent configuration methods common to all items that wrap a `TypeDef` in `type_def`.
    """
    type_def: TypeDef

    @property
    def ty(self) -> Type:
        return self.type_def.ty

    def vis(self, visibility: Optional[str]):
        self.type_def.visibility = visibility
        return self

    def generic(self, name: str):
        self.type_def.ty.generic(name)
        return self

    def bound(self, name: str, ty: TypeLike):
        self.type_def.bounds.append(Bound(name, [as_type(ty)]))
        return self

    def doc(self, docs: str):
        self.type_def.docs = Docs(docs)
        return self

    def derive(self, name: str):
        self.type_def.derive.append(name)
        return self

    def allow(self, allow: str):
        self.type_def.allow.append(allow)
        return self

    def repr(self, repr: str):
        self.type_def.repr = repr
        return self

    def add_macro(self, macro: str):
        self.type_def.macros.append(macro)
        return self
