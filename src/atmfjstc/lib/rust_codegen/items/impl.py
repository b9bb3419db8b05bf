from typing import List, Optional

from atmfjstc.lib.py_lang_utils.iteration import iter_with_first

from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.fields import Field
from atmfjstc.lib.rust_codegen.items.function import Function
from atmfjstc.lib.rust_codegen.items.type import Bound, Type, TypeLike, as_type, render_bounds, render_generics


class Impl(Item):
    """
    An ``impl`` block, either inherent (``impl Foo``) or for a trait (``impl Display for Foo``).
    """
    target: Type
    generics: List[str]
    trait_ty: Optional[Type] = None
    assoc_tys: List[Field]
    bounds: List[Bound]
    fns: List[Function]
    macros: List[str]

    def __init__(self, target: TypeLike):
        self.target = as_type(target)
        self.generics = []
        self.trait_ty = None
        self.assoc_tys = []
        self.bounds = []
        self.fns = []
        self.macros = []

    def generic(self, name: str) -> 'Impl':
        self.generics.append(name)
        return self

    def target_generic(self, ty: TypeLike) -> 'Impl':
        self.target.generic(ty)
        return self

    def impl_trait(self, ty: TypeLike) -> 'Impl':
        self.trait_ty = as_type(ty)
        return self

    def add_macro(self, macro: str) -> 'Impl':
        self.macros.append(macro)
        return self

    def associate_type(self, name: str, ty: TypeLike) -> 'Impl':
        self.assoc_tys.append(Field(name, ty))
        return self

    def bound(self, name: str, ty: TypeLike) -> 'Impl':
        self.bounds.append(Bound(name, [as_type(ty)]))
        return self

    def new_fn(self, name: str) -> Function:
        func = Function(name)
        self.push_fn(func)
        return func

    def push_fn(self, item: Function) -> 'Impl':
        self.fns.append(item)
        return self

    def render(self, fmt):
        for macro in self.macros:
            fmt.write_line(macro)

        fmt.write('impl')
        render_generics(fmt, self.generics)

        if self.trait_ty is not None:
            fmt.write(' ')
            self.trait_ty.render(fmt)
            fmt.write(' for')

        fmt.write(' ')
        self.target.render(fmt)

        render_bounds(fmt, self.bounds)

        fmt.block(self._render_members)

    def _render_members(self, fmt: Formatter):
        for assoc_ty in self.assoc_tys:
            fmt.write(f"type {assoc_ty.name} = ")
            assoc_ty.ty.render(fmt)
            fmt.write_line(';')

        for func, is_first in iter_with_first(self.fns):
            if (not is_first) or (len(self.assoc_tys) > 0):
                fmt.write_line()
            func.render_member(fmt, is_trait=False)
