from typing import List

from atmfjstc.lib.py_lang_utils.iteration import iter_with_first

from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.function import Function
from atmfjstc.lib.rust_codegen.items.type import Bound, Type, TypeLike, as_type, render_bound_rhs
from atmfjstc.lib.rust_codegen.items.type_def import TypeDef, TypeDefItem


class AssociatedType(Bound):
    """An associated type declared by a trait, e.g. ``type Item: Clone;``"""

    def add_bound(self, ty: TypeLike) -> 'AssociatedType':
        self.bound.append(as_type(ty))
        return self


class Trait(TypeDefItem, Item):
    """
    A trait declaration. Associated types are rendered first, followed by the functions, separated by blank lines.
    """
    type_def: TypeDef
    parents: List[Type]
    associated_tys: List[AssociatedType]
    fns: List[Function]

    def __init__(self, name: str):
        self.type_def = TypeDef(Type(name))
        self.parents = []
        self.associated_tys = []
        self.fns = []

    def parent(self, ty: TypeLike) -> 'Trait':
        self.parents.append(as_type(ty))
        return self

    def associated_type(self, name: str) -> AssociatedType:
        associated_ty = AssociatedType(name)
        self.associated_tys.append(associated_ty)
        return associated_ty

    def new_fn(self, name: str) -> Function:
        func = Function(name)
        func.body = None
        self.push_fn(func)
        return func

    def push_fn(self, item: Function) -> 'Trait':
        self.fns.append(item)
        return self

    def render(self, fmt):
        self.type_def.render_head(fmt, 'trait', self.parents)
        fmt.block(self._render_members)

    def _render_members(self, fmt: Formatter):
        for associated_ty in self.associated_tys:
            fmt.write(f"type {associated_ty.name}")
            if len(associated_ty.bound) > 0:
                fmt.write(': ')
                render_bound_rhs(fmt, associated_ty.bound)
            fmt.write_line(';')

        for func, is_first in iter_with_first(self.fns):
            if (not is_first) or (len(self.associated_tys) > 0):
                fmt.write_line()
            func.render_member(fmt, is_trait=True)
