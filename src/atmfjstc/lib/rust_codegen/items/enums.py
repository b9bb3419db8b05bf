from typing import List

from atmfjstc.lib.ez_repr import EZRepr

from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.fields import Field, Fields
from atmfjstc.lib.rust_codegen.items.type import Type, TypeLike
from atmfjstc.lib.rust_codegen.items.type_def import TypeDef, TypeDefItem


class Variant(EZRepr):
    """An enum variant: unit-like, tuple-like or struct-like depending on the fields added."""
    name: str
    fields: Fields
    annotations: List[str]

    def __init__(self, name: str):
        self.name = name
        self.fields = Fields()
        self.annotations = []

    def named(self, name: str, ty: TypeLike) -> 'Variant':
        self.fields.push_named(Field(name, ty))
        return self

    def tuple(self, ty: TypeLike) -> 'Variant':
        self.fields.push_tuple(ty)
        return self

    def annotation(self, annotation: str) -> 'Variant':
        self.annotations.append(annotation)
        return self

    def render(self, fmt: Formatter):
        for annotation in self.annotations:
            fmt.write_line(annotation)

        fmt.write(self.name)

        if self.fields.is_empty() or self.fields.is_tuple():
            self.fields.render(fmt)
            fmt.write_line(',')
        else:
            self.fields.render(fmt, tail=',')


class Enum(TypeDefItem, Item):
    """An enum declaration."""
    type_def: TypeDef
    variants: List[Variant]

    def __init__(self, name: str):
        self.type_def = TypeDef(Type(name))
        self.variants = []

    def new_variant(self, name: str) -> Variant:
        variant = Variant(name)
        self.push_variant(variant)
        return variant

    def push_variant(self, variant: Variant) -> 'Enum':
        self.variants.append(variant)
        return self

    def render(self, fmt):
        self.type_def.render_head(fmt, 'enum')
        fmt.block(self._render_variants)

    def _render_variants(self, fmt: Formatter):
        for variant in self.variants:
            variant.render(fmt)
