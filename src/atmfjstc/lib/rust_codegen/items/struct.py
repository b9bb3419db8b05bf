from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.fields import Field, Fields
from atmfjstc.lib.rust_codegen.items.type import Type, TypeLike
from atmfjstc.lib.rust_codegen.items.type_def import TypeDef, TypeDefItem


class Struct(TypeDefItem, Item):
    """
    A struct declaration. Depending on the fields added, it renders as a unit struct (``struct Foo;``), a tuple struct
    (``struct Foo(A, B);``) or a struct with named fields.
    """
    type_def: TypeDef
    fields: Fields

    def __init__(self, name: str):
        self.type_def = TypeDef(Type(name))
        self.fields = Fields()

    def push_field(self, field: Field) -> 'Struct':
        self.fields.push_named(field)
        return self

    def field(self, name: str, ty: TypeLike) -> 'Struct':
        return self.push_field(Field(name, ty))

    def new_field(self, name: str, ty: TypeLike) -> Field:
        """Adds a named field and returns it, so it can be further configured (docs, visibility etc.)"""
        field = Field(name, ty)
        self.push_field(field)
        return field

    def tuple_field(self, ty: TypeLike) -> 'Struct':
        self.fields.push_tuple(ty)
        return self

    def render(self, fmt):
        self.type_def.render_head(fmt, 'struct')
        self.fields.render(fmt)

        if self.fields.is_empty() or self.fields.is_tuple():
            fmt.write_line(';')
