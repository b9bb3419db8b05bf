from dataclasses import dataclass, field
from typing import List, Optional

from atmfjstc.lib.ez_repr import EZRepr

from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.items.comment import render_prefixed_lines
from atmfjstc.lib.rust_codegen.items.type import Type, TypeLike, as_type, render_type_list


@dataclass(repr=False)
class Field(EZRepr):
    """A named field in a struct or struct-like enum variant (also used for function arguments)."""
    name: str
    ty: Type
    documentation: List[str] = field(default_factory=list)
    annotation: List[str] = field(default_factory=list)
    visibility: Optional[str] = None

    def __post_init__(self):
        self.ty = as_type(self.ty)

    def doc(self, documentation: List[str]) -> 'Field':
        self.documentation = list(documentation)
        return self

    def annotate(self, annotation: List[str]) -> 'Field':
        self.annotation = list(annotation)
        return self

    def vis(self, visibility: Optional[str]) -> 'Field':
        self.visibility = visibility
        return self


class Fields(EZRepr):
    """
    The fields of a struct or enum variant. These start out empty, and become either named (``{ a: A, b: B }``) or
    tuple-like (``(A, B)``) depending on which kind of field is pushed first. The two kinds cannot be mixed.
    """
    named_fields: Optional[List[Field]] = None
    tuple_types: Optional[List[Type]] = None

    def __init__(self):
        self.named_fields = None
        self.tuple_types = None

    def is_empty(self) -> bool:
        return (self.named_fields is None) and (self.tuple_types is None)

    def is_tuple(self) -> bool:
        return self.tuple_types is not None

    def push_named(self, named_field: Field) -> 'Fields':
        if self.tuple_types is not None:
            raise ValueError("Cannot add a named field to a tuple-like set of fields")

        if self.named_fields is None:
            self.named_fields = []
        self.named_fields.append(named_field)

        return self

    def push_tuple(self, ty: TypeLike) -> 'Fields':
        if self.named_fields is not None:
            raise ValueError("Cannot add a tuple field to a set of named fields")

        if self.tuple_types is None:
            self.tuple_types = []
        self.tuple_types.append(as_type(ty))

        return self

    def render(self, fmt: Formatter, tail: str = ''):
        """
        Renders the fields. Named fields form a block that ends the line, with `tail` right after the closing brace.
        Tuple fields are rendered inline and `tail` is ignored.
        """
        if self.named_fields is not None:
            fmt.block(self._render_named, tail=tail)
        elif self.tuple_types is not None:
            render_type_list(fmt, self.tuple_types, '(', ', ', ')')

    def _render_named(self, fmt: Formatter):
        for named_field in self.named_fields:
            render_prefixed_lines(fmt, '///', named_field.documentation)

            for annotation in named_field.annotation:
                fmt.write_line(annotation)

            if named_field.visibility is not None:
                fmt.write(f"{named_field.visibility} ")

            fmt.write(f"{named_field.name}: ")
            named_field.ty.render(fmt)
            fmt.write_line(',')
