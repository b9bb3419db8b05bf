from dataclasses import dataclass, field
from typing import List, Sequence, Union

from atmfjstc.lib.ez_repr import EZRepr
from atmfjstc.lib.py_lang_utils.iteration import iter_with_first
from atmfjstc.lib.text_utils import check_single_line

from atmfjstc.lib.rust_codegen.Formatter import Formatter


@dataclass(repr=False)
class Type(EZRepr):
    """
    A reference to a type, e.g. ``HashMap<String, Vec<u8>>``.

    The name may contain a path (``std::io::Error``) but not generic arguments; those are added with `generic`.
    """
    name: str
    generics: List['Type'] = field(default_factory=list)

    def __post_init__(self):
        check_single_line(self.name, 'type name')

    def generic(self, ty: 'TypeLike') -> 'Type':
        if '<' in self.name:
            raise ValueError(f"Type name '{self.name}' already includes generics")

        self.generics.append(as_type(ty))
        return self

    def path(self, path: str) -> 'Type':
        """Returns a copy of this type, qualified with a path."""
        if '::' in self.name:
            raise ValueError(f"Type name '{self.name}' is already qualified with a path")

        return Type(f"{path}::{self.name}", list(self.generics))

    def render(self, fmt: Formatter):
        fmt.write(self.name)
        render_type_list(fmt, self.generics, '<', ', ', '>')


TypeLike = Union[str, Type]


def as_type(value: TypeLike) -> Type:
    return value if isinstance(value, Type) else Type(value)


@dataclass(repr=False)
class Bound(EZRepr):
    """A ``name: A + B`` constraint, as it appears in a ``where`` clause or on an associated type."""
    name: str
    bound: List[Type] = field(default_factory=list)


def render_type_list(fmt: Formatter, types: Sequence[Type], head: str, joiner: str, tail: str):
    """Renders a list of types with a head, separator and tail. Renders nothing at all if the list is empty."""
    if len(types) == 0:
        return

    fmt.write(head)
    for ty, is_first in iter_with_first(types):
        if not is_first:
            fmt.write(joiner)
        ty.render(fmt)
    fmt.write(tail)


def render_generics(fmt: Formatter, generics: Sequence[str]):
    if len(generics) > 0:
        fmt.write('<' + ', '.join(generics) + '>')


def render_bound_rhs(fmt: Formatter, types: Sequence[Type]):
    render_type_list(fmt, types, '', ' + ', '')


def render_bounds(fmt: Formatter, bounds: Sequence[Bound]):
    """
    Renders a ``where`` clause, starting on a new line, with one bound per line. Renders nothing if there are no
    bounds.
    """
    if len(bounds) == 0:
        return

    fmt.write('\n')
    fmt.write_line('where')

    with fmt.indented():
        for bound in bounds:
            fmt.write(f"{bound.name}: ")
            render_bound_rhs(fmt, bound.bound)
            fmt.write_line(',')
