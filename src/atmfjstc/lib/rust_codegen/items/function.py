from typing import List, Optional, Union

from atmfjstc.lib.ez_repr import EZRepr
from atmfjstc.lib.py_lang_utils.iteration import iter_with_first

from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.docs import Docs
from atmfjstc.lib.rust_codegen.items.fields import Field
from atmfjstc.lib.rust_codegen.items.type import Bound, Type, TypeLike, as_type, render_bounds, render_generics


class Block(EZRepr):
    """
    A braced block of code inside a function body, optionally preceded and/or followed by some text on the same lines
    as the braces, e.g.::

        if x > 0 {
            ...
        } else
    """
    before: Optional[str] = None
    after: Optional[str] = None
    body: List['BodyItem']

    def __init__(self, before: Optional[str] = None):
        self.before = before
        self.after = None
        self.body = []

    def line(self, line: str) -> 'Block':
        self.body.append(line)
        return self

    def push_block(self, block: 'Block') -> 'Block':
        self.body.append(block)
        return self

    def set_after(self, after: str) -> 'Block':
        self.after = after
        return self

    def render(self, fmt: Formatter):
        if self.before is not None:
            fmt.write(self.before)

        fmt.block(lambda f: render_body(f, self.body), tail=self.after or '')


BodyItem = Union[str, Block]


def render_body(fmt: Formatter, body: List[BodyItem]):
    for item in body:
        if isinstance(item, Block):
            item.render(fmt)
        else:
            fmt.write_line(item)


class Function(Item):
    """
    A function definition.

    Functions are used both standalone and as members of traits and impl blocks. A new function starts out with an
    empty body. Functions created through `Trait.new_fn` start out without one instead, and render as a declaration
    ending in ``;`` until a line is added. Trait members may not have a visibility.
    """
    name: str
    docs: Optional[Docs] = None
    allow_lint: Optional[str] = None
    visibility: Optional[str] = None
    generics: List[str]
    arg_self: Optional[str] = None
    args: List[Field]
    ret: Optional[Type] = None
    bounds: List[Bound]
    body: Optional[List[BodyItem]]
    attributes: List[str]
    extern_abi: Optional[str] = None
    is_async: bool = False

    def __init__(self, name: str):
        self.name = name
        self.docs = None
        self.allow_lint = None
        self.visibility = None
        self.generics = []
        self.arg_self = None
        self.args = []
        self.ret = None
        self.bounds = []
        self.body = []
        self.attributes = []
        self.extern_abi = None
        self.is_async = False

    def doc(self, docs: str) -> 'Function':
        self.docs = Docs(docs)
        return self

    def allow(self, allow: str) -> 'Function':
        self.allow_lint = allow
        return self

    def vis(self, visibility: Optional[str]) -> 'Function':
        self.visibility = visibility
        return self

    def set_async(self, is_async: bool) -> 'Function':
        self.is_async = is_async
        return self

    def generic(self, name: str) -> 'Function':
        self.generics.append(name)
        return self

    def arg_ref_self(self) -> 'Function':
        self.arg_self = '&self'
        return self

    def arg_mut_self(self) -> 'Function':
        self.arg_self = '&mut self'
        return self

    def arg_owned_self(self) -> 'Function':
        self.arg_self = 'self'
        return self

    def arg(self, name: str, ty: TypeLike) -> 'Function':
        self.args.append(Field(name, ty))
        return self

    def set_ret(self, ty: TypeLike) -> 'Function':
        self.ret = as_type(ty)
        return self

    def bound(self, name: str, ty: TypeLike) -> 'Function':
        self.bounds.append(Bound(name, [as_type(ty)]))
        return self

    def line(self, line: str) -> 'Function':
        self._body_list().append(line)
        return self

    def push_block(self, block: Block) -> 'Function':
        self._body_list().append(block)
        return self

    def attr(self, attribute: str) -> 'Function':
        self.attributes.append(attribute)
        return self

    def set_extern_abi(self, abi: str) -> 'Function':
        self.extern_abi = abi
        return self

    def _body_list(self) -> List[BodyItem]:
        if self.body is None:
            self.body = []
        return self.body

    def render(self, fmt):
        self.render_member(fmt, is_trait=False)

    def render_member(self, fmt: Formatter, is_trait: bool):
        """
        Renders the function, either as a free function / impl member, or (if `is_trait` is True) as a trait member.
        """
        if is_trait and (self.visibility is not None):
            raise ValueError(f"Trait function '{self.name}' cannot have a visibility modifier")

        if self.docs is not None:
            self.docs.render(fmt)

        if self.allow_lint is not None:
            fmt.write_line(f"#[allow({self.allow_lint})]")

        for attribute in self.attributes:
            fmt.write_line(f"#[{attribute}]")

        if self.visibility is not None:
            fmt.write(f"{self.visibility} ")

        if self.extern_abi is not None:
            fmt.write(f'extern "{self.extern_abi}" ')

        if self.is_async:
            fmt.write('async ')

        fmt.write(f"fn {self.name}")
        render_generics(fmt, self.generics)

        fmt.write('(')
        if self.arg_self is not None:
            fmt.write(self.arg_self)
        for arg, is_first in iter_with_first(self.args):
            if (not is_first) or (self.arg_self is not None):
                fmt.write(', ')
            fmt.write(f"{arg.name}: ")
            arg.ty.render(fmt)
        fmt.write(')')

        if self.ret is not None:
            fmt.write(' -> ')
            self.ret.render(fmt)

        render_bounds(fmt, self.bounds)

        if self.body is None:
            fmt.write_line(';')
        else:
            fmt.block(lambda f: render_body(f, self.body))
