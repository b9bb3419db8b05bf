import logging

from typing import Dict, List, Optional

from atmfjstc.lib.ez_repr import EZRepr
from atmfjstc.lib.py_lang_utils.iteration import iter_with_first
from atmfjstc.lib.py_lang_utils.nested_dict import get_or_init_in_nested_dict
from atmfjstc.lib.py_lang_utils.unique import dedup
from atmfjstc.lib.text_utils import check_nonempty_str, check_single_line

from atmfjstc.lib.rust_codegen.errors import DuplicateModuleError
from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.RenderOptions import RenderOptions
from atmfjstc.lib.rust_codegen.items.base import Item
from atmfjstc.lib.rust_codegen.items.comment import Comment
from atmfjstc.lib.rust_codegen.items.const import Const
from atmfjstc.lib.rust_codegen.items.docs import Docs
from atmfjstc.lib.rust_codegen.items.enums import Enum
from atmfjstc.lib.rust_codegen.items.function import Function
from atmfjstc.lib.rust_codegen.items.impl import Impl
from atmfjstc.lib.rust_codegen.items.imports import Import
from atmfjstc.lib.rust_codegen.items.license import License
from atmfjstc.lib.rust_codegen.items.raw import Raw
from atmfjstc.lib.rust_codegen.items.struct import Struct
from atmfjstc.lib.rust_codegen.items.trait import Trait
from atmfjstc.lib.rust_codegen.items.type import TypeLike


LOG = logging.getLogger(__name__)


class Scope(EZRepr):
    """
    The root container for generated code: an ordered list of items, plus the imports, docs and license that go at
    the top.

    The rendering consists of, in order:

    - The license header, if any (it ends in a blank line of its own)
    - The docs, if any
    - The ``use`` statements for all imports, followed by a blank line (only if there are any imports)
    - All the items, in the order they were added, separated by exactly one blank line

    Items are added either by the ``new_*`` methods, which create the item and return it so that it can be configured
    further, or by the ``push_*`` methods, which take a ready-made item and return the scope, for chaining.
    """
    docs_: Optional[Docs] = None
    license_: Optional[License] = None
    imports: Dict[str, Dict[str, Import]]
    items: List[Item]

    def __init__(self):
        self.docs_ = None
        self.license_ = None
        self.imports = dict()
        self.items = []

    def docs(self, docs: Docs) -> 'Scope':
        self.docs_ = docs
        return self

    def license(self, license: License) -> 'Scope':
        self.license_ = license
        return self

    def import_(self, path: str, ty: str) -> Import:
        """
        Imports a type into the scope and returns the corresponding `Import` record.

        Importing the same type from the same path again returns the existing record, so attributes such as the
        visibility can be set on it at any time. If `ty` is itself a path (e.g. ``'fmt::Display'``), only its first
        segment is imported.
        """
        check_nonempty_str(check_single_line(path, 'import path'), 'import path')

        ty = check_nonempty_str(ty.split('::')[0], 'import type')

        return get_or_init_in_nested_dict(self.imports, [path, ty], lambda: Import(path, ty))

    def new_const(self, name: str, ty: TypeLike, value: str) -> Const:
        const = Const(name, ty, value)
        self.push_const(const)
        return const

    def push_const(self, item: Const) -> 'Scope':
        self.items.append(item)
        return self

    def new_module(self, name: str) -> 'Module':
        """
        Creates a new module in this scope and returns it.

        Raises `DuplicateModuleError` if a module with the same name already exists here. Consider using
        `get_or_new_module` instead.
        """
        module = Module(name)
        self.push_module(module)
        return module

    def get_module(self, name: str) -> Optional['Module']:
        for item in self.items:
            if isinstance(item, Module) and (item.name == name):
                return item

        return None

    def get_module_mut(self, name: str) -> Optional['Module']:
        """Same as `get_module`. The returned module is live, so changes made to it are reflected in this scope."""
        return self.get_module(name)

    def get_or_new_module(self, name: str) -> 'Module':
        module = self.get_module(name)
        if module is not None:
            return module

        return self.new_module(name)

    def push_module(self, item: 'Module') -> 'Scope':
        """
        Adds a module to this scope.

        Raises `DuplicateModuleError` if a module with the same name already exists here.
        """
        if self.get_module(item.name) is not None:
            raise DuplicateModuleError(item.name)

        self.items.append(item)
        return self

    def new_struct(self, name: str) -> Struct:
        struct = Struct(name)
        self.push_struct(struct)
        return struct

    def push_struct(self, item: Struct) -> 'Scope':
        self.items.append(item)
        return self

    def new_fn(self, name: str) -> Function:
        func = Function(name)
        self.push_fn(func)
        return func

    def push_fn(self, item: Function) -> 'Scope':
        self.items.append(item)
        return self

    def new_trait(self, name: str) -> Trait:
        trait = Trait(name)
        self.push_trait(trait)
        return trait

    def push_trait(self, item: Trait) -> 'Scope':
        self.items.append(item)
        return self

    def new_enum(self, name: str) -> Enum:
        enum = Enum(name)
        self.push_enum(enum)
        return enum

    def push_enum(self, item: Enum) -> 'Scope':
        self.items.append(item)
        return self

    def new_comment(self, comment: str) -> Comment:
        item = Comment(comment)
        self.push_comment(item)
        return item

    def push_comment(self, item: Comment) -> 'Scope':
        self.items.append(item)
        return self

    def new_impl(self, target: TypeLike) -> Impl:
        impl = Impl(target)
        self.push_impl(impl)
        return impl

    def push_impl(self, item: Impl) -> 'Scope':
        self.items.append(item)
        return self

    def raw(self, text: str) -> 'Scope':
        """Adds some text that will be included verbatim in the output."""
        self.items.append(Raw(text))
        return self

    def render(self, fmt: Formatter):
        if self.license_ is not None:
            self.license_.render(fmt)

        if self.docs_ is not None:
            self.docs_.render(fmt)

        self._render_imports(fmt)

        if len(self.imports) > 0:
            fmt.write_line()

        for item, is_first in iter_with_first(self.items):
            if not is_first:
                fmt.write_line()

            item.render(fmt)

    def _render_imports(self, fmt: Formatter):
        visibilities = dedup(
            imp.visibility for imports_by_type in self.imports.values() for imp in imports_by_type.values()
        )

        for visibility in visibilities:
            for path, imports_by_type in self.imports.items():
                tys = [ty for ty, imp in imports_by_type.items() if imp.visibility == visibility]

                if len(tys) == 0:
                    continue

                if visibility is not None:
                    fmt.write(f"{visibility} ")

                if len(tys) == 1:
                    fmt.write_line(f"use {path}::{tys[0]};")
                else:
                    fmt.write_line(f"use {path}::{{{', '.join(tys)}}};")

    def to_string(self, options: Optional[RenderOptions] = None) -> str:
        """
        Renders the scope to a string.

        The rendering always ends in a newline internally; that final newline is removed from the returned text.
        """
        LOG.debug("Rendering scope with %d item(s) and %d import path(s)", len(self.items), len(self.imports))

        fmt = Formatter(options=options)
        self.render(fmt)

        text = fmt.getvalue()

        return text[:-1] if text.endswith('\n') else text

    def __str__(self):
        return self.to_string()


class Module(Item):
    """
    A named module (``mod name { ... }``) with its own nested scope.

    The module offers shortcuts for the most common scope operations, which act on its nested scope.
    """
    name: str
    visibility: Optional[str] = None
    docs: Optional[Docs] = None
    scope: Scope
    attributes: List[str]

    def __init__(self, name: str):
        self.name = check_nonempty_str(check_single_line(name, 'module name'), 'module name')
        self.visibility = None
        self.docs = None
        self.scope = Scope()
        self.attributes = []

    def vis(self, visibility: Optional[str]) -> 'Module':
        self.visibility = visibility
        return self

    def doc(self, docs: str) -> 'Module':
        self.docs = Docs(docs)
        return self

    def attr(self, attribute: str) -> 'Module':
        self.attributes.append(attribute)
        return self

    def import_(self, path: str, ty: str) -> 'Module':
        self.scope.import_(path, ty)
        return self

    def new_module(self, name: str) -> 'Module':
        return self.scope.new_module(name)

    def get_module(self, name: str) -> Optional['Module']:
        return self.scope.get_module(name)

    def get_module_mut(self, name: str) -> Optional['Module']:
        return self.scope.get_module_mut(name)

    def get_or_new_module(self, name: str) -> 'Module':
        return self.scope.get_or_new_module(name)

    def push_module(self, item: 'Module') -> 'Module':
        self.scope.push_module(item)
        return self

    def new_struct(self, name: str) -> Struct:
        return self.scope.new_struct(name)

    def push_struct(self, item: Struct) -> 'Module':
        self.scope.push_struct(item)
        return self

    def new_fn(self, name: str) -> Function:
        return self.scope.new_fn(name)

    def push_fn(self, item: Function) -> 'Module':
        self.scope.push_fn(item)
        return self

    def new_enum(self, name: str) -> Enum:
        return self.scope.new_enum(name)

    def push_enum(self, item: Enum) -> 'Module':
        self.scope.push_enum(item)
        return self

    def new_impl(self, target: TypeLike) -> Impl:
        return self.scope.new_impl(target)

    def push_impl(self, item: Impl) -> 'Module':
        self.scope.push_impl(item)
        return self

    def push_trait(self, item: Trait) -> 'Module':
        self.scope.push_trait(item)
        return self

    def render(self, fmt):
        if self.docs is not None:
            self.docs.render(fmt)

        for attribute in self.attributes:
            fmt.write_line(f"#[{attribute}]")

        if self.visibility is not None:
            fmt.write(f"{self.visibility} ")

        fmt.write(f"mod {self.name}")
        fmt.block(self.scope.render)
