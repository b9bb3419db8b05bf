"""
A builder-style model for generating Rust source code.

Rationale
---------

Generating code by pasting together strings works for a handful of lines, but quickly becomes unmanageable once the
structure of the output depends on runtime data. Every renderer has to remember to indent nested bodies correctly,
imports have to be collected from all over the program and deduplicated, and the blank lines between declarations
have to come out right whether a given declaration is generated or not.

This package takes care of all that. Instead of producing text, your program builds an in-memory model of the file:
a `Scope` holding structs, enums, traits, impl blocks, functions, constants, comments and nested modules, plus a table
of imports. The scope is then rendered in a single pass through a `Formatter`, which tracks the indentation of nested
blocks and guarantees that it is restored no matter how a nested renderer exits.

Things the rendering handles for you:

- Imports are deduplicated (importing the same type twice yields the same record) and grouped into one ``use``
  statement per visibility and path, e.g. ``use std::io::{Read, Write};``
- Declarations are separated by exactly one blank line, in the order they were added
- Bodies of structs, functions, traits, impls and modules are indented one level deeper than their declaration
- License headers are generated from templates, with one copyright line per copyright holder


Example
-------

::

    scope = Scope()

    scope.import_('std::fmt', 'Display')

    scope.new_struct('Point').vis('pub').derive('Debug').field('x', 'f64').field('y', 'f64')

    scope.new_impl('Point').new_fn('norm').vis('pub').arg_ref_self().set_ret('f64') \\
        .line('(self.x * self.x + self.y * self.y).sqrt()')

    print(scope.to_string())

Result::

    use std::fmt::Display;

    #[derive(Debug)]
    pub struct Point {
        x: f64,
        y: f64,
    }

    impl Point {
        pub fn norm(&self) -> f64 {
            (self.x * self.x + self.y * self.y).sqrt()
        }
    }
"""

from atmfjstc.lib.rust_codegen.errors import RustCodegenError, DuplicateModuleError
from atmfjstc.lib.rust_codegen.Formatter import Formatter
from atmfjstc.lib.rust_codegen.RenderOptions import RenderOptions
from atmfjstc.lib.rust_codegen.scope import Scope, Module
from atmfjstc.lib.rust_codegen.items.comment import Comment
from atmfjstc.lib.rust_codegen.items.const import Const
from atmfjstc.lib.rust_codegen.items.docs import Docs
from atmfjstc.lib.rust_codegen.items.enums import Enum, Variant
from atmfjstc.lib.rust_codegen.items.fields import Field
from atmfjstc.lib.rust_codegen.items.function import Block, Function
from atmfjstc.lib.rust_codegen.items.impl import Impl
from atmfjstc.lib.rust_codegen.items.imports import Import
from atmfjstc.lib.rust_codegen.items.license import License, LicenseType
from atmfjstc.lib.rust_codegen.items.struct import Struct
from atmfjstc.lib.rust_codegen.items.trait import AssociatedType, Trait
from atmfjstc.lib.rust_codegen.items.type import Bound, Type
