import unittest

from atmfjstc.lib.rust_codegen.errors import DuplicateModuleError
from atmfjstc.lib.rust_codegen.RenderOptions import RenderOptions
from atmfjstc.lib.rust_codegen.scope import Scope, Module
from atmfjstc.lib.rust_codegen.items.comment import Comment
from atmfjstc.lib.rust_codegen.items.docs import Docs
from atmfjstc.lib.rust_codegen.items.license import License, LicenseType
from atmfjstc.lib.rust_codegen.items.struct import Struct


class ImportTest(unittest.TestCase):
    def test_same_pair_returns_same_record(self):
        scope = Scope()

        first = scope.import_('std::io', 'Read')
        second = scope.import_('std::io', 'Read')

        self.assertIs(first, second)
        self.assertEqual(scope.to_string().count('Read'), 1)

    def test_grouping(self):
        scope = Scope()
        scope.import_('std::fmt', 'Display')
        scope.import_('std::io', 'Read')
        scope.import_('std::io', 'Write')

        self.assertEqual(scope.to_string(), "use std::fmt::Display;\nuse std::io::{Read, Write};\n")

    def test_paths_in_registration_order(self):
        scope = Scope()
        scope.import_('std::io', 'Read')
        scope.import_('std::io', 'Write')
        scope.import_('std::fmt', 'Display')

        self.assertEqual(scope.to_string(), "use std::io::{Read, Write};\nuse std::fmt::Display;\n")

    def test_duplicate_import_keeps_single_line(self):
        scope = Scope()
        scope.import_('std::io', 'Read')
        scope.import_('std::fmt', 'Display')
        scope.import_('std::io', 'Read')

        self.assertEqual(scope.to_string(), "use std::io::Read;\nuse std::fmt::Display;\n")

    def test_grouped_by_visibility(self):
        scope = Scope()
        scope.import_('a', 'X').vis('pub')
        scope.import_('b', 'Y')
        scope.import_('a', 'Z')
        scope.import_('b', 'W').vis('pub')

        self.assertEqual(scope.to_string(), "pub use a::X;\npub use b::W;\nuse a::Z;\nuse b::Y;\n")

    def test_visibility_changed_after_import(self):
        scope = Scope()
        scope.import_('std::io', 'Read')
        scope.import_('std::io', 'Write')
        scope.import_('std::io', 'Read').vis('pub(crate)')

        self.assertEqual(scope.to_string(), "pub(crate) use std::io::Read;\nuse std::io::Write;\n")

    def test_nested_type_imports_first_segment(self):
        scope = Scope()
        scope.import_('std', 'fmt::Display')

        self.assertEqual(scope.to_string(), "use std::fmt;\n")

    def test_blank_line_before_items(self):
        scope = Scope()
        scope.import_('std::io', 'Read')
        scope.raw('fn main() {}')

        self.assertEqual(scope.to_string(), "use std::io::Read;\n\nfn main() {}")

    def test_empty_path(self):
        with self.assertRaises(ValueError):
            Scope().import_('', 'Read')

    def test_empty_type(self):
        with self.assertRaises(ValueError):
            Scope().import_('std::io', '')

        with self.assertRaises(ValueError):
            Scope().import_('std', '::io')

    def test_repr(self):
        self.assertTrue(repr(Scope().import_('std::io', 'Read')).startswith('Import'))


class ItemsTest(unittest.TestCase):
    def test_separated_by_single_blank_lines(self):
        scope = Scope()
        scope.raw('a')
        scope.raw('b')
        scope.raw('c')

        self.assertEqual(scope.to_string(), "a\n\nb\n\nc")

    def test_single_item(self):
        scope = Scope()
        scope.new_comment('hello')

        self.assertEqual(scope.to_string(), "// hello")

    def test_empty_scope(self):
        self.assertEqual(Scope().to_string(), "")

    def test_mixed_items_keep_insertion_order(self):
        scope = Scope()
        scope.new_struct('Foo')
        scope.new_const('MAX', 'usize', '3')
        scope.new_comment('done')

        self.assertEqual(scope.to_string(), "struct Foo;\n\nconst MAX: usize = 3;\n\n// done")

    def test_new_returns_live_item(self):
        scope = Scope()
        struct = scope.new_struct('Foo')

        self.assertIs(scope.items[-1], struct)

        struct.vis('pub')
        self.assertEqual(scope.to_string(), "pub struct Foo;")

    def test_push_returns_scope(self):
        scope = Scope()

        result = scope.push_struct(Struct('A')).push_comment(Comment('b')).raw('c')

        self.assertIs(result, scope)
        self.assertEqual(len(scope.items), 3)

    def test_builders_for_each_kind(self):
        scope = Scope()
        scope.new_fn('f').line('1')
        scope.new_trait('T')
        scope.new_enum('E')
        scope.new_impl('S')

        self.assertEqual(scope.to_string(), "fn f() {\n    1\n}\n\ntrait T {\n}\n\nenum E {\n}\n\nimpl S {\n}")

    def test_function_without_lines(self):
        scope = Scope()
        scope.new_fn('main')
        scope.new_impl('Foo').new_fn('new')

        self.assertEqual(scope.to_string(), "fn main() {\n}\n\nimpl Foo {\n    fn new() {\n    }\n}")

    def test_render_is_stable(self):
        scope = Scope()
        scope.import_('std::io', 'Read')
        scope.new_struct('Foo').field('a', 'u8')
        scope.new_fn('f').line('todo!()')

        self.assertEqual(scope.to_string(), scope.to_string())

    def test_str(self):
        scope = Scope()
        scope.raw('x')

        self.assertEqual(str(scope), scope.to_string())

    def test_trailing_newline_trimmed(self):
        scope = Scope()
        scope.new_struct('Foo').field('a', 'u8')

        text = scope.to_string()

        self.assertFalse(text.endswith('\n'))
        self.assertEqual(text, "struct Foo {\n    a: u8,\n}")

    def test_options(self):
        scope = Scope()
        scope.new_fn('f').line('x')

        self.assertEqual(scope.to_string(RenderOptions(indent=2)), "fn f() {\n  x\n}")

    def test_logs_render(self):
        with self.assertLogs('atmfjstc.lib.rust_codegen.scope', level='DEBUG'):
            Scope().to_string()


class HeaderTest(unittest.TestCase):
    def test_docs(self):
        scope = Scope()
        scope.docs(Docs('Top level'))
        scope.raw('x')

        self.assertEqual(scope.to_string(), "/// Top level\nx")

    def test_docs_overwritten(self):
        scope = Scope()
        scope.docs(Docs('First'))
        scope.docs(Docs('Second'))

        self.assertEqual(scope.to_string(), "/// Second")

    def test_full_order(self):
        scope = Scope()
        scope.raw('struct A;')
        scope.import_('std::io', 'Read')
        scope.docs(Docs('Docs'))
        scope.license(License('', LicenseType.BSD))

        self.assertEqual(
            scope.to_string(),
            "//\n// SPDX-License-Identifier: BSD\n//\n\n/// Docs\nuse std::io::Read;\n\nstruct A;"
        )


class ModuleTest(unittest.TestCase):
    def test_push_duplicate_fails(self):
        scope = Scope()
        scope.push_module(Module('foo'))

        with self.assertRaises(DuplicateModuleError) as ctx:
            scope.push_module(Module('foo'))

        self.assertEqual(ctx.exception.module_name, 'foo')
        self.assertEqual(len(scope.items), 1)

    def test_new_duplicate_fails(self):
        scope = Scope()
        scope.new_module('foo')

        with self.assertRaises(DuplicateModuleError):
            scope.new_module('foo')

    def test_get_or_new(self):
        scope = Scope()

        first = scope.get_or_new_module('foo')
        second = scope.get_or_new_module('foo')

        self.assertIs(first, second)
        self.assertEqual(len(scope.items), 1)

    def test_get(self):
        scope = Scope()
        module = scope.new_module('foo')

        self.assertIs(scope.get_module('foo'), module)
        self.assertIs(scope.get_module_mut('foo'), module)
        self.assertIsNone(scope.get_module('bar'))

    def test_same_name_in_different_scopes(self):
        scope = Scope()
        scope.new_module('foo').new_module('foo')

        self.assertEqual(scope.to_string(), "mod foo {\n    mod foo {\n    }\n}")

    def test_render(self):
        scope = Scope()
        scope.new_module('foo').vis('pub').new_struct('Bar')

        self.assertEqual(scope.to_string(), "pub mod foo {\n    struct Bar;\n}")

    def test_nested_scope(self):
        scope = Scope()
        module = scope.new_module('foo')
        module.import_('std::io', 'Read')
        module.new_fn('f').line('x')

        self.assertEqual(
            scope.to_string(),
            "mod foo {\n    use std::io::Read;\n\n    fn f() {\n        x\n    }\n}"
        )

    def test_attributes_and_docs(self):
        scope = Scope()
        scope.new_module('tests').doc('Unit tests').attr('cfg(test)')

        self.assertEqual(scope.to_string(), "/// Unit tests\n#[cfg(test)]\nmod tests {\n}")

    def test_deep_nesting(self):
        scope = Scope()
        scope.get_or_new_module('a').get_or_new_module('b').new_struct('C').field('d', 'u8')

        self.assertEqual(
            scope.to_string(),
            "mod a {\n    mod b {\n        struct C {\n            d: u8,\n        }\n    }\n}"
        )

    def test_invalid_name(self):
        with self.assertRaises(ValueError):
            Module('')
