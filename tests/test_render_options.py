import unittest

from dataclasses import FrozenInstanceError

from atmfjstc.lib.rust_codegen.RenderOptions import RenderOptions


class RenderOptionsTest(unittest.TestCase):
    def test_defaults(self):
        options = RenderOptions()
        self.assertEqual(options.indent, 4)
        self.assertEqual(options.indent_unit, '    ')

    def test_tabs(self):
        self.assertEqual(RenderOptions(use_tabs=True).indent_unit, '\t')

    def test_derive(self):
        options = RenderOptions()
        derived = options.derive(indent=2)

        self.assertEqual(derived.indent, 2)
        self.assertFalse(derived.use_tabs)
        self.assertEqual(options.indent, 4)

    def test_derive_keeps_unspecified(self):
        options = RenderOptions(indent=8, use_tabs=True)
        self.assertEqual(options.derive(), options)

    def test_immutable(self):
        with self.assertRaises(FrozenInstanceError):
            RenderOptions().indent = 3

    def test_negative_indent(self):
        with self.assertRaises(ValueError):
            RenderOptions(indent=-1)
