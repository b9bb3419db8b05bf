from abc import ABCMeta, abstractmethod

from atmfjstc.lib.ez_repr import EZRepr

from atmfjstc.lib.rust_codegen.Formatter import Formatter


class Item(EZRepr, metaclass=ABCMeta):
    """
    Base class for everything that can be placed in a `Scope` and rendered as a top-level declaration.
    """

    @abstractmethod
    def render(self, fmt: Formatter):
        """
        Renders this item into a formatter.

        The item starts at the formatter's current indentation depth and must leave the output at the start of a new
        line, i.e. the last thing it writes is a newline.

        Args:
            fmt: The Formatter to write to. Its indentation depth must be the same on return as it was on entry.
        """
        raise NotImplementedError
